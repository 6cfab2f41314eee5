"""Copy template file trees into a project without overwriting."""
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from reactkit.core.logger import get_logger

logger = get_logger(__name__)


@dataclass
class TreeMergeReport:
    """Relative paths touched by a single :func:`merge_tree` call."""

    copied: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)


def merge_tree(source_dir: Path, dest_dir: Path) -> TreeMergeReport:
    """Copy every file under ``source_dir`` into ``dest_dir``.

    Files that already exist in ``dest_dir`` are left alone, so whichever
    template populates a path first owns it. Contents are never merged.

    Args:
        source_dir: Template directory to copy from
        dest_dir: Project directory to copy into (created if missing)

    Returns:
        Report of copied and skipped paths, relative to ``dest_dir``

    Raises:
        FileNotFoundError: If ``source_dir`` is not a directory
        OSError: Any copy failure, unchanged
    """
    source_dir = Path(source_dir)
    dest_dir = Path(dest_dir)
    if not source_dir.is_dir():
        raise FileNotFoundError(f"Template directory not found: {source_dir}")

    report = TreeMergeReport()
    _merge_dir(source_dir, dest_dir, Path(), report)
    logger.debug(
        f"Merged {source_dir} into {dest_dir}: "
        f"{len(report.copied)} copied, {len(report.skipped)} skipped"
    )
    return report


def _merge_dir(source: Path, dest: Path, relative: Path, report: TreeMergeReport) -> None:
    dest.mkdir(parents=True, exist_ok=True)

    for entry in sorted(source.iterdir(), key=lambda p: p.name):
        target = dest / entry.name
        if entry.is_dir():
            _merge_dir(entry, target, relative / entry.name, report)
        elif entry.is_file():
            if target.exists():
                report.skipped.append(relative / entry.name)
                continue
            shutil.copyfile(entry, target)
            report.copied.append(relative / entry.name)
