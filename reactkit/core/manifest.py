"""Deep-merge JSON manifests such as package.json and .eslintrc.json."""
import json
from pathlib import Path
from typing import Any, Dict, Optional

from reactkit.core.errors import MalformedManifestError, MissingManifestError
from reactkit.core.logger import get_logger
from reactkit.core.merge import deep_merge

logger = get_logger(__name__)

PACKAGE_MANIFEST = "package.json"
LINT_MANIFEST = ".eslintrc.json"

# Manifests a feature template may carry, merged in this order
MANIFEST_FILES = (PACKAGE_MANIFEST, LINT_MANIFEST)


def load_manifest(path: Path) -> Dict[str, Any]:
    """Read a JSON manifest whose top level must be an object.

    Raises:
        MissingManifestError: If ``path`` does not exist
        MalformedManifestError: If the file is not a JSON object
    """
    path = Path(path)
    if not path.is_file():
        raise MissingManifestError(path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise MalformedManifestError(path, f"invalid JSON ({e})") from e

    if not isinstance(data, dict):
        raise MalformedManifestError(
            path, f"expected a JSON object, got {type(data).__name__}"
        )
    return data


def dump_manifest(data: Dict[str, Any]) -> str:
    """Serialize a manifest the way npm writes package.json."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def merge_manifest(
    base_path: Path,
    fragment_path: Path,
    out_path: Optional[Path] = None,
    *,
    project_name: Optional[str],
) -> Dict[str, Any]:
    """Merge the manifest at ``fragment_path`` into the one at ``base_path``.

    Mappings merge recursively, lists concatenate (fragment after base) and
    scalars from the fragment win. The ``name`` field is then forced to
    ``project_name``; pass ``None`` for documents without an identity field,
    such as .eslintrc.json, where ESLint rejects unknown top-level keys.
    The fragment file is never written.

    Args:
        base_path: Manifest being extended
        fragment_path: Manifest contributed by a feature template
        out_path: Where to write the result (defaults to ``base_path``)
        project_name: Identity to stamp into ``name``

    Returns:
        The merged document

    Raises:
        MissingManifestError: If either file is missing
        MalformedManifestError: If either file does not parse as a JSON object
    """
    base = load_manifest(base_path)
    fragment = load_manifest(fragment_path)

    merged = deep_merge(base, fragment)
    if project_name is not None:
        merged["name"] = project_name

    target = Path(out_path) if out_path is not None else Path(base_path)
    target.write_text(dump_manifest(merged), encoding="utf-8")
    logger.debug(f"Merged {fragment_path} into {target}")
    return merged


def stamp_identity(path: Path, project_name: str) -> Dict[str, Any]:
    """Set ``name`` in the manifest at ``path`` to ``project_name``.

    Raises:
        MissingManifestError: If ``path`` is missing
        MalformedManifestError: If ``path`` is not a JSON object
    """
    data = load_manifest(path)
    data["name"] = project_name
    Path(path).write_text(dump_manifest(data), encoding="utf-8")
    return data
