"""Compose a React project from the default template and feature overlays."""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Union

from reactkit.core.config import ReactkitConfig, get_config
from reactkit.core.errors import CompositionError, ManifestError
from reactkit.core.file_tree import merge_tree
from reactkit.core.logger import get_logger
from reactkit.core.manifest import (
    MANIFEST_FILES,
    PACKAGE_MANIFEST,
    merge_manifest,
    stamp_identity,
)
from reactkit.features import LANGUAGES, FeatureSelection
from reactkit.scaffold.stub import render_stub, stub_filename
from reactkit.synth.fragments import FragmentLoader
from reactkit.synth.synthesizer import Synthesizer

logger = get_logger(__name__)

DEFAULT_TEMPLATE = "default"
DEFAULT_PROJECT_NAME = "my-react-app"


class ComposeStage(Enum):
    """Composition steps, in the only order they may run."""

    INIT = 0
    DEFAULT_COPIED = 1
    CONFIGS_SYNTHESIZED = 2
    FEATURES_APPLIED = 3
    STUB_WRITTEN = 4
    CLEANED_UP = 5
    DONE = 6


@dataclass
class CompositionResult:
    """What a composition produced."""

    project_path: Path
    language: str
    features: List[str]
    stage: ComposeStage = ComposeStage.INIT
    written: List[Path] = field(default_factory=list)
    removed: List[Path] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


class ProjectComposer:
    """Builds a project directory from templates and config fragments.

    The sequence is fixed: copy the default template, synthesize config
    files for the whole selection, overlay each feature template and merge
    its manifests, write the App component, then delete files the selection
    made obsolete. There is no rollback; a failure leaves a partial project.

    A composer instance builds exactly one project.
    """

    def __init__(self, config: Optional[ReactkitConfig] = None):
        """Bind the composer to a config.

        Falling back to ``get_config()`` when ``config`` is omitted only
        serves command-line callers; library callers and tests pass one.
        """
        self.config = config or get_config()
        self.template_dir = Path(self.config.template_dir)
        self.synthesizer = Synthesizer(
            FragmentLoader(self.config.fragments_dir),
            dev_server_port=self.config.dev_server_port,
        )
        self.stage = ComposeStage.INIT
        self.result: Optional[CompositionResult] = None

    def _advance(self, stage: ComposeStage) -> None:
        if stage.value != self.stage.value + 1:
            raise CompositionError(
                f"Cannot move from {self.stage.name} to {stage.name}"
            )
        self.stage = stage
        if self.result is not None:
            self.result.stage = stage
        logger.debug(f"Stage: {stage.name}")

    def compose(
        self,
        project_name: str = DEFAULT_PROJECT_NAME,
        features: Union[FeatureSelection, Iterable[str]] = (),
        language: Optional[str] = None,
        parent_dir: Optional[Path] = None,
        force: bool = False,
    ) -> CompositionResult:
        """Create ``<parent_dir>/<project_name>``.

        Args:
            project_name: Directory name and package.json ``name``
            features: Feature names in selection order
            language: ``js`` or ``ts``; must agree with the selection, which
                implies ``ts`` exactly when ``typescript`` is selected
            parent_dir: Directory to create the project in. The cwd default
                is a convenience for command-line callers only
            force: Compose into an existing non-empty directory

        Returns:
            CompositionResult describing the created project

        Raises:
            CompositionError: If this composer already ran, or the target
                directory is not empty and ``force`` is False
            UnknownFeatureError: If a feature name is not registered
            ValueError: If ``language`` is unknown or contradicts the selection
            OSError: Filesystem failures, unchanged
        """
        if self.stage is not ComposeStage.INIT:
            raise CompositionError("This composer has already been used")

        selection = features if isinstance(features, FeatureSelection) else FeatureSelection(features)
        implied = selection.language()
        language = language or implied
        if language not in LANGUAGES:
            raise ValueError(f"language must be one of {', '.join(LANGUAGES)}, got '{language}'")
        if language != implied:
            raise ValueError(
                f"language '{language}' contradicts the selected features, which imply '{implied}'"
            )

        project_path = Path(parent_dir or Path.cwd()) / project_name
        if project_path.exists() and any(project_path.iterdir()) and not force:
            raise CompositionError(
                f"{project_path} already exists and is not empty (use --force to continue)"
            )

        self.result = CompositionResult(
            project_path=project_path,
            language=language,
            features=selection.names,
        )
        logger.info(f"✨ Creating React project: {project_name}")

        self._copy_default(project_path, project_name)
        self._synthesize_configs(project_path, selection, language)
        self._apply_features(project_path, selection, project_name)
        self._write_stub(project_path, selection, language)
        self._clean_up(project_path, selection)
        self._advance(ComposeStage.DONE)

        return self.result

    def _copy_default(self, project_path: Path, project_name: str) -> None:
        merge_tree(self.template_dir / DEFAULT_TEMPLATE, project_path)
        try:
            stamp_identity(project_path / PACKAGE_MANIFEST, project_name)
        except ManifestError as e:
            logger.warning(f"Could not set project name: {e}")
            self.result.warnings.append(str(e))
        logger.info("📁 Copied default template")
        self._advance(ComposeStage.DEFAULT_COPIED)

    def _synthesize_configs(
        self, project_path: Path, selection: FeatureSelection, language: str
    ) -> None:
        written = self.synthesizer.write_all(
            project_path,
            selection,
            language,
            include_test_runner=self.config.test_runner_config,
        )
        self.result.written.extend(written)
        for path in written:
            logger.info(f"🔧 Generated {path.name}")
        self._advance(ComposeStage.CONFIGS_SYNTHESIZED)

    def _apply_features(
        self, project_path: Path, selection: FeatureSelection, project_name: str
    ) -> None:
        """Overlay each feature template and merge its manifests.

        Only package.json gets the project name forced back in.
        .eslintrc.json is merged without one because ESLint rejects unknown
        top-level keys.
        """
        for feature in selection:
            feature_path = self.template_dir / feature.name
            if not feature_path.is_dir():
                logger.debug(f"No template for feature '{feature.name}', skipping overlay")
                continue

            merge_tree(feature_path, project_path)
            for manifest in MANIFEST_FILES:
                if not (feature_path / manifest).is_file():
                    continue
                try:
                    merge_manifest(
                        project_path / manifest,
                        feature_path / manifest,
                        project_name=project_name if manifest == PACKAGE_MANIFEST else None,
                    )
                except ManifestError as e:
                    logger.warning(f"Skipping {manifest} merge for '{feature.name}': {e}")
                    self.result.warnings.append(str(e))

            logger.info(f"➕ Added feature: {feature.name}")
        self._advance(ComposeStage.FEATURES_APPLIED)

    def _write_stub(
        self, project_path: Path, selection: FeatureSelection, language: str
    ) -> None:
        stub_path = project_path / stub_filename(language)
        stub_path.parent.mkdir(parents=True, exist_ok=True)
        stub_path.write_text(render_stub(selection.names, language), encoding="utf-8")
        self.result.written.append(stub_path)
        logger.info(f"📝 Wrote {stub_path.relative_to(project_path)}")
        self._advance(ComposeStage.STUB_WRITTEN)

    def _clean_up(self, project_path: Path, selection: FeatureSelection) -> None:
        for feature in selection:
            for relative in feature.obsolete_files:
                path = project_path / relative
                if path.is_file():
                    path.unlink()
                    self.result.removed.append(path)
                    logger.debug(f"Removed {relative} (obsolete with {feature.name})")
        self._advance(ComposeStage.CLEANED_UP)
