"""Synthesize bundler and test-runner config files from fragments."""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from reactkit.core.logger import get_logger
from reactkit.core.merge import merge_all
from reactkit.features import FeatureSelection, script_extension
from reactkit.synth.document import render_document
from reactkit.synth.fragments import BASE_FRAGMENT, FragmentLoader

logger = get_logger(__name__)


@dataclass(frozen=True)
class SynthesisTarget:
    """A generated config file.

    Attributes:
        name: Fragment subdirectory name
        filename: Output path relative to the project root
        preamble: Source emitted before ``module.exports``
        test_runner: Whether the file belongs to the test runner (can be disabled)
    """

    name: str
    filename: str
    preamble: str = ""
    test_runner: bool = False


WEBPACK = SynthesisTarget(
    name="webpack",
    filename="webpack.config.js",
    preamble=(
        "const path = require('path');\n"
        "const HtmlWebpackPlugin = require('html-webpack-plugin');\n"
    ),
)

JEST = SynthesisTarget(
    name="jest",
    filename="jest.config.js",
    preamble="/** @type {import('jest').Config} */\n",
    test_runner=True,
)

TARGETS = (WEBPACK, JEST)


def synthesize(
    base_document: Mapping[str, Any],
    ordered_fragments: Iterable[Mapping[str, Any]],
    preamble: str = "",
) -> str:
    """Merge fragments onto a base document and render it as a CommonJS module.

    Fragments are folded in order. Lists always concatenate, so every
    fragment can append rules or extensions without dropping earlier ones.

    Args:
        base_document: Settings common to every build
        ordered_fragments: Fragments in selection order
        preamble: Source placed before ``module.exports``

    Returns:
        Source text of the config module
    """
    document = merge_all(dict(base_document), ordered_fragments)
    rendered = render_document(document)
    return f"{preamble}module.exports = {rendered.text};\n"


class Synthesizer:
    """Builds config files for a feature selection."""

    def __init__(self, loader: FragmentLoader, dev_server_port: int = 3000):
        self.loader = loader
        self.dev_server_port = dev_server_port

    def context(self, language: str) -> Dict[str, Any]:
        """Variables available to fragment files."""
        return {
            "language": language,
            "script_ext": script_extension(language),
            "dev_server_port": self.dev_server_port,
        }

    def is_applicable(self, target: SynthesisTarget, include_test_runner: bool = True) -> bool:
        if target.test_runner and not include_test_runner:
            return False
        return self.loader.has_fragment(target.name, BASE_FRAGMENT)

    def fragments_for(
        self,
        target: SynthesisTarget,
        selection: FeatureSelection,
        language: str,
    ) -> List[Dict[str, Any]]:
        """Collect the language fragment then each feature's fragment, in order."""
        context = self.context(language)
        fragments = []
        for name in [language, *selection.names]:
            fragment = self.loader.load(target.name, name, context)
            if fragment is None:
                continue
            logger.debug(f"{target.filename}: applying fragment '{name}'")
            fragments.append(fragment)
        return fragments

    def render(
        self,
        target: SynthesisTarget,
        selection: FeatureSelection,
        language: str,
    ) -> str:
        """Return the source of ``target`` for ``selection``."""
        base = self.loader.load_base(target.name, self.context(language))
        return synthesize(
            base,
            self.fragments_for(target, selection, language),
            preamble=target.preamble,
        )

    def write(
        self,
        target: SynthesisTarget,
        project_path: Path,
        selection: FeatureSelection,
        language: str,
    ) -> Path:
        """Render ``target`` and write it into ``project_path``, replacing any copy."""
        output = Path(project_path) / target.filename
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(self.render(target, selection, language), encoding="utf-8")
        return output

    def write_all(
        self,
        project_path: Path,
        selection: FeatureSelection,
        language: str,
        include_test_runner: bool = True,
        targets: Optional[Iterable[SynthesisTarget]] = None,
    ) -> List[Path]:
        """Write every applicable target; returns the written paths."""
        written = []
        for target in targets or TARGETS:
            if not self.is_applicable(target, include_test_runner):
                logger.debug(f"Skipping {target.filename}")
                continue
            written.append(self.write(target, project_path, selection, language))
        return written
