"""Feature registry and ordered feature selection."""
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from reactkit.core.errors import UnknownFeatureError

JS = "js"
TS = "ts"
LANGUAGES = (JS, TS)


@dataclass(frozen=True)
class Feature:
    """An optional template overlay the caller can select.

    Attributes:
        name: Identifier; also the template directory and fragment file name
        alias: Single-letter CLI alias
        description: One-line help text
        stub_imports: Import lines the feature adds to the App component
        obsolete_files: Project-relative files removed once the feature is applied
        language: Language the feature switches the project to, if any
    """

    name: str
    alias: str
    description: str
    stub_imports: Tuple[str, ...] = ()
    obsolete_files: Tuple[str, ...] = ()
    language: Optional[str] = None

    @property
    def flag(self) -> str:
        return f"--{self.name}"


# Registry order is the order boolean CLI flags are applied in
FEATURES: Dict[str, Feature] = {
    feature.name: feature
    for feature in (
        Feature(
            name="typescript",
            alias="t",
            description="Use TypeScript",
            obsolete_files=("src/index.js", "src/App.js", "src/App.test.js"),
            language=TS,
        ),
        Feature(
            name="sass",
            alias="s",
            description="Use Sass",
            stub_imports=("import './App.scss';",),
            obsolete_files=("src/App.css",),
        ),
        Feature(
            name="classnames",
            alias="c",
            description="Use Classnames library",
            stub_imports=("import classNames from 'classnames';",),
        ),
        Feature(
            name="linting",
            alias="l",
            description="Use Airbnb linting rules",
        ),
    )
}


def get_feature(name: str) -> Feature:
    """Look up a registered feature by name.

    Raises:
        UnknownFeatureError: If ``name`` is not registered
    """
    try:
        return FEATURES[name]
    except KeyError:
        raise UnknownFeatureError(name, FEATURES) from None


class FeatureSelection:
    """Ordered, duplicate-free set of selected features.

    Selection order is merge precedence: a feature selected later overrides
    scalar values set by one selected earlier.
    """

    def __init__(self, names: Iterable[str] = ()):
        self._features: List[Feature] = []
        for name in names:
            self.add(name)

    def add(self, name: str) -> None:
        """Append ``name`` unless it is already selected."""
        feature = get_feature(name)
        if feature not in self._features:
            self._features.append(feature)

    @property
    def names(self) -> List[str]:
        return [feature.name for feature in self._features]

    def language(self) -> str:
        """Language implied by the selection (``ts`` if any feature asks for it)."""
        for feature in self._features:
            if feature.language:
                return feature.language
        return JS

    def __iter__(self) -> Iterator[Feature]:
        return iter(self._features)

    def __len__(self) -> int:
        return len(self._features)

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __repr__(self) -> str:
        return f"FeatureSelection({self.names!r})"


def script_extension(language: str) -> str:
    """Entry-point extension for ``language`` (``js`` or ``tsx``)."""
    if language not in LANGUAGES:
        raise ValueError(f"language must be one of {', '.join(LANGUAGES)}, got '{language}'")
    return "tsx" if language == TS else "js"
