"""Load per-target config fragments from YAML files.

Fragments live in ``<fragments_dir>/<target>/<name>.yml``. ``base.yml`` is
the document every build starts from, ``js.yml``/``ts.yml`` are applied for
the project language and ``<feature>.yml`` for each selected feature.

Values with no literal form are tagged ``!js`` and load as
:class:`~reactkit.synth.document.Opaque`::

    module:
      rules:
        - test: !js '/\\.scss$/'
          use: [style-loader, css-loader, sass-loader]

``${name}`` variables are substituted into the raw text before parsing.
"""
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from reactkit.core.errors import FragmentError
from reactkit.synth.document import Opaque

BASE_FRAGMENT = "base"


class FragmentYamlLoader(yaml.SafeLoader):
    """SafeLoader that understands the ``!js`` tag."""


def _construct_opaque(loader: FragmentYamlLoader, node: yaml.Node) -> Opaque:
    return Opaque(loader.construct_scalar(node))


FragmentYamlLoader.add_constructor("!js", _construct_opaque)


class FragmentLoader:
    """Loads configuration fragments for synthesis targets."""

    def __init__(self, fragments_dir: Path):
        """Initialize fragment loader.

        Args:
            fragments_dir: Directory containing one subdirectory per target
        """
        self.fragments_dir = Path(fragments_dir)

    def fragment_path(self, target: str, name: str) -> Path:
        return self.fragments_dir / target / f"{name}.yml"

    def has_fragment(self, target: str, name: str) -> bool:
        return self.fragment_path(target, name).is_file()

    def list_targets(self) -> List[str]:
        """List targets that have a base fragment."""
        if not self.fragments_dir.is_dir():
            return []
        return sorted(
            d.name for d in self.fragments_dir.iterdir()
            if (d / f"{BASE_FRAGMENT}.yml").is_file()
        )

    def load(
        self,
        target: str,
        name: str,
        context: Optional[Mapping[str, Any]] = None,
    ) -> Optional[Dict[str, Any]]:
        """Load one fragment, or ``None`` if the target has no such fragment.

        Args:
            target: Target name (e.g. ``webpack``)
            name: Fragment name (``base``, a language or a feature)
            context: Values for ``${name}`` variables

        Returns:
            The fragment document

        Raises:
            FragmentError: If the file is not valid YAML or not a mapping
        """
        path = self.fragment_path(target, name)
        if not path.is_file():
            return None

        text = path.read_text(encoding="utf-8")
        for key, value in (context or {}).items():
            text = text.replace(f"${{{key}}}", str(value))

        try:
            data = yaml.load(text, Loader=FragmentYamlLoader)
        except yaml.YAMLError as e:
            raise FragmentError(f"Invalid fragment {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise FragmentError(
                f"Fragment {path} must be a mapping, got {type(data).__name__}"
            )
        return data

    def load_base(self, target: str, context: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Load the base document of ``target``.

        Raises:
            FragmentError: If the target has no base fragment
        """
        base = self.load(target, BASE_FRAGMENT, context)
        if base is None:
            raise FragmentError(
                f"Target '{target}' has no base fragment at "
                f"{self.fragment_path(target, BASE_FRAGMENT)}"
            )
        return base
