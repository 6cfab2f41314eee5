"""Configuration documents and their rendering to JavaScript source.

A configuration document is plain JSON-like data, except that some leaves
have no literal form (regular expressions, ``new Plugin(...)`` calls). Those
leaves are :class:`Opaque` values. They behave as scalars while fragments
are merged, and are spliced into the output as raw source after the
literal parts have been serialized.
"""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from reactkit.core.merge import NodeKind, classify

SENTINEL_PREFIX = "__reactkit_opaque_"


@dataclass(frozen=True)
class Opaque:
    """A JavaScript source fragment emitted verbatim, e.g. ``/\\.scss$/``."""

    source: str

    def __str__(self) -> str:
        return self.source


@dataclass
class RenderedDocument:
    """Result of :func:`render_document`.

    Attributes:
        text: Final source text with every opaque fragment spliced in
        serialized: Literal serialization before substitution
        substitutions: Sentinel (unquoted) to source fragment, in document order
    """

    text: str
    serialized: str
    substitutions: List[Tuple[str, str]] = field(default_factory=list)


def _replace_opaque(node: Any, salt: int, found: List[Tuple[str, str]]) -> Any:
    kind = classify(node)
    if kind is NodeKind.MAPPING:
        return {key: _replace_opaque(value, salt, found) for key, value in node.items()}
    if kind is NodeKind.SEQUENCE:
        return [_replace_opaque(item, salt, found) for item in node]
    if isinstance(node, Opaque):
        sentinel = f"{SENTINEL_PREFIX}{salt}_{len(found)}__"
        found.append((sentinel, node.source))
        return sentinel
    return node


def _collision_free(serialized: str, substitutions: List[Tuple[str, str]]) -> bool:
    sources = [source for _, source in substitutions]
    return all(
        serialized.count(sentinel) == 1
        and not any(sentinel in source for source in sources)
        for sentinel, _ in substitutions
    )


def render_document(document: Dict[str, Any], indent: int = 4) -> RenderedDocument:
    """Serialize ``document`` to a JavaScript object literal.

    Each :class:`Opaque` leaf is first swapped for a sentinel string and the
    tree is dumped as JSON. The salt in the sentinel is bumped until every
    sentinel occurs exactly once in that dump, so literal data can never be
    mistaken for a placeholder. Each quoted sentinel is then replaced by its
    source fragment.

    Args:
        document: Merged configuration document
        indent: Indentation width of the emitted literal

    Returns:
        RenderedDocument with the final text and the intermediate form
    """
    salt = 0
    while True:
        substitutions: List[Tuple[str, str]] = []
        literal = _replace_opaque(document, salt, substitutions)
        serialized = json.dumps(literal, indent=indent, ensure_ascii=False)
        if _collision_free(serialized, substitutions):
            break
        salt += 1

    text = serialized
    for sentinel, source in substitutions:
        text = text.replace(json.dumps(sentinel), source, 1)
    return RenderedDocument(text=text, serialized=serialized, substitutions=substitutions)
