"""Recursive deep merge for JSON-like documents.

Documents are trees of three node kinds: mappings, sequences and scalars.
The merge rule is the same for package manifests, lint configs and bundler
config fragments:

- mapping + mapping: merge key by key
- sequence + sequence: fragment items are appended after base items
- anything else: the fragment value wins
"""
import copy
from collections.abc import Mapping
from enum import Enum
from typing import Any, Iterable


class NodeKind(Enum):
    """The shape of a document node."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


def classify(value: Any) -> NodeKind:
    """Return the node kind of ``value``.

    Strings and bytes are scalars even though they are iterable. Any object
    that is neither a mapping nor a list/tuple (including opaque source
    fragments) is a scalar.
    """
    if isinstance(value, Mapping):
        return NodeKind.MAPPING
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR


def deep_merge(base: Any, fragment: Any) -> Any:
    """Merge ``fragment`` on top of ``base`` and return a new document.

    Neither input is modified. Mapping keys keep the base's order, with keys
    new in the fragment appended in the fragment's order.

    Args:
        base: Document being extended
        fragment: Document whose values take precedence

    Returns:
        Merged document
    """
    base_kind = classify(base)
    fragment_kind = classify(fragment)

    if base_kind is NodeKind.MAPPING and fragment_kind is NodeKind.MAPPING:
        merged = {key: copy.deepcopy(value) for key, value in base.items()}
        for key, value in fragment.items():
            if key in merged:
                merged[key] = deep_merge(merged[key], value)
            else:
                merged[key] = copy.deepcopy(value)
        return merged

    if base_kind is NodeKind.SEQUENCE and fragment_kind is NodeKind.SEQUENCE:
        return [copy.deepcopy(item) for item in base] + [
            copy.deepcopy(item) for item in fragment
        ]

    return copy.deepcopy(fragment)


def merge_all(base: Any, fragments: Iterable[Any]) -> Any:
    """Fold ``fragments`` into ``base`` in order; later fragments win on scalars."""
    merged = copy.deepcopy(base)
    for fragment in fragments:
        merged = deep_merge(merged, fragment)
    return merged
