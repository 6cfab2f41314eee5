"""Tests for the recursive document merge."""
import pytest

from reactkit.core.merge import NodeKind, classify, deep_merge, merge_all
from reactkit.synth.document import Opaque


class TestClassify:
    """Test node kind detection."""

    @pytest.mark.parametrize("value,kind", [
        ({"a": 1}, NodeKind.MAPPING),
        ([1, 2], NodeKind.SEQUENCE),
        ((1, 2), NodeKind.SEQUENCE),
        ("text", NodeKind.SCALAR),
        (b"bytes", NodeKind.SCALAR),
        (3, NodeKind.SCALAR),
        (None, NodeKind.SCALAR),
        (Opaque("/x/"), NodeKind.SCALAR),
    ])
    def test_kinds(self, value, kind):
        assert classify(value) is kind


class TestDeepMerge:
    """Test merge rules for mappings, sequences and scalars."""

    def test_sequences_concatenate(self):
        """Fragment rules are appended after base rules."""
        merged = deep_merge({"rules": ["X"]}, {"rules": ["Y"]})
        assert merged == {"rules": ["X", "Y"]}

    def test_sequences_keep_duplicates(self):
        merged = deep_merge({"extensions": [".js"]}, {"extensions": [".js", ".ts"]})
        assert merged["extensions"] == [".js", ".js", ".ts"]

    def test_nested_mappings_merge(self):
        base = {"module": {"rules": [1]}, "mode": "development"}
        fragment = {"module": {"rules": [2], "strict": True}}
        assert deep_merge(base, fragment) == {
            "module": {"rules": [1, 2], "strict": True},
            "mode": "development",
        }

    def test_fragment_scalar_wins(self):
        assert deep_merge({"mode": "development"}, {"mode": "production"}) == {
            "mode": "production"
        }

    def test_mismatched_kinds_take_fragment(self):
        """A list replacing a mapping (or vice versa) is a scalar-style overwrite."""
        assert deep_merge({"use": {"loader": "a"}}, {"use": ["b"]}) == {"use": ["b"]}
        assert deep_merge({"use": ["b"]}, {"use": "c"}) == {"use": "c"}

    def test_key_order(self):
        """Base keys keep their order and new keys follow."""
        merged = deep_merge({"b": 1, "a": 2}, {"c": 3, "a": 4})
        assert list(merged) == ["b", "a", "c"]

    def test_inputs_not_mutated(self):
        base = {"rules": [{"test": "x"}]}
        fragment = {"rules": [{"test": "y"}]}
        merged = deep_merge(base, fragment)
        merged["rules"][0]["test"] = "changed"

        assert base == {"rules": [{"test": "x"}]}
        assert fragment == {"rules": [{"test": "y"}]}

    def test_opaque_is_overwritten_like_scalar(self):
        merged = deep_merge({"test": Opaque("/a/")}, {"test": Opaque("/b/")})
        assert merged == {"test": Opaque("/b/")}


class TestMergeAll:
    """Test folding several fragments in order."""

    def test_selection_order_precedence(self):
        """The fragment folded last wins a scalar conflict."""
        base = {"mode": "development"}
        a = {"mode": "a"}
        b = {"mode": "b"}

        assert merge_all(base, [a, b])["mode"] == "b"
        assert merge_all(base, [b, a])["mode"] == "a"

    def test_rules_accumulate_across_fragments(self):
        base = {"module": {"rules": []}}
        fragments = [{"module": {"rules": ["ts"]}}, {"module": {"rules": ["scss"]}}]
        assert merge_all(base, fragments) == {"module": {"rules": ["ts", "scss"]}}

    def test_no_fragments_returns_copy(self):
        base = {"plugins": ["p"]}
        merged = merge_all(base, [])
        assert merged == base
        assert merged is not base
