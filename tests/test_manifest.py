"""Tests for package.json and .eslintrc.json merging."""
import json

import pytest

from conftest import write_json
from reactkit.core.errors import ManifestError, MalformedManifestError, MissingManifestError
from reactkit.core.manifest import merge_manifest, stamp_identity


class TestMergeManifest:
    """Test manifest deep merge and identity override."""

    def test_merges_dependencies_and_forces_name(self, temp_dir):
        base = write_json(temp_dir / "project" / "package.json", {
            "name": "default-template",
            "dependencies": {"react": "^18.2.0"},
        })
        fragment = write_json(temp_dir / "sass" / "package.json", {
            "name": "sass-template",
            "devDependencies": {"sass": "^1.63.6"},
        })

        merged = merge_manifest(base, fragment, project_name="shop")

        on_disk = json.loads(base.read_text())
        assert on_disk == merged
        assert merged["name"] == "shop"
        assert merged["dependencies"] == {"react": "^18.2.0"}
        assert merged["devDependencies"] == {"sass": "^1.63.6"}

    def test_name_forced_even_when_inputs_lack_it(self, temp_dir):
        base = write_json(temp_dir / "a.json", {"version": "1.0.0"})
        fragment = write_json(temp_dir / "b.json", {"private": True})

        merged = merge_manifest(base, fragment, project_name="my-react-app")

        assert merged["name"] == "my-react-app"

    def test_lists_concatenate(self, temp_dir):
        base = write_json(temp_dir / ".eslintrc.json", {"extends": ["eslint:recommended"]})
        fragment = write_json(temp_dir / "lint.json", {"extends": ["airbnb", "airbnb/hooks"]})

        merged = merge_manifest(base, fragment, project_name=None)

        assert merged["extends"] == ["eslint:recommended", "airbnb", "airbnb/hooks"]
        assert "name" not in merged

    def test_fragment_file_untouched(self, temp_dir):
        base = write_json(temp_dir / "base.json", {"a": 1})
        fragment = write_json(temp_dir / "fragment.json", {"b": 2})
        original = fragment.read_text()

        merge_manifest(base, fragment, project_name="x")

        assert fragment.read_text() == original

    def test_out_path(self, temp_dir):
        base = write_json(temp_dir / "base.json", {"a": 1})
        fragment = write_json(temp_dir / "fragment.json", {"b": 2})
        out = temp_dir / "out.json"
        original = base.read_text()

        merge_manifest(base, fragment, out, project_name="x")

        assert json.loads(out.read_text()) == {"a": 1, "b": 2, "name": "x"}
        assert base.read_text() == original

    def test_output_format(self, temp_dir):
        base = write_json(temp_dir / "base.json", {"a": 1})
        fragment = write_json(temp_dir / "fragment.json", {})

        merge_manifest(base, fragment, project_name="x")

        assert base.read_text() == '{\n  "a": 1,\n  "name": "x"\n}\n'


class TestManifestErrors:
    """Test missing and malformed manifest reporting."""

    def test_missing_base(self, temp_dir):
        fragment = write_json(temp_dir / "fragment.json", {})
        with pytest.raises(MissingManifestError):
            merge_manifest(temp_dir / "missing.json", fragment, project_name="x")

    def test_missing_fragment_leaves_base_alone(self, temp_dir):
        base = write_json(temp_dir / "base.json", {"a": 1})
        original = base.read_text()

        with pytest.raises(MissingManifestError):
            merge_manifest(base, temp_dir / "missing.json", project_name="x")
        assert base.read_text() == original

    def test_invalid_json(self, temp_dir):
        base = write_json(temp_dir / "base.json", {"a": 1})
        fragment = temp_dir / "fragment.json"
        fragment.write_text("{not json")

        with pytest.raises(MalformedManifestError) as exc_info:
            merge_manifest(base, fragment, project_name="x")
        assert "invalid JSON" in str(exc_info.value)

    def test_non_object_top_level(self, temp_dir):
        base = write_json(temp_dir / "base.json", ["a"])
        fragment = write_json(temp_dir / "fragment.json", {})

        with pytest.raises(MalformedManifestError):
            merge_manifest(base, fragment, project_name="x")

    def test_errors_share_base_class(self):
        assert issubclass(MissingManifestError, ManifestError)
        assert issubclass(MalformedManifestError, ManifestError)


class TestStampIdentity:
    """Test setting the project name on a single manifest."""

    def test_sets_name(self, temp_dir):
        path = write_json(temp_dir / "package.json", {"name": "template", "version": "0.1.0"})

        stamp_identity(path, "shop")

        assert json.loads(path.read_text()) == {"name": "shop", "version": "0.1.0"}
