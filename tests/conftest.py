"""Shared test fixtures for reactkit tests."""
import json
import tempfile
from pathlib import Path

import pytest

from reactkit.core.config import DEFAULT_FRAGMENTS_DIR, ReactkitConfig


@pytest.fixture
def temp_dir():
    """Create temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp:
        yield Path(temp)


def write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2))
    return path


@pytest.fixture
def template_root(temp_dir):
    """Small template tree: default plus sass and classnames overlays."""
    root = temp_dir / "templates"

    default = root / "default"
    write_json(default / "package.json", {
        "name": "template-name",
        "version": "0.1.0",
        "dependencies": {"react": "^18.2.0"},
        "keywords": ["react"],
    })
    (default / "src").mkdir(parents=True)
    (default / "src" / "App.js").write_text("// default app\n")
    (default / "src" / "App.css").write_text(".App {}\n")
    (default / "src" / "index.js").write_text("// default index\n")

    sass = root / "sass"
    write_json(sass / "package.json", {
        "name": "sass-feature",
        "devDependencies": {"sass": "^1.63.6"},
        "keywords": ["sass"],
    })
    (sass / "src").mkdir(parents=True)
    (sass / "src" / "App.scss").write_text(".App {}\n")
    (sass / "src" / "App.js").write_text("// sass app\n")

    classnames = root / "classnames"
    write_json(classnames / "package.json", {
        "dependencies": {"classnames": "^2.3.2"},
        "keywords": ["classnames"],
    })

    return root


@pytest.fixture
def composer_config(template_root):
    """Config pointing at the test templates and the bundled fragments."""
    return ReactkitConfig(
        template_dir=template_root,
        fragments_dir=DEFAULT_FRAGMENTS_DIR,
    )
