"""Render the App component for a new project."""
from typing import Iterable, List

from reactkit.features import TS, get_feature, script_extension


def stub_filename(language: str) -> str:
    """Project-relative path of the App component (``src/App.js`` or ``src/App.tsx``)."""
    return f"src/App.{script_extension(language)}"


def render_stub(selected_features: Iterable[str], language: str = "js") -> str:
    """Build the App component source for ``selected_features``.

    Feature imports follow selection order and the rendered list shows every
    selected feature. The output depends only on the arguments.

    Args:
        selected_features: Feature names in selection order
        language: ``js`` or ``ts``

    Returns:
        Component source text
    """
    script_extension(language)  # rejects unknown languages
    features = list(selected_features)
    typed = language == TS

    lines: List[str] = []
    if typed:
        lines.append("import React, { FC } from 'react';")
    else:
        lines.append("import React from 'react';")

    for name in features:
        lines.extend(get_feature(name).stub_imports)

    lines.append("")
    lines.append("function App()" + (": React.ReactElement" if typed else "") + " {")
    lines.append("  return (")
    lines.append('    <div className="App">')
    lines.append("      I'm a react app...")
    if features:
        lines.append("      <ul>")
        lines.extend(f"        <li>{name}</li>" for name in features)
        lines.append("      </ul>")
    lines.append("    </div>")
    lines.append("  );")
    lines.append("}")
    lines.append("")
    lines.append("export default App;")

    return "\n".join(lines) + "\n"
