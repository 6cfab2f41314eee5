"""React project scaffolding: composer and source stubs."""

from .composer import CompositionResult, ComposeStage, ProjectComposer
from .stub import render_stub, stub_filename

__all__ = [
    "ProjectComposer",
    "CompositionResult",
    "ComposeStage",
    "render_stub",
    "stub_filename",
]
