"""Build-tool config synthesis: merge fragments as data, render as source."""

from .document import Opaque, RenderedDocument, render_document
from .fragments import FragmentLoader
from .synthesizer import TARGETS, SynthesisTarget, Synthesizer, synthesize

__all__ = [
    "Opaque",
    "RenderedDocument",
    "render_document",
    "FragmentLoader",
    "TARGETS",
    "SynthesisTarget",
    "Synthesizer",
    "synthesize",
]
