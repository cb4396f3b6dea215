"""Core rendering for bannerize.

This module contains:

- Composition (glyph rows concatenated per input line)
- Render entry points tying the font library to composition

Composition functions are pure: they take a GlyphTable and lines and
return a string, with no I/O or hidden state.

Key functions:
- compose: Render lines with a glyph table
- split_lines: Split input text into lines
- render: Render text with a named banner

Key classes:
- BannerRenderer: Settings-driven renderer with statistics
"""

from bannerize.core.composer import (
    UNSUPPORTED_FILL,
    compose,
    count_unsupported,
    split_lines,
)
from bannerize.core.renderer import BannerRenderer, library_from_settings, render

__all__ = [
    "UNSUPPORTED_FILL",
    "BannerRenderer",
    "compose",
    "count_unsupported",
    "library_from_settings",
    "render",
    "split_lines",
]
