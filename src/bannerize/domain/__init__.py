"""Domain models for bannerize.

This module contains the models describing a loaded banner font. All models
are immutable once built and independent of where the font came from.

Key classes:
- FontLayout: Glyph height and code-point range of a font file
- Glyph: Fixed-height rows drawing one character
- GlyphTable: Read-only character to glyph lookup
"""

from bannerize.domain.glyph import STANDARD_LAYOUT, FontLayout, Glyph, GlyphTable

__all__: list[str] = [
    "STANDARD_LAYOUT",
    "FontLayout",
    "Glyph",
    "GlyphTable",
]
