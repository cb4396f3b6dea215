"""Banner font I/O layer for bannerize.

This module handles locating and parsing banner font files. It keeps file
handling out of the pure composition code.

Key responsibilities:
- Parse a banner font stream into a GlyphTable
- Map banner names to font files in a directory
- Scope the lifetime of open font files
- Optionally cache loaded tables

Key classes and functions:
- load_glyph_table: Parse a font stream
- FontLibrary: Look up and load banners by name
"""

from bannerize.io.library import FontLibrary
from bannerize.io.reader import load_glyph_table

__all__ = [
    "FontLibrary",
    "load_glyph_table",
]
