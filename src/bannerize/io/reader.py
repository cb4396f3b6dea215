"""Banner font reader.

This module parses a banner font stream into a GlyphTable. The format has
no header: for each code point of the layout, in ascending order, it holds
``glyph_height`` content rows followed by one separator row.
"""

from collections.abc import Iterable, Iterator

from bannerize.domain import STANDARD_LAYOUT, FontLayout, Glyph, GlyphTable
from bannerize.exceptions import FontFormatError


def _strip_terminator(line: str) -> str:
    """Remove a trailing LF or CRLF, keeping all other whitespace."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def _next_row(rows: Iterator[str], source: str, code_point: int, row: int) -> str:
    line = next(rows, None)
    if line is None:
        raise FontFormatError(
            source,
            f"unexpected end of font while reading row {row} of {chr(code_point)!r} "
            f"(code point {code_point})",
            code_point=code_point,
            row=row,
        )
    return _strip_terminator(line)


def load_glyph_table(
    stream: Iterable[str],
    layout: FontLayout = STANDARD_LAYOUT,
    source: str | None = None,
) -> GlyphTable:
    """Parse a banner font into a glyph table.

    Rows are taken verbatim apart from their line terminator. The separator
    row after each glyph is consumed and discarded without inspection.
    The stream is not closed.

    Args:
        stream: Open text stream (or any iterable of lines) positioned at
            the first row of the font
        layout: Glyph height and code-point range of the font
        source: Label for the stream used in error messages

    Returns:
        GlyphTable with one glyph per code point in the layout

    Raises:
        FontFormatError: If the stream ends before every glyph and its
            separator row have been read
    """
    label = source or str(getattr(stream, "name", "<stream>"))
    rows = iter(stream)
    glyphs: dict[str, Glyph] = {}

    for code_point in layout.code_points:
        char = chr(code_point)
        glyph_rows = tuple(
            _next_row(rows, label, code_point, row) for row in range(layout.glyph_height)
        )
        glyphs[char] = Glyph(char=char, rows=glyph_rows)
        _next_row(rows, label, code_point, layout.glyph_height)

    return GlyphTable(glyphs, layout=layout)
