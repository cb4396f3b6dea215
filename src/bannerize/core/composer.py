"""Text composition from a glyph table.

Pure functions only: no I/O, no logging, no state between calls.
"""

from collections.abc import Iterable

from bannerize.domain import GlyphTable

# Drawn in place of any character missing from the table
UNSUPPORTED_FILL = " "


def split_lines(text: str) -> list[str]:
    """Split input text into lines for composition.

    Lines are split on LF; a trailing CR on each line is dropped so CRLF
    input renders like LF input. Empty text is a single empty line.
    """
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def compose(table: GlyphTable, lines: Iterable[str]) -> str:
    """Render lines of text as block letters.

    For each line, emits ``table.height`` rows, each the concatenation of
    that row of every character's glyph, then one blank separator row.
    Characters missing from the table contribute a single space per row.

    Args:
        table: Loaded glyph table
        lines: Lines of text to render

    Returns:
        Rendered text, one newline-terminated row per output row
    """
    parts: list[str] = []
    for line in lines:
        glyphs = [table.get(char) for char in line]
        for index in range(table.height):
            parts.extend(
                glyph.rows[index] if glyph is not None else UNSUPPORTED_FILL
                for glyph in glyphs
            )
            parts.append("\n")
        parts.append("\n")
    return "".join(parts)


def count_unsupported(table: GlyphTable, lines: Iterable[str]) -> int:
    """Count characters that compose would replace with a space."""
    return sum(1 for line in lines for char in line if char not in table)
