"""Glyph, glyph table and font layout models.

A banner font is a fixed grid: every printable character in a contiguous
code-point range is drawn with the same number of text rows. These models
carry that grid once it has been parsed.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class FontLayout:
    """Shape of a banner font file.

    Attributes:
        glyph_height: Number of content rows per glyph
        first_code_point: First character code defined by the font
        last_code_point: Last character code defined by the font (inclusive)
    """

    glyph_height: int = 8
    first_code_point: int = 32
    last_code_point: int = 126

    def __post_init__(self) -> None:
        if self.glyph_height < 1:
            raise ValueError(f"glyph_height must be positive, got {self.glyph_height}")
        if self.first_code_point > self.last_code_point:
            raise ValueError(
                f"first_code_point {self.first_code_point} is after "
                f"last_code_point {self.last_code_point}"
            )

    @property
    def code_points(self) -> range:
        """Code points defined by the font, in file order."""
        return range(self.first_code_point, self.last_code_point + 1)

    @property
    def glyph_count(self) -> int:
        """Number of glyphs in a complete font."""
        return len(self.code_points)

    @property
    def rows_per_glyph(self) -> int:
        """Rows consumed per glyph, including the separator row."""
        return self.glyph_height + 1

    @property
    def line_count(self) -> int:
        """Minimum number of lines in a complete font file."""
        return self.glyph_count * self.rows_per_glyph


STANDARD_LAYOUT = FontLayout()


@dataclass(frozen=True)
class Glyph:
    """Block-letter drawing of a single character.

    Attributes:
        char: The character this glyph draws
        rows: Text rows from top to bottom, kept verbatim from the font
    """

    char: str
    rows: tuple[str, ...]

    @property
    def height(self) -> int:
        """Number of rows in the glyph."""
        return len(self.rows)

    @property
    def width(self) -> int:
        """Width of the widest row."""
        return max((len(row) for row in self.rows), default=0)

    def row(self, index: int) -> str:
        """Return row ``index`` of the glyph."""
        return self.rows[index]


class GlyphTable(Mapping[str, Glyph]):
    """Read-only lookup from character to glyph.

    Keys are single characters within the layout's code points, and every
    glyph has exactly ``layout.glyph_height`` rows.
    """

    def __init__(self, glyphs: Mapping[str, Glyph], layout: FontLayout = STANDARD_LAYOUT) -> None:
        for char, glyph in glyphs.items():
            if len(char) != 1 or ord(char) not in layout.code_points:
                raise ValueError(
                    f"Character {char!r} is outside code points "
                    f"{layout.first_code_point}-{layout.last_code_point}"
                )
            if glyph.height != layout.glyph_height:
                raise ValueError(
                    f"Glyph {char!r} has {glyph.height} rows, "
                    f"expected {layout.glyph_height}"
                )
        self._glyphs = MappingProxyType(dict(glyphs))
        self._layout = layout

    @classmethod
    def from_rows(
        cls, rows_by_char: Mapping[str, list[str] | tuple[str, ...]], layout: FontLayout
    ) -> "GlyphTable":
        """Build a table from plain row lists.

        Args:
            rows_by_char: Mapping of character to its rows
            layout: Layout every glyph must match

        Returns:
            GlyphTable instance
        """
        return cls(
            {char: Glyph(char=char, rows=tuple(rows)) for char, rows in rows_by_char.items()},
            layout=layout,
        )

    @property
    def layout(self) -> FontLayout:
        """Layout the table was loaded with."""
        return self._layout

    @property
    def height(self) -> int:
        """Rows per glyph."""
        return self._layout.glyph_height

    def __getitem__(self, char: str) -> Glyph:
        return self._glyphs[char]

    def __iter__(self) -> Iterator[str]:
        return iter(self._glyphs)

    def __len__(self) -> int:
        return len(self._glyphs)

    def __repr__(self) -> str:
        return f"GlyphTable(glyphs={len(self)}, height={self.height})"
