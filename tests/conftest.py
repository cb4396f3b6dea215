"""Shared fixtures for bannerize tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from bannerize.domain import STANDARD_LAYOUT, FontLayout

FontTextFactory = Callable[..., str]


def _repeated_char_rows(char: str, height: int) -> list[str]:
    return [char] * height


@pytest.fixture
def font_text() -> FontTextFactory:
    """Return a builder for banner font file contents.

    The builder takes an optional layout, a ``rows_for(char, height)``
    callable, a separator string and a line ending. By default every glyph
    is its own character repeated on each row.
    """

    def build(
        layout: FontLayout = STANDARD_LAYOUT,
        rows_for: Callable[[str, int], list[str]] = _repeated_char_rows,
        separator: str = "",
        newline: str = "\n",
    ) -> str:
        lines: list[str] = []
        for code_point in layout.code_points:
            lines.extend(rows_for(chr(code_point), layout.glyph_height))
            lines.append(separator)
        return "".join(line + newline for line in lines)

    return build


@pytest.fixture
def small_layout() -> FontLayout:
    """Layout with two-row glyphs over the full printable range."""
    return FontLayout(glyph_height=2)


@pytest.fixture
def font_dir(tmp_path: Path, font_text: FontTextFactory) -> Path:
    """Directory holding a complete standard banner and a truncated one."""
    directory = tmp_path / "banners"
    directory.mkdir()
    (directory / "standard.txt").write_text(font_text(), encoding="utf-8")

    truncated = font_text().splitlines(keepends=True)[:100]
    (directory / "broken.txt").write_text("".join(truncated), encoding="utf-8")
    return directory
