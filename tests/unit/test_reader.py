"""Unit tests for the banner font reader."""

import io

import pytest

from bannerize.domain import STANDARD_LAYOUT, FontLayout
from bannerize.exceptions import FontFormatError
from bannerize.io.reader import load_glyph_table


class TestLoadGlyphTable:
    """Tests for load_glyph_table."""

    def test_load_standard_font(self, font_text):
        """Test a complete font yields 95 glyphs of 8 rows."""
        table = load_glyph_table(io.StringIO(font_text()))

        assert len(table) == 95
        assert all(glyph.height == 8 for glyph in table.values())
        assert set(table) == {chr(c) for c in range(32, 127)}
        assert table.layout is STANDARD_LAYOUT

    def test_exact_line_count(self, font_text):
        """Test the standard font is exactly 855 lines."""
        assert len(font_text().splitlines()) == STANDARD_LAYOUT.line_count

    def test_glyph_rows_verbatim(self, font_text, small_layout):
        """Test rows keep leading and trailing whitespace."""

        def rows_for(char, height):
            return [f"  {char} ", f"\t{char}"]

        table = load_glyph_table(io.StringIO(font_text(small_layout, rows_for)), small_layout)

        assert table["A"].rows == ("  A ", "\tA")
        assert table[" "].rows == ("    ", "\t ")

    def test_glyphs_assigned_in_code_point_order(self, font_text, small_layout):
        """Test the n-th block of rows belongs to code point 32 + n."""

        def rows_for(char, height):
            return [str(ord(char))] * height

        table = load_glyph_table(io.StringIO(font_text(small_layout, rows_for)), small_layout)

        assert table[" "].rows == ("32", "32")
        assert table["!"].rows == ("33", "33")
        assert table["~"].rows == ("126", "126")

    def test_separator_content_ignored(self, font_text, small_layout):
        """Test non-blank separator rows are discarded without error."""
        text = font_text(small_layout, separator="#### not blank ####")
        table = load_glyph_table(io.StringIO(text), small_layout)

        assert len(table) == 95
        assert table["Z"].rows == ("Z", "Z")

    def test_crlf_line_endings(self, font_text, small_layout):
        """Test CRLF terminators are stripped like LF."""
        text = font_text(small_layout, newline="\r\n")
        table = load_glyph_table(io.StringIO(text, newline=""), small_layout)

        assert table["Q"].rows == ("Q", "Q")

    def test_missing_final_newline(self, font_text, small_layout):
        """Test the last separator row need not end in a newline."""
        text = font_text(small_layout, separator="-").rstrip("\n")
        table = load_glyph_table(io.StringIO(text), small_layout)

        assert len(table) == 95

    def test_trailing_content_ignored(self, font_text, small_layout):
        """Test lines after the last separator are not read."""
        text = font_text(small_layout) + "extra\nlines\n"
        table = load_glyph_table(io.StringIO(text), small_layout)

        assert len(table) == 95

    def test_accepts_list_of_lines(self):
        """Test any iterable of lines is accepted."""
        layout = FontLayout(glyph_height=2, first_code_point=65, last_code_point=66)
        table = load_glyph_table(["a1", "a2", "", "b1", "b2", ""], layout)

        assert table["A"].rows == ("a1", "a2")
        assert table["B"].rows == ("b1", "b2")

    def test_stream_not_closed(self, font_text, small_layout):
        """Test the reader leaves the stream open."""
        stream = io.StringIO(font_text(small_layout))
        load_glyph_table(stream, small_layout)

        assert not stream.closed


class TestTruncatedFonts:
    """Tests for fonts that end early."""

    def test_empty_stream(self):
        """Test an empty stream fails on the first row of the space glyph."""
        with pytest.raises(FontFormatError) as exc_info:
            load_glyph_table(io.StringIO(""))

        assert exc_info.value.code_point == 32
        assert exc_info.value.row == 0

    @pytest.mark.parametrize("keep", [1, 8, 9, 400, 854])
    def test_truncated_stream(self, font_text, keep):
        """Test every truncation point raises FontFormatError."""
        lines = font_text().splitlines(keepends=True)[:keep]

        with pytest.raises(FontFormatError):
            load_glyph_table(io.StringIO("".join(lines)))

    def test_missing_last_separator(self, font_text):
        """Test a font missing only its final separator row is rejected."""
        lines = font_text().splitlines(keepends=True)[:-1]

        with pytest.raises(FontFormatError) as exc_info:
            load_glyph_table(io.StringIO("".join(lines)))

        assert exc_info.value.code_point == 126
        assert exc_info.value.row == 8

    def test_error_names_source(self):
        """Test the error message carries the source label."""
        with pytest.raises(FontFormatError, match="shadow.txt"):
            load_glyph_table(io.StringIO("only one line\n"), source="shadow.txt")

    def test_error_reports_position(self, font_text, small_layout):
        """Test the error reports the character being read."""
        lines = font_text(small_layout).splitlines(keepends=True)[:4]

        with pytest.raises(FontFormatError) as exc_info:
            load_glyph_table(io.StringIO("".join(lines)), small_layout)

        # Three lines for ' ', then row 0 of '!'; row 1 is missing
        assert exc_info.value.code_point == 33
        assert exc_info.value.row == 1
