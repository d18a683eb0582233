import pytest

from flexitable.config import LayoutConfig
from flexitable.layout_engine import (
    CELL_PADDING, PageLayout, calculate_row_height, table_start_height
)
from flexitable.styles import Cell, CellStyle, Table

from conftest import char_width

WIDTHS = (100.0, 100.0)


def height(row, widths=WIDTHS, default=20.0):
    return calculate_row_height(row, widths, default, string_width=char_width)


class TestCalculateRowHeight:

    def test_short_text_keeps_default_height(self):
        # one line: 12 + 2 * 5 = 22, default 30 wins
        assert height([Cell("abc"), Cell("def")], default=30) == 30

    def test_single_line_height(self):
        assert height([Cell("abc")]) == 1 * (10 + 2) + 2 * CELL_PADDING

    def test_empty_cells_ignored(self):
        assert height([Cell(None), Cell("")]) == 20.0

    def test_wrapped_cell_grows_whole_row(self):
        # "ExtractedTagsReport" wraps to 2 lines in 90pt
        assert height([Cell("x"), Cell("ExtractedTagsReport")]) == 2 * 12 + 10

    def test_uses_each_cells_font_size(self):
        big = CellStyle(font_size=20)
        assert height([Cell("ab", big)]) == 22 + 10

    def test_cells_beyond_columns_ignored(self):
        long_text = "word " * 50
        assert height([Cell("a"), Cell("b"), Cell(long_text)]) == height([Cell("a"), Cell("b")])

    @pytest.mark.parametrize("size", [6, 8, 10, 12, 16, 24])
    def test_larger_font_never_shrinks_row(self, size):
        text = "invoice_number extractedTag 42x"
        smaller = height([Cell(text, CellStyle(font_size=size))])
        larger = height([Cell(text, CellStyle(font_size=size + 2))])
        assert larger >= smaller

    def test_longer_content_never_shrinks_row(self):
        text = ""
        previous = height([Cell(text)])
        for word in ["alpha ", "betaGamma ", "delta_", "epsilon42 ", "zeta " * 5, "eta"]:
            text += word
            current = height([Cell(text)])
            assert current >= previous
            previous = current

    def test_is_repeatable(self):
        row = [Cell("someLong_identifier99Name"), Cell("plain text here")]
        assert height(row) == height(row)


class TestTableStartHeight:

    def make_table(self):
        table = Table(column_widths=(100,), row_height=20)
        table.add_row("Header")
        table.add_row("first")
        table.add_row("second")
        return table

    def test_title_header_and_first_row(self):
        table = self.make_table()
        row_h = height(table.rows[0], table.column_widths)
        assert table_start_height(table, "Title", char_width) == 25 + 2 * row_h

    def test_without_title(self):
        table = self.make_table()
        row_h = height(table.rows[0], table.column_widths)
        assert table_start_height(table, None, char_width) == 2 * row_h

    def test_header_only_table(self):
        table = Table(column_widths=(100,), row_height=20)
        table.add_row("Header")
        assert table_start_height(table, "", char_width) == 22

    def test_empty_table(self):
        assert table_start_height(Table(column_widths=(50,)), "T", char_width) == 25


class TestPageLayout:

    def test_from_config(self):
        layout = PageLayout.from_config(LayoutConfig(top_margin=70, left_margin=40, right_margin=30))
        assert layout.content_start_y == pytest.approx(841.89 - 70, abs=0.01)
        assert layout.content_width == pytest.approx(595.27 - 70, abs=0.01)

    def test_landscape(self):
        layout = PageLayout.from_config(LayoutConfig(orientation="landscape"))
        assert layout.page_width > layout.page_height
