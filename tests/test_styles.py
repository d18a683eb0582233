import pytest
from reportlab.lib.colors import yellow

from flexitable.links import contains_http, get_link_predicate, looks_like_url
from flexitable.styles import DEFAULT_STYLE, Alignment, Cell, CellStyle, Table, iter_cells


class TestModel:

    def test_style_defaults(self):
        assert DEFAULT_STYLE.font_name == "Helvetica"
        assert DEFAULT_STYLE.font_size == 10
        assert DEFAULT_STYLE.alignment == Alignment.LEFT
        assert DEFAULT_STYLE.padding == 5
        assert not DEFAULT_STYLE.has_background

    def test_replace_returns_new_style(self):
        shaded = DEFAULT_STYLE.replace(background_color=yellow)
        assert shaded.has_background
        assert not DEFAULT_STYLE.has_background

    def test_styles_are_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_STYLE.font_size = 12

    def test_add_row_wraps_strings(self):
        table = Table.with_columns(3)
        row = table.add_row("a", Cell("b", CellStyle(font_size=8)), None)
        assert table.column_widths == (100.0, 100.0, 100.0)
        assert [c.content for c in row] == ["a", "b", None]
        assert row[2].is_empty
        assert table.header_row is row
        assert table.total_width == 300

    def test_rejects_non_positive_width(self):
        with pytest.raises(ValueError):
            Table(column_widths=(100, 0))

    def test_iter_cells_stops_at_last_column(self):
        cells = [Cell("a"), Cell("b"), Cell("c")]
        assert [(i, x, w, c.content) for i, x, w, c in iter_cells(cells, (40.0, 60.0))] == [
            (0, 0.0, 40.0, "a"),
            (1, 40.0, 60.0, "b"),
        ]


class TestLinkPredicates:

    @pytest.mark.parametrize("text, expected", [
        ("https://example.com/x", True),
        ("see http docs", True),
        ("HTTP://EXAMPLE.COM", False),
        ("   ", False),
        ("", False),
        (None, False),
    ])
    def test_contains_http(self, text, expected):
        assert contains_http(text) is expected

    @pytest.mark.parametrize("text, expected", [
        (" https://example.com/x ", True),
        ("http://a.b/c?d=1", True),
        ("see http docs", False),
        ("https://two words", False),
        (None, False),
    ])
    def test_looks_like_url(self, text, expected):
        assert looks_like_url(text) is expected

    def test_lookup(self):
        assert get_link_predicate("strict") is looks_like_url
        with pytest.raises(ValueError):
            get_link_predicate("fuzzy")
