from pathlib import Path

import pytest

from flexitable.config import LayoutConfig, load_config


class TestLayoutConfig:

    def test_defaults_match_index_layout(self):
        config = LayoutConfig()
        assert (config.top_margin, config.bottom_margin) == (70, 50)
        assert (config.left_margin, config.right_margin) == (50, 50)
        assert config.page_header == "INDEX"
        assert config.header_font == "Helvetica-Bold"
        assert config.header_font_size == 16
        assert config.legacy_page_order is False
        assert config.page_dimensions == pytest.approx((595.2755905511812, 841.8897637795277))

    def test_landscape_letter(self):
        config = LayoutConfig(page_size="letter", orientation="landscape")
        assert config.page_size == "LETTER"
        assert config.page_dimensions == (792, 612)

    def test_header_colour(self):
        config = LayoutConfig(header_color="#336699")
        assert config.header_rgb.hexval() == "0x336699"

    @pytest.mark.parametrize("kwargs", [
        {"page_size": "B7"},
        {"orientation": "sideways"},
        {"top_margin": -1},
        {"header_font_size": 0},
        {"link_detection": "regexish"},
        {"page_size": 4},
        {"top_margin": "wide"},
        {"header_font_size": True},
        {"header_color": "#zz0000"},
        {"header_color": 336699},
        {"page_header": 12},
        {"repeat_page_header": "yes"},
    ])
    def test_rejects_bad_values(self, kwargs):
        with pytest.raises(ValueError):
            LayoutConfig(**kwargs)

    def test_yaml_round_trip(self, tmp_path):
        path = tmp_path / "layout.yaml"
        original = LayoutConfig(
            page_size="A5",
            top_margin=30,
            page_header="Report",
            legacy_page_order=True,
            link_detection="strict",
            output_path=Path("out/index.pdf"),
        )
        original.to_yaml(path)
        assert LayoutConfig.from_yaml(path) == original

    def test_partial_yaml_keeps_defaults(self, tmp_path):
        path = tmp_path / "layout.yaml"
        path.write_text("page_header: null\nbottom_margin: 20\n")
        config = load_config(path)
        assert config.page_header is None
        assert config.bottom_margin == 20
        assert config.top_margin == 70

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == LayoutConfig()

    def test_non_mapping_yaml(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            load_config(path)

    def test_no_path_gives_defaults(self):
        assert load_config(None) == LayoutConfig()

    @pytest.mark.parametrize("text", [
        "margin_top: 20\n",
        "page_size: 4\n",
        "top_margin: wide\n",
        "header_color: not-a-colour\n",
        "output_path: [a, b]\n",
        "page_header: [unclosed\n",
    ])
    def test_bad_yaml_raises_value_error(self, tmp_path, text):
        path = tmp_path / "bad.yaml"
        path.write_text(text)
        with pytest.raises(ValueError):
            load_config(path)

    def test_unknown_keys_are_named(self, tmp_path):
        path = tmp_path / "typo.yaml"
        path.write_text("margin_top: 20\npage_size: A4\n")
        with pytest.raises(ValueError, match="margin_top"):
            load_config(path)
