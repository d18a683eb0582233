"""Configuration dataclasses and YAML loading for the index renderer."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Dict, Optional, Tuple
import yaml
from reportlab.lib.colors import Color, HexColor
from reportlab.lib.pagesizes import A3, A4, A5, LEGAL, LETTER, landscape, portrait

from .links import LINK_PREDICATES

PAGE_SIZES: Dict[str, Tuple[float, float]] = {
    "A3": A3,
    "A4": A4,  # 595.27 x 841.89 points
    "A5": A5,
    "LETTER": LETTER,
    "LEGAL": LEGAL,
}

_MARGIN_FIELDS = ("top_margin", "bottom_margin", "left_margin", "right_margin")
_NUMERIC_FIELDS = _MARGIN_FIELDS + ("header_font_size",)


@dataclass
class LayoutConfig:
    """Page geometry, page header and output settings."""

    page_size: str = "A4"
    orientation: str = "portrait"  # "portrait" or "landscape"

    top_margin: float = 70.0
    bottom_margin: float = 50.0
    left_margin: float = 50.0
    right_margin: float = 50.0

    # Repeating page header; empty or None disables it
    page_header: Optional[str] = "INDEX"
    header_font: str = "Helvetica-Bold"
    header_font_size: float = 16.0
    header_color: str = "#000000"
    repeat_page_header: bool = True

    # Insert every page after the first at the front of the page list
    legacy_page_order: bool = False

    link_detection: str = "http-substring"  # see links.LINK_PREDICATES
    output_path: Path = Path("flexible_tables_refactored.pdf")

    def __post_init__(self):
        for name in ("page_size", "orientation", "header_font", "header_color", "link_detection"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string")
        if self.page_header is not None and not isinstance(self.page_header, str):
            raise ValueError("page_header must be a string or null")
        if not isinstance(self.output_path, (str, Path)):
            raise ValueError(f"output_path must be a path, got {self.output_path!r}")
        for name in ("repeat_page_header", "legacy_page_order"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be true or false")
        for name in _NUMERIC_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")

        self.page_size = self.page_size.upper()
        if self.page_size not in PAGE_SIZES:
            raise ValueError(f"Unknown page size: {self.page_size}")
        if self.orientation not in ("portrait", "landscape"):
            raise ValueError(f"Unknown orientation: {self.orientation}")
        for name in _MARGIN_FIELDS:
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
        if self.header_font_size <= 0:
            raise ValueError("header_font_size must be positive")
        if self.link_detection not in LINK_PREDICATES:
            raise ValueError(f"Unknown link detection: {self.link_detection}")
        try:
            HexColor(self.header_color)
        except ValueError:
            raise ValueError(f"Invalid header colour: {self.header_color!r}") from None
        self.output_path = Path(self.output_path)

    @property
    def page_dimensions(self) -> Tuple[float, float]:
        """(width, height) of the page in points."""
        size = PAGE_SIZES[self.page_size]
        if self.orientation == "landscape":
            return landscape(size)
        return portrait(size)

    @property
    def header_rgb(self) -> Color:
        return HexColor(self.header_color)

    @classmethod
    def from_yaml(cls, path: Path) -> "LayoutConfig":
        """Load configuration from a YAML file."""
        with open(path, "r") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Config file {path} is not valid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")

        unknown = set(data) - {f.name for f in fields(cls)}
        if unknown:
            raise ValueError(f"Unknown config keys in {path}: {', '.join(sorted(map(str, unknown)))}")

        return cls(**data)

    def to_yaml(self, path: Path) -> None:
        """Save configuration to a YAML file."""
        data = {
            "page_size": self.page_size,
            "orientation": self.orientation,
            "top_margin": self.top_margin,
            "bottom_margin": self.bottom_margin,
            "left_margin": self.left_margin,
            "right_margin": self.right_margin,
            "page_header": self.page_header,
            "header_font": self.header_font,
            "header_font_size": self.header_font_size,
            "header_color": self.header_color,
            "repeat_page_header": self.repeat_page_header,
            "legacy_page_order": self.legacy_page_order,
            "link_detection": self.link_detection,
            "output_path": str(self.output_path),
        }
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def load_config(path: Optional[Path] = None) -> LayoutConfig:
    """Load config from path or return default config."""
    if path is None:
        return LayoutConfig()
    return LayoutConfig.from_yaml(path)
