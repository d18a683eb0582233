"""Geometry for placing table rows on pages."""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
from reportlab.lib.pagesizes import A4
from reportlab.pdfbase.pdfmetrics import stringWidth

from .config import LayoutConfig
from .styles import Cell, Table, iter_cells
from .text_wrap import StringWidth, font_measure, wrap_text


# Uniform padding assumed when sizing rows
CELL_PADDING = 5.0
# Extra leading between wrapped lines
LINE_SPACING = 2.0
# Space reserved for a table title in the table-start look-ahead
TITLE_BLOCK_HEIGHT = 25.0
# Gap consumed below a title or page header, on top of its font size
TEXT_BLOCK_GAP = 10.0


@dataclass
class PageLayout:
    """Defines the layout parameters for a page."""
    page_width: float = A4[0]
    page_height: float = A4[1]
    margin_left: float = 50.0
    margin_right: float = 50.0
    margin_top: float = 50.0
    margin_bottom: float = 50.0

    @classmethod
    def from_config(cls, config: LayoutConfig) -> "PageLayout":
        width, height = config.page_dimensions
        return cls(
            page_width=width,
            page_height=height,
            margin_left=config.left_margin,
            margin_right=config.right_margin,
            margin_top=config.top_margin,
            margin_bottom=config.bottom_margin,
        )

    @property
    def content_width(self) -> float:
        return self.page_width - self.margin_left - self.margin_right

    @property
    def content_start_y(self) -> float:
        """Top of content area (PDF coordinates start at bottom)."""
        return self.page_height - self.margin_top


@dataclass(frozen=True)
class LinkRegion:
    """Clickable rectangle (x0, y0, x1, y1) pointing at url."""
    rect: Tuple[float, float, float, float]
    url: str


def line_advance(font_size: float) -> float:
    """Vertical distance between the baselines of two wrapped lines."""
    return font_size + LINE_SPACING


def calculate_row_height(
    row: Sequence[Cell],
    column_widths: Sequence[float],
    default_height: float,
    padding: float = CELL_PADDING,
    string_width: StringWidth = stringWidth,
) -> float:
    """
    Compute the height a row needs so every cell's wrapped text fits.

    Each non-empty cell is wrapped at its own font and size against its
    column width minus padding on both sides. The row is never shorter
    than default_height.
    """
    max_height = default_height

    for _, _, width, cell in iter_cells(row, column_widths):
        if cell.is_empty:
            continue
        style = cell.style
        available_width = width - 2 * padding
        lines = wrap_text(
            cell.content,
            font_measure(style.font_name, string_width),
            style.font_size,
            available_width,
        )
        required = len(lines) * line_advance(style.font_size) + 2 * padding
        max_height = max(max_height, required)

    return max_height


def table_start_height(
    table: Table,
    title: Optional[str] = None,
    string_width: StringWidth = stringWidth,
) -> float:
    """Height of a table's opening block: title, header row and first data row."""
    required = 0.0

    if title:
        required += TITLE_BLOCK_HEIGHT

    for row in table.rows[:2]:
        required += calculate_row_height(
            row, table.column_widths, table.row_height, string_width=string_width
        )

    return required
