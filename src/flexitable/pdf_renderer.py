"""PDF rendering using ReportLab."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, List, Optional, Sequence, Tuple, Union

from reportlab.lib.colors import Color
from reportlab.lib.pagesizes import A4
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from .layout_engine import LinkRegion, line_advance
from .links import LINK_COLOR, LINK_PLACEHOLDER, LinkPredicate, contains_http
from .styles import Alignment, Cell, CellStyle, Table, iter_cells
from .text_wrap import StringWidth, font_measure, wrap_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageHandle:
    """A page of the output document. `number` is 1-based, in document order."""
    number: int
    width: float
    height: float


class PageSurface:
    """Drawing surface for one page; flushed to the document on close()."""

    def __init__(self, document: "CanvasDocument", page: PageHandle):
        self.document = document
        self.page = page
        self._closed = False

    @property
    def canvas(self) -> canvas.Canvas:
        if self._closed:
            raise RuntimeError(f"Surface for page {self.page.number} is closed")
        return self.document.canvas

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color):
        c = self.canvas
        c.setFillColor(color)
        c.rect(x, y, width, height, fill=1, stroke=0)

    def line(self, x1: float, y1: float, x2: float, y2: float, color: Color, width: float):
        c = self.canvas
        c.setStrokeColor(color)
        c.setLineWidth(width)
        c.line(x1, y1, x2, y2)

    def draw_string(
        self,
        x: float,
        y: float,
        text: str,
        font_name: str,
        font_size: float,
        color: Color,
    ):
        c = self.canvas
        c.setFont(font_name, font_size)
        c.setFillColor(color)
        c.drawString(x, y, text)

    def register_link(self, rect: Tuple[float, float, float, float], url: str):
        """Add an invisible clickable area over rect pointing at url."""
        self.canvas.linkURL(url, rect, relative=0, thickness=0)

    def close(self):
        """Finalize the page. Closing twice is a no-op."""
        if self._closed:
            return
        self.document.canvas.showPage()
        self._closed = True
        self.document._surface_closed(self)


class CanvasDocument:
    """Single-writer page container backed by a ReportLab canvas."""

    def __init__(
        self,
        target: Union[str, Path, BinaryIO],
        pagesize: Tuple[float, float] = A4,
    ):
        if isinstance(target, Path):
            target = str(target)
        self.target = target
        self.canvas = canvas.Canvas(target, pagesize=pagesize)
        self._page_count = 0
        self._open_surface: Optional[PageSurface] = None

    @property
    def page_count(self) -> int:
        return self._page_count

    def new_page(self, width: float, height: float) -> PageHandle:
        if self._open_surface is not None:
            raise RuntimeError("Close the current surface before starting a new page")
        self._page_count += 1
        self.canvas.setPageSize((width, height))
        return PageHandle(number=self._page_count, width=width, height=height)

    def open_surface(self, page: PageHandle) -> PageSurface:
        if self._open_surface is not None:
            raise RuntimeError("Another surface is still open")
        if page.number != self._page_count:
            raise RuntimeError(f"Page {page.number} is not the current page")
        self._open_surface = PageSurface(self, page)
        return self._open_surface

    def _surface_closed(self, surface: PageSurface):
        if self._open_surface is surface:
            self._open_surface = None

    def save(self):
        """Write the finished document to its target."""
        if self._open_surface is not None:
            raise RuntimeError("Cannot save while a page surface is open")
        self.canvas.save()
        logger.info("Saved %d page(s) to %s", self._page_count, self.target)


def _text_x(style: CellStyle, cell_x: float, cell_width: float, text_width: float) -> float:
    if style.alignment == Alignment.CENTER:
        return cell_x + (cell_width - text_width) / 2
    if style.alignment == Alignment.RIGHT:
        return cell_x + cell_width - text_width - style.padding
    return cell_x + style.padding


def draw_row(
    surface: PageSurface,
    row: Sequence[Cell],
    table: Table,
    left_x: float,
    top_y: float,
    row_height: float,
    string_width: StringWidth = stringWidth,
    is_link: LinkPredicate = contains_http,
) -> List[LinkRegion]:
    """
    Draw one table row with its top edge at top_y.

    Backgrounds go down first so the border grid and text stay visible.
    Link-like cells show a blue placeholder; the returned regions cover
    each drawn placeholder line and carry the original cell text as url.
    """
    total_width = table.total_width
    bottom_y = top_y - row_height
    cells = list(iter_cells(row, table.column_widths))

    # Backgrounds
    for _, x_off, width, cell in cells:
        if cell.style.has_background:
            surface.fill_rect(left_x + x_off, bottom_y, width, row_height,
                              cell.style.background_color)

    # Borders
    color, line_width = table.border_color, table.border_width
    surface.line(left_x, top_y, left_x + total_width, top_y, color, line_width)
    surface.line(left_x, bottom_y, left_x + total_width, bottom_y, color, line_width)
    x = left_x
    for width in table.column_widths:
        surface.line(x, top_y, x, bottom_y, color, line_width)
        x += width
    surface.line(left_x + total_width, top_y, left_x + total_width, bottom_y, color, line_width)

    # Text
    links: List[LinkRegion] = []
    for _, x_off, width, cell in cells:
        if cell.is_empty:
            continue
        style = cell.style
        link = is_link(cell.content)
        text = LINK_PLACEHOLDER if link else cell.content
        text_color = LINK_COLOR if link else style.text_color

        measure = font_measure(style.font_name, string_width)
        lines = wrap_text(text, measure, style.font_size, width - 2 * style.padding)

        advance = line_advance(style.font_size)
        block_height = len(lines) * advance
        start_y = top_y - (row_height - block_height) / 2 - style.font_size

        cell_x = left_x + x_off
        for line_idx, line in enumerate(lines):
            text_width = measure(line, style.font_size)
            text_x = _text_x(style, cell_x, width, text_width)
            text_y = start_y - line_idx * advance
            surface.draw_string(text_x, text_y, line, style.font_name, style.font_size, text_color)

            if link:
                links.append(LinkRegion(
                    rect=(text_x, text_y, text_x + text_width, text_y + style.font_size),
                    url=cell.content.strip(),
                ))

    return links
