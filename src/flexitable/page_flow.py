"""Page flow: vertical cursor, page breaks and table pagination."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from reportlab.lib.colors import Color, black
from reportlab.pdfbase.pdfmetrics import stringWidth

from .config import LayoutConfig
from .layout_engine import (
    PageLayout, TEXT_BLOCK_GAP, calculate_row_height, table_start_height
)
from .links import LinkPredicate, get_link_predicate
from .pdf_renderer import CanvasDocument, PageHandle, PageSurface, draw_row
from .styles import Row, Table
from .text_wrap import StringWidth

logger = logging.getLogger(__name__)

TITLE_FONT = "Helvetica-Bold"
TITLE_FONT_SIZE = 14.0


class FlowPhase(Enum):
    EMPTY = "empty"          # no page yet
    PAGE_OPEN = "page_open"  # a page and its surface are live
    CLOSED = "closed"        # last surface flushed, nothing more may be drawn


@dataclass
class FlowState:
    """Mutable pagination state. Owned by exactly one PageFlowController."""
    page: Optional[PageHandle] = None
    surface: Optional[PageSurface] = None
    pages: List[PageHandle] = field(default_factory=list)
    cursor_y: float = 0.0
    closed: bool = False

    @property
    def phase(self) -> FlowPhase:
        if self.closed:
            return FlowPhase.CLOSED
        if self.surface is None:
            return FlowPhase.EMPTY
        return FlowPhase.PAGE_OPEN


@dataclass
class TableResult:
    """What happened while drawing one table."""
    pages: List[PageHandle]  # pages the table was drawn on, in order
    rows_drawn: int = 0
    header_replays: int = 0
    links: int = 0


class PageFlowController:
    """Places titles and tables top to bottom, breaking pages as needed."""

    def __init__(
        self,
        document: CanvasDocument,
        config: Optional[LayoutConfig] = None,
        string_width: StringWidth = stringWidth,
        is_link: Optional[LinkPredicate] = None,
    ):
        self.document = document
        self.config = config or LayoutConfig()
        self.layout = PageLayout.from_config(self.config)
        self.string_width = string_width
        self.is_link = is_link or get_link_predicate(self.config.link_detection)
        self.state = FlowState()

    @property
    def phase(self) -> FlowPhase:
        return self.state.phase

    @property
    def pages(self) -> List[PageHandle]:
        return list(self.state.pages)

    @property
    def cursor_y(self) -> float:
        return self.state.cursor_y

    def _require_page(self) -> PageSurface:
        if self.state.closed:
            raise RuntimeError("Page flow is closed")
        if self.state.surface is None:
            self.new_page()
        return self.state.surface

    def begin(self) -> PageHandle:
        """Open the first page. Does nothing if a page is already open."""
        self._require_page()
        return self.state.page

    def can_fit(self, required_height: float) -> bool:
        """Check if content of given height fits above the bottom margin."""
        return (self.state.cursor_y - required_height) >= self.layout.margin_bottom

    def move_y(self, offset: float):
        self.state.cursor_y += offset

    def new_page(self) -> PageHandle:
        """Flush the current page and start a fresh one at the top margin."""
        state = self.state
        if state.closed:
            raise RuntimeError("Page flow is closed")

        first = not state.pages
        if state.surface is not None:
            state.surface.close()
            state.surface = None

        page = self.document.new_page(self.layout.page_width, self.layout.page_height)
        if self.config.legacy_page_order and not first:
            state.pages.insert(0, page)
        else:
            state.pages.append(page)

        state.page = page
        state.surface = self.document.open_surface(page)
        state.cursor_y = self.layout.content_start_y
        logger.debug("Opened page %d", page.number)

        if first or self.config.repeat_page_header:
            self.draw_page_header()
        return page

    def draw_page_header(self):
        """Draw the configured header centred above the content area."""
        text = self.config.page_header
        if not text:
            return
        if self.state.surface is None:
            # opening the first page draws the header
            self._require_page()
            return
        surface = self.state.surface
        cfg = self.config

        header_width = self.string_width(text, cfg.header_font, cfg.header_font_size)
        x = (self.layout.page_width - header_width) / 2
        y = self.layout.page_height - self.layout.margin_top / 2
        surface.draw_string(x, y, text, cfg.header_font, cfg.header_font_size, cfg.header_rgb)

        self.state.cursor_y -= cfg.header_font_size + TEXT_BLOCK_GAP

    def draw_title(
        self,
        title: Optional[str],
        font_name: str = TITLE_FONT,
        font_size: float = TITLE_FONT_SIZE,
        color: Color = black,
    ):
        if not title:
            return
        surface = self._require_page()
        surface.draw_string(self.layout.margin_left, self.state.cursor_y, title,
                            font_name, font_size, color)
        self.state.cursor_y -= font_size + TEXT_BLOCK_GAP

    def _row_height(self, table: Table, row: Row) -> float:
        return calculate_row_height(row, table.column_widths, table.row_height,
                                    string_width=self.string_width)

    def _draw_row(self, table: Table, row: Row, row_height: float) -> int:
        surface = self.state.surface
        links = draw_row(
            surface, row, table,
            left_x=self.layout.margin_left,
            top_y=self.state.cursor_y,
            row_height=row_height,
            string_width=self.string_width,
            is_link=self.is_link,
        )
        for link in links:
            surface.register_link(link.rect, link.url)
        self.state.cursor_y -= row_height
        return len(links)

    def draw_table(self, table: Table, title: Optional[str] = None) -> TableResult:
        """
        Draw a table, breaking pages between rows as needed.

        The title, header row and first data row are kept together: if
        they do not fit, the table starts on a new page. After every page
        break the title is drawn again, and the header row too unless the
        row being placed is the header itself. A row taller than a whole
        page is still drawn and overflows the bottom margin.
        """
        self._require_page()

        if not self.can_fit(table_start_height(table, title, self.string_width)):
            logger.debug("Table %r does not fit on page %d, breaking",
                         title, self.state.page.number)
            self.new_page()

        result = TableResult(pages=[self.state.page])
        self.draw_title(title)

        for row_index, row in enumerate(table.rows):
            row_height = self._row_height(table, row)

            if not self.can_fit(row_height):
                self.new_page()
                result.pages.append(self.state.page)
                self.draw_title(title)

                if row_index > 0:
                    header = table.rows[0]
                    header_height = self._row_height(table, header)
                    result.links += self._draw_row(table, header, header_height)
                    result.header_replays += 1

                if not self.can_fit(row_height):
                    logger.warning(
                        "Row %d of table %r is %.1fpt tall and overflows page %d",
                        row_index, title, row_height, self.state.page.number,
                    )

            result.links += self._draw_row(table, row, row_height)
            result.rows_drawn += 1

        return result

    def close(self):
        """Flush the open page. Closing an empty or closed flow is a no-op."""
        state = self.state
        if state.surface is not None:
            state.surface.close()
            state.surface = None
            state.closed = True
