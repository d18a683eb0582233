"""The index page: document information table followed by the extracted tags table."""

import logging
from pathlib import Path
from typing import BinaryIO, Dict, Iterable, List, Optional, Union

from reportlab.lib.colors import Color, HexColor, darkgray, white

from .config import LayoutConfig
from .models import Document, PageTags
from .page_flow import PageFlowController
from .pdf_renderer import CanvasDocument, PageHandle
from .styles import Alignment, Cell, CellStyle, Table

logger = logging.getLogger(__name__)

INFO_TABLE_TITLE = "Document informations"
TAGS_TABLE_TITLE = "Extracted tags"
TABLE_GAP = 30.0

TAGS_HEADERS = ["Group", "Type", "Page", "status", "Comment", "Comment Info"]

LIGHT_BG = HexColor("#F5F5F5")

INFO_KEY_STYLE = CellStyle(
    font_name="Helvetica-Bold",
    background_color=Color(138 / 255, 138 / 255, 141 / 255),
    alignment=Alignment.LEFT,
)
INFO_VALUE_STYLE = CellStyle(alignment=Alignment.LEFT, background_color=LIGHT_BG)

TAGS_HEADER_STYLE = CellStyle(
    font_name="Helvetica-Bold",
    text_color=white,
    background_color=Color(100 / 255, 150 / 255, 200 / 255),
    alignment=Alignment.CENTER,
)
TAGS_PAGE_STYLE = CellStyle(alignment=Alignment.CENTER, background_color=LIGHT_BG)


def build_info_table(document_info: Dict[str, str]) -> Table:
    """Two-column key/value table of the document information."""
    table = Table(
        column_widths=(200, 300),
        row_height=10,
        border_width=1.5,
        border_color=darkgray,
    )
    for key, value in document_info.items():
        table.add_row(Cell(key, INFO_KEY_STYLE), Cell(value, INFO_VALUE_STYLE))
    return table


def build_tags_table(page_tags: Iterable[PageTags]) -> Table:
    """One row per tag across all pages, under a fixed header row."""
    table = Table(column_widths=(100, 100, 30, 70, 100, 100), row_height=15)
    table.add_row(*[Cell(h, TAGS_HEADER_STYLE) for h in TAGS_HEADERS])

    for tags in page_tags:
        for tag in tags.tags:
            table.add_row(
                Cell(tag.groups),
                Cell(tag.type),
                Cell(str(tag.page), TAGS_PAGE_STYLE),
                Cell(tag.status),
                Cell(tag.comment),
                Cell(tag.comment_info),
            )
    return table


def draw_index_page(controller: PageFlowController, document: Document) -> List[PageHandle]:
    """Draw both index tables and close the flow. Returns the pages used."""
    controller.begin()

    info = controller.draw_table(build_info_table(document.document_info), INFO_TABLE_TITLE)
    controller.move_y(-TABLE_GAP)
    tags = controller.draw_table(build_tags_table(document.page_tags), TAGS_TABLE_TITLE)

    controller.close()
    logger.info(
        "Index drawn: %d info rows, %d tag rows over %d page(s), %d header replay(s)",
        info.rows_drawn, max(tags.rows_drawn - 1, 0), len(controller.pages),
        info.header_replays + tags.header_replays,
    )
    return controller.pages


def render_index(
    document: Document,
    config: Optional[LayoutConfig] = None,
    target: Union[str, Path, BinaryIO, None] = None,
) -> List[PageHandle]:
    """Render the index page of document to target (default: config.output_path)."""
    config = config or LayoutConfig()
    if target is None:
        target = config.output_path

    pdf = CanvasDocument(target, pagesize=config.page_dimensions)
    controller = PageFlowController(pdf, config)
    pages = draw_index_page(controller, document)
    pdf.save()
    return pages
