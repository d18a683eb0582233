import pytest

from flexitable.config import LayoutConfig
from flexitable.page_flow import PageFlowController
from flexitable.pdf_renderer import PageHandle


def char_width(text, font_name, font_size):
    """Fixed-pitch metrics: 6pt per character at size 10."""
    return len(text) * font_size * 0.6


class RecordingSurface:
    """Stands in for PageSurface and records every drawing call."""

    def __init__(self, page):
        self.page = page
        self.ops = []
        self.links = []
        self.closed = False

    def fill_rect(self, x, y, width, height, color):
        self.ops.append(("rect", x, y, width, height, color))

    def line(self, x1, y1, x2, y2, color, width):
        self.ops.append(("line", x1, y1, x2, y2, color, width))

    def draw_string(self, x, y, text, font_name, font_size, color):
        self.ops.append(("text", x, y, text, font_name, font_size, color))

    def register_link(self, rect, url):
        self.links.append((rect, url))

    def close(self):
        self.closed = True

    @property
    def text_ops(self):
        return [op for op in self.ops if op[0] == "text"]

    @property
    def texts(self):
        return [op[3] for op in self.text_ops]


class RecordingDocument:
    """Stands in for CanvasDocument."""

    def __init__(self):
        self.surfaces = []
        self.page_count = 0

    def new_page(self, width, height):
        self.page_count += 1
        return PageHandle(number=self.page_count, width=width, height=height)

    def open_surface(self, page):
        surface = RecordingSurface(page)
        self.surfaces.append(surface)
        return surface


@pytest.fixture
def document():
    return RecordingDocument()


@pytest.fixture
def plain_config():
    """A4 portrait, 50pt margins, no page header."""
    return LayoutConfig(page_header=None, top_margin=50, bottom_margin=50)


@pytest.fixture
def controller(document, plain_config):
    return PageFlowController(document, plain_config, string_width=char_width)
