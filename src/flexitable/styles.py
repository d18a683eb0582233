"""Cell styles, cells and table structure."""

from dataclasses import dataclass, field, replace as dc_replace
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple, Union
from reportlab.lib.colors import Color, black


class Alignment(Enum):
    """Horizontal text alignment inside a cell."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class CellStyle:
    """Visual style of a cell. Shared freely between cells."""
    font_name: str = "Helvetica"
    font_size: float = 10.0
    text_color: Color = field(default_factory=lambda: black)
    background_color: Optional[Color] = None  # None means no fill
    alignment: Alignment = Alignment.LEFT
    padding: float = 5.0

    @property
    def has_background(self) -> bool:
        return self.background_color is not None

    def replace(self, **changes) -> "CellStyle":
        """Return a copy with the given fields changed."""
        return dc_replace(self, **changes)


DEFAULT_STYLE = CellStyle()


@dataclass(frozen=True)
class Cell:
    """Text content plus the style used to draw it."""
    content: Optional[str]
    style: CellStyle = DEFAULT_STYLE

    @property
    def is_empty(self) -> bool:
        return not self.content


Row = List[Cell]


@dataclass
class Table:
    """Rows of cells laid out over fixed column widths.

    Row 0 is the header row: it is replayed at the top of every
    continuation page when the table breaks across pages.
    """
    column_widths: Tuple[float, ...]
    rows: List[Row] = field(default_factory=list)
    row_height: float = 20.0
    border_width: float = 1.0
    border_color: Color = field(default_factory=lambda: black)

    def __post_init__(self):
        self.column_widths = tuple(float(w) for w in self.column_widths)
        if any(w <= 0 for w in self.column_widths):
            raise ValueError(f"Column widths must be positive: {self.column_widths}")

    @classmethod
    def with_columns(cls, columns: int, **kwargs) -> "Table":
        """Create a table of `columns` equal columns, 100 points each."""
        return cls(column_widths=(100.0,) * columns, **kwargs)

    def add_row(self, *cells: Union[Cell, str, None]) -> Row:
        row = [c if isinstance(c, Cell) else Cell(c) for c in cells]
        self.rows.append(row)
        return row

    @property
    def total_width(self) -> float:
        return sum(self.column_widths)

    @property
    def header_row(self) -> Optional[Row]:
        return self.rows[0] if self.rows else None


def iter_cells(
    row: Sequence[Cell],
    column_widths: Sequence[float],
) -> Iterator[Tuple[int, float, float, Cell]]:
    """Yield (col_index, x_offset, width, cell) for the cells that have a column.

    Cells past the last column are skipped.
    """
    x = 0.0
    for idx, (cell, width) in enumerate(zip(row, column_widths)):
        yield idx, x, width, cell
        x += width
