"""Tables of rows, columns and cells."""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass, field

from .cell_style import CellStyle
from .column_style import ColumnStyle
from .model import FileInfo
from .row_style import RowStyle
from .table_style import TableStyle
from .text_style import TextStyle

# Table alignment
TABLE_ALIGN_LEFT = "left"
TABLE_ALIGN_CENTER = "center"
TABLE_ALIGN_RIGHT = "right"
TABLE_ALIGN_MARGIN = "margins"

# Border styles
BORDER_NONE = "none"
BORDER_SOLID = "solid"
BORDER_DOTTED = "dotted"
BORDER_DASHED = "dashed"
BORDER_DOUBLE = "double"
BORDER_GROOVE = "groove"
BORDER_RIDGE = "ridge"
BORDER_INSET = "inset"
BORDER_OUTSET = "outset"

# Text alignment in cells
TEXT_ALIGN_LEFT = "left"
TEXT_ALIGN_RIGHT = "right"
TEXT_ALIGN_CENTER = "center"
TEXT_ALIGN_JUSTIFY = "justify"

# Border models
BORDER_MODEL_COLLAPSING = "collapsing"
BORDER_MODEL_SEPARATING = "separating"

_name_counter = itertools.count(1)
_name_lock = threading.Lock()


def _next_name() -> str:
    with _name_lock:
        return f"Table{next(_name_counter)}"


@dataclass
class CellValue:
    """The text of a cell and the style it is drawn with."""

    value: str = ""
    style: TextStyle | None = None


@dataclass
class Cell:
    """One table cell."""

    value: CellValue = field(default_factory=CellValue)
    style: CellStyle | None = None
    col_span: int = 0
    row_span: int = 0


@dataclass
class Row:
    """One table row."""

    cells: list[Cell] = field(default_factory=list)
    style: RowStyle | None = None


@dataclass
class Column:
    """One table column."""

    style: ColumnStyle | None = None


def _style_attr(style) -> str:
    return f' table:style-name="{style.name}"' if style is not None else ""


class Table:
    """A table with a fixed number of rows and columns.

    Setters that address a row, column or cell outside the table do nothing.
    """

    def __init__(self, rows: int, cols: int) -> None:
        self.name = _next_name()
        self.rows = [Row(cells=[Cell() for _ in range(cols)]) for _ in range(rows)]
        self.columns = [Column() for _ in range(cols)]
        self.style: TableStyle | None = None

    def _cell(self, row: int, col: int) -> Cell | None:
        if 0 <= row < len(self.rows):
            cells = self.rows[row].cells
            if 0 <= col < len(cells):
                return cells[col]
        return None

    def set_value(self, row: int, col: int, value: str) -> None:
        """Set the text of a cell."""
        cell = self._cell(row, col)
        if cell is not None:
            cell.value.value = value

    def set_span(self, row: int, col: int, col_span: int, row_span: int) -> None:
        """Set how many columns and rows a cell spans."""
        cell = self._cell(row, col)
        if cell is not None:
            cell.col_span = col_span
            cell.row_span = row_span

    def set_row_style(self, row: int, style: RowStyle | None) -> None:
        if 0 <= row < len(self.rows):
            self.rows[row].style = style

    def set_column_style(self, col: int, style: ColumnStyle | None) -> None:
        if 0 <= col < len(self.columns):
            self.columns[col].style = style

    def set_cell_style(self, row: int, col: int, style: CellStyle | None) -> None:
        cell = self._cell(row, col)
        if cell is not None:
            cell.style = style

    def files_info(self) -> list[FileInfo]:
        """Tables carry no extra files."""
        return []

    def _styles(self):
        if self.style is not None:
            yield self.style.generate()
        for row in self.rows:
            if row.style is not None:
                yield row.style.generate()
            for cell in row.cells:
                if cell.style is not None:
                    yield cell.style.generate()
                if cell.value.style is not None:
                    yield cell.value.style.generate()
        for column in self.columns:
            if column.style is not None:
                yield column.style.generate()

    def generate_styles(self) -> str:
        """Return the automatic styles of the table, its rows, cells and columns."""
        return "".join(self._styles())

    @staticmethod
    def _generate_cell(cell: Cell) -> str:
        attrs = _style_attr(cell.style)
        if cell.col_span > 1:
            attrs += f' table:number-columns-spanned="{cell.col_span}"'
        if cell.row_span > 1:
            attrs += f' table:number-rows-spanned="{cell.row_span}"'
        body = ""
        if cell.value.value:
            text_style = ""
            if cell.value.style is not None:
                text_style = f' text:style-name="{cell.value.style.name}"'
            body = f"<text:p{text_style}>{cell.value.value}</text:p>"
        return f"<table:table-cell{attrs}>{body}</table:table-cell>\n"

    def _parts(self):
        yield f'<table:table table:name="{self.name}"{_style_attr(self.style)}>'
        for column in self.columns:
            yield f"<table:table-column{_style_attr(column.style)}/>"
        for row in self.rows:
            yield f"<table:table-row{_style_attr(row.style)}>\n"
            for cell in row.cells:
                yield self._generate_cell(cell)
            yield "</table:table-row>\n"
        yield "</table:table>"

    def generate(self) -> str:
        """Return the table element as XML."""
        return "".join(self._parts())