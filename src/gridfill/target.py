from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Protocol

from .measure import DEFAULT_BODY_FONT, line_height
from .model import HorizontalAlignment, LineStyle, StyleTemplate, VerticalAlignment

CELL_PADDING = 5.0


class CellHandle(Protocol):
    def copy_style(self, template: StyleTemplate) -> None: ...

    def set_text(self, text: str) -> None: ...


class RowHandle(Protocol):
    def create_cell(
        self,
        width_pct: float,
        text: str,
        align: HorizontalAlignment,
        valign: VerticalAlignment,
        size: float,
    ) -> CellHandle: ...


class TableTarget(Protocol):
    @property
    def width(self) -> float: ...

    def create_row(self, height: float) -> RowHandle: ...

    def add_header_row(self, row: RowHandle) -> None: ...


@dataclass(slots=True)
class GridCell:
    row: "GridRow" = field(repr=False, compare=False)
    width_pct: float
    text: str
    align: HorizontalAlignment
    valign: VerticalAlignment
    font_size: float
    font: str = DEFAULT_BODY_FONT
    fill_color: str | None = None
    text_color: str = "#000000"
    border_style: LineStyle | None = None
    top_padding: float = CELL_PADDING
    bottom_padding: float = CELL_PADDING

    @property
    def absolute_width(self) -> float:
        return self.width_pct * self.row.table.width / 100.0

    @property
    def height(self) -> float:
        text_height = self.row.table.line_height(self.font, self.font_size)
        return text_height + self.top_padding + self.bottom_padding

    def copy_style(self, template: StyleTemplate) -> None:
        self.fill_color = template.fill_color
        self.text_color = template.text_color
        self.font = template.font
        self.font_size = template.font_size
        self.border_style = template.border_style
        self.align = template.align
        self.valign = template.valign

    def set_text(self, text: str) -> None:
        self.text = text

    def template(self) -> StyleTemplate:
        return StyleTemplate(
            fill_color=self.fill_color,
            text_color=self.text_color,
            font=self.font,
            font_size=self.font_size,
            border_style=self.border_style,
            align=self.align,
            valign=self.valign,
            row_height=self.height,
        )


@dataclass(slots=True)
class GridRow:
    table: "GridTable" = field(repr=False, compare=False)
    height: float
    cells: list[GridCell] = field(default_factory=list)
    is_header: bool = False

    def create_cell(
        self,
        width_pct: float,
        text: str,
        align: HorizontalAlignment,
        valign: VerticalAlignment,
        size: float,
    ) -> GridCell:
        cell = GridCell(
            row=self,
            width_pct=width_pct,
            text=text,
            align=align,
            valign=valign,
            font_size=size,
        )
        self.cells.append(cell)
        return cell

    @property
    def values(self) -> list[str]:
        return [cell.text for cell in self.cells]


@dataclass(slots=True)
class GridTable:
    """In-memory table target that records every row and cell handed to it."""

    width: float
    line_height: Callable[[str, float], float] = field(default=line_height, repr=False)
    rows: list[GridRow] = field(default_factory=list)
    header_rows: list[GridRow] = field(default_factory=list)
    closed: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"Table width must be > 0: {self.width}")

    def create_row(self, height: float) -> GridRow:
        if self.closed:
            raise RuntimeError("Table is closed")
        row = GridRow(table=self, height=height)
        self.rows.append(row)
        return row

    def add_header_row(self, row: GridRow) -> None:
        row.is_header = True
        self.header_rows.append(row)

    def close(self) -> None:
        self.closed = True
