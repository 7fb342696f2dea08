from __future__ import annotations

from gridfill.target import GridRow, GridTable


def fake_measure(font: str, text: str, size: float) -> float:
    return len(text) * size * 0.5


def fake_line_height(font: str, size: float) -> float:
    if font == "Bogus":
        raise KeyError(font)
    return size * 1.2


def row_values(table: GridTable) -> list[list[str]]:
    return [row.values for row in table.rows]


def fill_colors(row: GridRow) -> list[str | None]:
    return [cell.fill_color for cell in row.cells]


class RecordingFactory:
    def __init__(self, table_cls: type[GridTable] = GridTable) -> None:
        self.table_cls = table_cls
        self.tables: list[GridTable] = []

    def __call__(self, width: float, measure_line) -> GridTable:
        table = self.table_cls(width=width, line_height=measure_line)
        self.tables.append(table)
        return table
