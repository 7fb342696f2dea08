from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

from .measure import TextMeasurer, measure_text_width
from .model import StyleTemplate
from .style import StyleSet
from .target import TableTarget
from .tokenizer import parse_delimited, rows_to_delimited

logger = logging.getLogger(__name__)

ColumnWidths = dict[int, float]

VALUES_DELIMITER = ";"


def compute_column_widths(
    row: Sequence[str],
    template: StyleTemplate,
    measure: TextMeasurer = measure_text_width,
) -> ColumnWidths:
    """Percentage of the table width per column, proportional to the padded text extent."""
    text_widths = [measure(template.font, f" {value} ", template.font_size) for value in row]
    if not text_widths:
        return {}

    total = sum(text_widths)
    if total <= 0:
        share = 100.0 / len(text_widths)
        return {idx: share for idx in range(len(text_widths))}
    return {idx: width * 100.0 / total for idx, width in enumerate(text_widths)}


def fit_row(row: Sequence[str], column_count: int) -> list[str]:
    values = list(row[:column_count])
    values.extend([""] * (column_count - len(values)))
    return values


class TableFiller:
    def __init__(
        self,
        styles: StyleSet,
        table: TableTarget | None = None,
        measure: TextMeasurer = measure_text_width,
    ) -> None:
        self.styles = styles
        self.table = table
        self.measure = measure

    def fill_from_delimited_text(
        self,
        text: str | None,
        has_header: bool,
        delimiter: str = VALUES_DELIMITER,
        *,
        table: TableTarget | None = None,
    ) -> None:
        if not text:
            return
        self.fill_from_rows(parse_delimited(text, delimiter), has_header, table=table)

    def fill_from_values(
        self,
        rows: Iterable[Sequence[Any]] | None,
        has_header: bool,
        *,
        table: TableTarget | None = None,
    ) -> None:
        if rows is None:
            return
        block = [list(row) for row in rows]
        if not block or not block[0]:
            return
        text = rows_to_delimited(block, VALUES_DELIMITER)
        self.fill_from_delimited_text(text, has_header, VALUES_DELIMITER, table=table)

    def fill_from_rows(
        self,
        rows: Iterable[Sequence[str]] | None,
        has_header: bool,
        column_widths: Mapping[int, float] | None = None,
        *,
        table: TableTarget | None = None,
    ) -> None:
        if rows is None:
            return
        block = list(rows)
        if not block or not block[0]:
            return

        target = self._resolve_table(table)
        column_count = len(block[0])
        if column_widths is None:
            widths = compute_column_widths(block[0], self.styles.header, self.measure)
        else:
            missing = [idx for idx in range(column_count) if idx not in column_widths]
            if missing:
                raise ValueError(f"Missing column widths for columns: {missing}")
            widths = dict(column_widths)

        logger.debug(
            "Filling block: rows=%d, columns=%d, header=%s, widths=%s",
            len(block),
            column_count,
            has_header,
            widths,
        )

        body = iter(block)
        if has_header:
            self._emit_header_row(target, fit_row(next(body), column_count), widths)

        is_odd = True
        for row in body:
            self._emit_body_row(target, fit_row(row, column_count), widths, is_odd)
            is_odd = not is_odd

    def _resolve_table(self, table: TableTarget | None) -> TableTarget:
        target = table if table is not None else self.table
        if target is None:
            raise ValueError("No table target to fill")
        return target

    def _emit_header_row(self, table: TableTarget, values: list[str], widths: ColumnWidths) -> None:
        template = self.styles.header
        row = table.create_row(template.row_height)
        for idx, value in enumerate(values):
            cell = row.create_cell(widths[idx], value, template.align, template.valign, self.styles.font_size)
            cell.copy_style(template)
            cell.set_text(value)
        table.add_header_row(row)

    def _emit_body_row(self, table: TableTarget, values: list[str], widths: ColumnWidths, is_odd: bool) -> None:
        row = table.create_row(self.styles.even_body.row_height)
        last_idx = len(values) - 1
        for idx, value in enumerate(values):
            template = self._body_template(idx, last_idx, is_odd)
            cell = row.create_cell(widths[idx], value, template.align, template.valign, self.styles.font_size)
            cell.copy_style(template)
            cell.set_text(value)

    def _body_template(self, idx: int, last_idx: int, is_odd: bool) -> StyleTemplate:
        styles = self.styles
        if idx == last_idx and styles.last_column_override is not None:
            return styles.last_column_override
        if idx == 0 and styles.first_column_override is not None:
            return styles.first_column_override
        return styles.odd_body if is_odd else styles.even_body
