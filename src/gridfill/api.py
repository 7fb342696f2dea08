from __future__ import annotations

from typing import Iterable, Sequence

from .filler import TableFiller
from .model import FillOptions
from .render_html import render_table_html
from .style import StyleSet
from .target import GridTable


def _build_filler(width: float, options: FillOptions | None) -> tuple[TableFiller, GridTable, FillOptions]:
    opts = options or FillOptions()
    table = GridTable(width=width)
    styles = StyleSet.create(
        width,
        body_font=opts.body_font,
        header_font=opts.header_font,
        font_size=opts.font_size,
        use_default_theme=opts.use_default_theme,
    )
    return TableFiller(styles, table), table, opts


def fill_table(
    rows: Iterable[Sequence[str]],
    width: float,
    *,
    has_header: bool = True,
    options: FillOptions | None = None,
) -> GridTable:
    filler, table, _ = _build_filler(width, options)
    filler.fill_from_rows(rows, has_header)
    return table


def fill_table_from_text(
    text: str,
    width: float,
    *,
    has_header: bool = True,
    options: FillOptions | None = None,
) -> GridTable:
    filler, table, opts = _build_filler(width, options)
    filler.fill_from_delimited_text(text, has_header, opts.delimiter)
    return table


def convert_rows_to_html(
    rows: Iterable[Sequence[str]],
    width: float,
    *,
    has_header: bool = True,
    options: FillOptions | None = None,
    title: str | None = None,
) -> str:
    table = fill_table(rows, width, has_header=has_header, options=options)
    return render_table_html(table, title=title)


def convert_delimited_to_html(
    text: str,
    width: float,
    *,
    has_header: bool = True,
    options: FillOptions | None = None,
    title: str | None = None,
) -> str:
    table = fill_table_from_text(text, width, has_header=has_header, options=options)
    return render_table_html(table, title=title)
