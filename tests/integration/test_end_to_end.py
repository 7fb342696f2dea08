from __future__ import annotations

import pytest

from gridfill import FillOptions, StyleSet, TableFiller
from gridfill.api import convert_delimited_to_html, convert_rows_to_html, fill_table, fill_table_from_text
from gridfill.measure import measure_text_width
from gridfill.target import GridTable

SAMPLE = "h1;h2;h3\na;b;c\nd;e;f\n"


def test_delimited_round_trip_scenario() -> None:
    width = 450.0
    table = GridTable(width=width)
    styles = StyleSet.create(width)
    styles.odd_body = styles.default.replace(fill_color="#DDEEFF")
    styles.even_body = styles.default.replace(fill_color="#FFFFFF")
    filler = TableFiller(styles, table)

    filler.fill_from_delimited_text(SAMPLE, True, ";")

    header, first, second = table.rows
    assert table.header_rows == [header]
    assert header.values == ["h1", "h2", "h3"]
    assert all(cell.fill_color == styles.header.fill_color for cell in header.cells)
    assert first.values == ["a", "b", "c"]
    assert all(cell.fill_color == "#DDEEFF" for cell in first.cells)
    assert second.values == ["d", "e", "f"]
    assert all(cell.fill_color == "#FFFFFF" for cell in second.cells)
    for row in table.rows:
        assert sum(cell.width_pct for cell in row.cells) == pytest.approx(100.0)
        assert sum(cell.absolute_width for cell in row.cells) == pytest.approx(width)


def test_real_metrics_are_proportional() -> None:
    table = fill_table([["Identifier", "x"], ["1", "2"]], 300.0)

    wide = measure_text_width("Helvetica-Bold", " Identifier ", 8.0)
    narrow = measure_text_width("Helvetica-Bold", " x ", 8.0)
    header = table.rows[0]
    assert header.cells[0].width_pct / header.cells[1].width_pct == pytest.approx(wide / narrow)


def test_fill_table_from_text_uses_options() -> None:
    options = FillOptions(delimiter=",", font_size=10.0, use_default_theme=False, body_font="Times-Roman")
    table = fill_table_from_text('name,city\nAda,"London, UK"\n', 500.0, options=options)

    assert [row.values for row in table.rows] == [["name", "city"], ["Ada", "London, UK"]]
    body = table.rows[1]
    assert all(cell.font == "Times-Roman" for cell in body.cells)
    assert all(cell.font_size == 10.0 for cell in body.cells)
    assert all(cell.fill_color == "#FFFFFF" for cell in body.cells)


def test_standalone_html_output() -> None:
    html = convert_delimited_to_html(SAMPLE, 400.0, title="Sample")

    assert "<!doctype html>" in html.lower()
    assert '<table class="gf-grid">' in html
    assert html.count('<tr class="gf-head-row"') == 1
    assert html.count('<tr class="gf-body-row"') == 2
    assert ">h3</th>" in html


def test_rows_to_html_without_header() -> None:
    html = convert_rows_to_html([["a", "b"], ["c"]], 400.0, has_header=False)

    assert 'gf-head-row' not in html
    assert html.count('<tr class="gf-body-row"') == 2
    assert 'class="gf-cell gf-empty"' in html


def test_empty_text_produces_empty_table() -> None:
    table = fill_table_from_text("", 400.0)

    assert table.rows == []
