from __future__ import annotations

import pytest

from gridfill.filler import TableFiller
from gridfill.style import StyleSet
from gridfill.target import GridTable
from tests.helpers import fake_line_height, fake_measure

TABLE_WIDTH = 500.0


@pytest.fixture
def styles() -> StyleSet:
    return StyleSet.create(TABLE_WIDTH, measure_line=fake_line_height)


@pytest.fixture
def table() -> GridTable:
    return GridTable(width=TABLE_WIDTH, line_height=fake_line_height)


@pytest.fixture
def filler(styles: StyleSet, table: GridTable) -> TableFiller:
    return TableFiller(styles, table, measure=fake_measure)
