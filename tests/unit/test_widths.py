from __future__ import annotations

import pytest

from gridfill.filler import compute_column_widths
from tests.conftest import TABLE_WIDTH
from tests.helpers import fake_measure


def test_widths_sum_to_hundred(styles) -> None:
    widths = compute_column_widths(["id", "name", "description"], styles.header, fake_measure)

    assert sorted(widths) == [0, 1, 2]
    assert sum(widths.values()) == pytest.approx(100.0)
    assert sum(pct * TABLE_WIDTH / 100 for pct in widths.values()) == pytest.approx(TABLE_WIDTH)


def test_widths_follow_padded_text_extent(styles) -> None:
    widths = compute_column_widths(["id", "name", "description"], styles.header, fake_measure)

    # " id " / " name " / " description " -> 4 / 6 / 13 characters
    assert widths[0] == pytest.approx(4 * 100 / 23)
    assert widths[1] == pytest.approx(6 * 100 / 23)
    assert widths[2] / widths[0] == pytest.approx(13 / 4)


def test_closed_form_matches_scaled_form(styles) -> None:
    row = ["alpha", "b", "gamma delta"]
    header = styles.header
    text_widths = [fake_measure(header.font, f" {v} ", header.font_size) for v in row]
    size_factor = TABLE_WIDTH / sum(text_widths)
    expected = [(w * 100 / TABLE_WIDTH) * size_factor for w in text_widths]

    widths = compute_column_widths(row, header, fake_measure)

    assert [widths[i] for i in range(3)] == pytest.approx(expected)


def test_measures_with_header_font(styles) -> None:
    seen: list[tuple[str, str, float]] = []

    def measure(font: str, text: str, size: float) -> float:
        seen.append((font, text, size))
        return 10.0

    compute_column_widths(["a", ""], styles.header, measure)

    assert seen == [
        (styles.header.font, " a ", styles.header.font_size),
        (styles.header.font, "  ", styles.header.font_size),
    ]


def test_zero_extent_shares_width_equally(styles) -> None:
    widths = compute_column_widths(["a", "b", "c", "d"], styles.header, lambda font, text, size: 0.0)

    assert widths == {0: 25.0, 1: 25.0, 2: 25.0, 3: 25.0}


def test_empty_row_has_no_widths(styles) -> None:
    assert compute_column_widths([], styles.header, fake_measure) == {}
