from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator

from .errors import ResourceError
from .measure import DEFAULT_BODY_FONT, DEFAULT_HEADER_FONT, line_height
from .model import HorizontalAlignment, LineStyle, StyleTemplate, VerticalAlignment
from .target import GridCell, GridTable

logger = logging.getLogger(__name__)

BLACK = "#000000"
WHITE = "#FFFFFF"
LIGHT_GRAY = "#C0C0C0"
NEAR_WHITE = "#F2F2F2"
DARK_GRAY = "#404040"

THIN_LINE = LineStyle(color=DARK_GRAY, width=0.75)
THICK_LINE = LineStyle(color=DARK_GRAY, width=1.2)

ScratchFactory = Callable[[float, Callable[[str, float], float]], GridTable]


def _default_scratch_factory(width: float, measure_line: Callable[[str, float], float]) -> GridTable:
    return GridTable(width=width, line_height=measure_line)


@contextmanager
def scratch_table(
    width: float,
    *,
    measure_line: Callable[[str, float], float] = line_height,
    factory: ScratchFactory = _default_scratch_factory,
) -> Iterator[GridTable]:
    """Throwaway table used only to originate template cells.

    Released on every exit path. Acquire and release failures surface as
    ResourceError; errors raised inside the block propagate unchanged.
    """
    try:
        table = factory(width, measure_line)
    except Exception as exc:
        raise ResourceError(f"Cannot open scratch table (width={width})") from exc
    logger.debug("Opened scratch table (width=%s)", width)

    try:
        yield table
    finally:
        try:
            table.close()
        except Exception as exc:
            raise ResourceError("Cannot release scratch table") from exc
        logger.debug("Released scratch table")


class StyleSet:
    def __init__(
        self,
        *,
        header: StyleTemplate,
        default: StyleTemplate,
        font_size: float,
        body_font: str,
        header_font: str,
        even_body: StyleTemplate | None = None,
        odd_body: StyleTemplate | None = None,
    ) -> None:
        self._header = header
        self._default = default
        self._even_body = even_body or default
        self._odd_body = odd_body or default
        self._first_column: StyleTemplate | None = None
        self._last_column: StyleTemplate | None = None
        self._font_size = font_size
        self._body_font = body_font
        self._header_font = header_font

    @classmethod
    def create(
        cls,
        width: float,
        body_font: str | None = None,
        header_font: str | None = None,
        font_size: float = 8.0,
        use_default_theme: bool = True,
        *,
        measure_line: Callable[[str, float], float] = line_height,
        scratch_factory: ScratchFactory = _default_scratch_factory,
    ) -> "StyleSet":
        if width <= 0:
            raise ValueError(f"Table width must be > 0: {width}")

        resolved_body = body_font or DEFAULT_BODY_FONT
        resolved_header = header_font or DEFAULT_HEADER_FONT

        with scratch_table(width, measure_line=measure_line, factory=scratch_factory) as scratch:
            row = scratch.create_row(0.0)
            header_cell = row.create_cell(10.0, "A", HorizontalAlignment.CENTER, VerticalAlignment.MIDDLE, font_size)
            default_cell = row.create_cell(10.0, "A", HorizontalAlignment.LEFT, VerticalAlignment.MIDDLE, font_size)
            _apply_theme(header_cell, default_cell, resolved_header, resolved_body, use_default_theme)
            header = header_cell.template()
            default = default_cell.template()

        logger.debug(
            "Built style set (header_font=%s, body_font=%s, size=%s, default_theme=%s)",
            resolved_header,
            resolved_body,
            font_size,
            use_default_theme,
        )
        return cls(
            header=header,
            default=default,
            font_size=font_size,
            body_font=resolved_body,
            header_font=resolved_header,
        )

    @property
    def font_size(self) -> float:
        return self._font_size

    @property
    def body_font(self) -> str:
        return self._body_font

    @property
    def header_font(self) -> str:
        return self._header_font

    @property
    def default(self) -> StyleTemplate:
        return self._default

    @property
    def header(self) -> StyleTemplate:
        return self._header

    @header.setter
    def header(self, template: StyleTemplate) -> None:
        self._header = template

    @property
    def even_body(self) -> StyleTemplate:
        return self._even_body

    @even_body.setter
    def even_body(self, template: StyleTemplate) -> None:
        self._even_body = template

    @property
    def odd_body(self) -> StyleTemplate:
        return self._odd_body

    @odd_body.setter
    def odd_body(self, template: StyleTemplate) -> None:
        self._odd_body = template

    # Edge-column templates read as the default until an override is set.
    @property
    def first_column(self) -> StyleTemplate:
        return self._first_column or self._default

    @first_column.setter
    def first_column(self, template: StyleTemplate | None) -> None:
        self._first_column = template

    @property
    def last_column(self) -> StyleTemplate:
        return self._last_column or self._default

    @last_column.setter
    def last_column(self, template: StyleTemplate | None) -> None:
        self._last_column = template

    @property
    def first_column_override(self) -> StyleTemplate | None:
        return self._first_column

    @property
    def last_column_override(self) -> StyleTemplate | None:
        return self._last_column


def _apply_theme(
    header_cell: GridCell,
    default_cell: GridCell,
    header_font: str,
    body_font: str,
    use_default_theme: bool,
) -> None:
    header_cell.fill_color = LIGHT_GRAY
    header_cell.text_color = BLACK
    header_cell.font = header_font
    header_cell.border_style = THICK_LINE

    default_cell.fill_color = NEAR_WHITE
    default_cell.text_color = BLACK
    default_cell.font = body_font
    default_cell.border_style = THICK_LINE

    if not use_default_theme:
        header_cell.fill_color = WHITE
        default_cell.fill_color = WHITE
