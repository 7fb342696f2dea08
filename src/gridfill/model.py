from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class HorizontalAlignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAlignment(str, Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


@dataclass(frozen=True, slots=True)
class LineStyle:
    color: str
    width: float


@dataclass(frozen=True, slots=True)
class StyleTemplate:
    fill_color: str | None
    text_color: str
    font: str
    font_size: float
    border_style: LineStyle | None
    align: HorizontalAlignment
    valign: VerticalAlignment
    row_height: float

    def replace(self, **changes) -> "StyleTemplate":
        return replace(self, **changes)


@dataclass(slots=True)
class FillOptions:
    delimiter: str = ";"
    font_size: float = 8.0
    use_default_theme: bool = True
    body_font: str | None = None
    header_font: str | None = None
