from __future__ import annotations

from typing import Protocol

from reportlab.pdfbase import pdfmetrics

DEFAULT_BODY_FONT = "Helvetica"
DEFAULT_HEADER_FONT = "Helvetica-Bold"


class TextMeasurer(Protocol):
    def __call__(self, font: str, text: str, size: float) -> float: ...


def measure_text_width(font: str, text: str, size: float) -> float:
    return float(pdfmetrics.stringWidth(text, font, size))


def line_height(font: str, size: float) -> float:
    ascent, descent = pdfmetrics.getAscentDescent(font, size)
    return float(ascent - descent)
