from .api import convert_delimited_to_html, convert_rows_to_html, fill_table, fill_table_from_text
from .errors import GridFillError, MalformedInputError, ResourceError
from .filler import TableFiller, compute_column_widths
from .model import FillOptions, HorizontalAlignment, LineStyle, StyleTemplate, VerticalAlignment
from .style import StyleSet
from .target import GridTable

__all__ = [
    "FillOptions",
    "GridFillError",
    "GridTable",
    "HorizontalAlignment",
    "LineStyle",
    "MalformedInputError",
    "ResourceError",
    "StyleSet",
    "StyleTemplate",
    "TableFiller",
    "VerticalAlignment",
    "compute_column_widths",
    "convert_delimited_to_html",
    "convert_rows_to_html",
    "fill_table",
    "fill_table_from_text",
]
