from __future__ import annotations

from html import escape as html_escape

from .model import LineStyle
from .target import GridCell, GridRow, GridTable

FONT_FAMILIES = {
    "Helvetica": "Helvetica, Arial, sans-serif",
    "Times": "'Times New Roman', Times, serif",
    "Courier": "'Courier New', Courier, monospace",
    "Symbol": "Symbol, serif",
    "ZapfDingbats": "'Zapf Dingbats', serif",
}


def render_table_html(table: GridTable, *, title: str | None = None) -> str:
    parts: list[str] = []

    parts.append("<!doctype html>")
    parts.append('<html lang="en">')
    parts.append("<head>")
    parts.append('<meta charset="utf-8">')
    parts.append('<meta name="viewport" content="width=device-width, initial-scale=1">')
    parts.append(f"<title>{html_escape(title or 'Table')}</title>")
    parts.append(_html_css())
    parts.append("</head>")
    parts.append("<body>")

    if title:
        parts.append(f"<h1>{html_escape(title)}</h1>")
    parts.append(_render_grid_html(table))
    parts.append("</body>")
    parts.append("</html>")

    return "\n".join(parts) + "\n"


def _render_grid_html(table: GridTable) -> str:
    if not table.rows:
        return '<p class="empty">No rows.</p>'

    out: list[str] = []
    out.append(f'<div class="gf-wrap" style="width:{table.width:.1f}pt">')
    out.append('<table class="gf-grid">')
    out.append("<colgroup>")
    for cell in table.rows[0].cells:
        out.append(f'<col style="width:{cell.width_pct:.4f}%">')
    out.append("</colgroup>")

    # Leading header rows go in thead; header rows of later blocks stay in place.
    lead = 0
    while lead < len(table.rows) and table.rows[lead].is_header:
        lead += 1
    if lead:
        out.append("<thead>")
        out.extend(_row_html(row) for row in table.rows[:lead])
        out.append("</thead>")
    if lead < len(table.rows):
        out.append("<tbody>")
        out.extend(_row_html(row) for row in table.rows[lead:])
        out.append("</tbody>")
    out.append("</table>")
    out.append("</div>")
    return "\n".join(out)


def _row_html(row: GridRow) -> str:
    tag = "th" if row.is_header else "td"
    row_class = "gf-head-row" if row.is_header else "gf-body-row"
    cells: list[str] = []
    for cell in row.cells:
        classes = ["gf-cell"]
        if not cell.text.strip():
            classes.append("gf-empty")
        cells.append(
            f'<{tag} class="{" ".join(classes)}" style="{html_escape(_cell_css(cell))}">'
            f"{html_escape(cell.text)}</{tag}>"
        )
    height = max([row.height] + [cell.height for cell in row.cells])
    return f'<tr class="{row_class}" style="height:{height:.1f}pt">' + "".join(cells) + "</tr>"


def _cell_css(cell: GridCell) -> str:
    pieces = [f"width:{cell.width_pct:.4f}%"]
    if cell.fill_color:
        pieces.append(f"background-color:{cell.fill_color}")
    pieces.append(f"color:{cell.text_color}")
    pieces.extend(_font_css(cell.font))
    pieces.append(f"font-size:{cell.font_size:g}pt")
    pieces.append(_border_css(cell.border_style))
    pieces.append(f"text-align:{cell.align.value}")
    pieces.append(f"vertical-align:{cell.valign.value}")
    pieces.append(f"padding:{cell.top_padding:g}pt 5pt {cell.bottom_padding:g}pt 5pt")
    return ";".join(pieces) + ";"


def _font_css(font: str) -> list[str]:
    family, _, variant = font.partition("-")
    if family == "Times" and variant == "Roman":
        variant = ""
    pieces = [f"font-family:{FONT_FAMILIES.get(family, repr(font))}"]
    if "Bold" in variant:
        pieces.append("font-weight:700")
    if "Oblique" in variant or "Italic" in variant:
        pieces.append("font-style:italic")
    return pieces


def _border_css(border: LineStyle | None) -> str:
    if border is None:
        return "border:none"
    return f"border:{border.width:g}pt solid {border.color}"


def _html_css() -> str:
    return """<style>
.gf-wrap { overflow: auto; }
.gf-grid { border-collapse: collapse; table-layout: fixed; width: 100%; }
.gf-grid th, .gf-grid td { overflow: hidden; white-space: pre-wrap; }
.gf-grid .gf-empty { color: transparent; }
</style>"""
