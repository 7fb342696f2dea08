from __future__ import annotations

import csv
import io
import logging
from typing import Any, Iterable, Sequence

from .errors import MalformedInputError

logger = logging.getLogger(__name__)


def _check_delimiter(delimiter: str) -> None:
    if len(delimiter) != 1:
        raise ValueError(f"Delimiter must be a single character: {delimiter!r}")


def parse_delimited(text: str, delimiter: str = ";") -> list[list[str]]:
    _check_delimiter(delimiter)
    if not text:
        return []

    reader = csv.reader(io.StringIO(text, newline=""), dialect="excel", delimiter=delimiter, strict=True)
    rows: list[list[str]] = []
    try:
        for record in reader:
            # A blank line is a record holding one empty field.
            rows.append(record or [""])
    except csv.Error as exc:
        raise MalformedInputError(f"Malformed delimited text at line {reader.line_num}: {exc}") from exc

    logger.debug("Parsed %d rows (delimiter=%r)", len(rows), delimiter)
    return rows


def rows_to_delimited(rows: Iterable[Sequence[Any]], delimiter: str = ";") -> str:
    _check_delimiter(delimiter)
    buffer = io.StringIO(newline="")
    writer = csv.writer(buffer, dialect="excel", delimiter=delimiter, lineterminator="\n")
    for row in rows:
        writer.writerow(["" if value is None else str(value) for value in row])
    return buffer.getvalue()
