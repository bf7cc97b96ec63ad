"""Table detection for comma, tab and space-aligned report blocks."""
from __future__ import annotations

import logging

from .lines import LineCursor, TableDialect, is_separator_row
from .models import Table
from .values import ScalarValue, coerce

logger = logging.getLogger(__name__)


def read_table(cursor: LineCursor, dialect: TableDialect) -> Table | None:
    """Consume a ``dialect`` table whose header is under the cursor.

    Rows are taken greedily while lines keep the header's delimiter. Rows
    whose cell count differs from the header are dropped. When no row
    survives, the cursor is left untouched and ``None`` is returned so the
    header line can be treated as content.
    """

    header_line = cursor.peek()
    if header_line is None:
        return None
    headers = tuple(dialect.split(header_line))
    block = cursor.peek_while(dialect.continues, offset=1)
    rows: list[tuple[ScalarValue, ...]] = []
    for candidate in block:
        if dialect is TableDialect.SPACE and is_separator_row(candidate):
            continue
        cells = dialect.split(candidate)
        if len(cells) != len(headers):
            logger.debug(
                "Dropping %s row with %d cells (expected %d): %r",
                dialect.value,
                len(cells),
                len(headers),
                candidate.strip(),
            )
            continue
        rows.append(tuple(coerce(cell) for cell in cells))
    if not rows:
        return None
    cursor.advance(1 + len(block))
    return Table(headers=headers, rows=tuple(rows), dialect=dialect)
