"""Report-level metadata read from the header block."""
from __future__ import annotations

import re

from .lines import split_key_value
from .models import Metadata

HEADER_BLOCK_LINES = 10

REPORT_HEADING_RE = re.compile(r"^(RELATÓRIO .+) - (\d{2}/\d{2}/\d{4})")
DATE_RE = re.compile(r"\b(\d{2}/\d{2}/\d{4})\b")

DATE_KEYS = {"data"}
PERIOD_KEYS = {"período", "periodo"}


def header_block(text: str, limit: int = HEADER_BLOCK_LINES) -> list[str]:
    block: list[str] = []
    for raw_line in text.split("\n"):
        stripped = raw_line.strip()
        if not stripped:
            continue
        block.append(stripped)
        if len(block) >= limit:
            break
    return block


def extract_metadata(text: str) -> Metadata:
    """Read report type, date and period from the first lines of ``text``.

    The ``RELATÓRIO … - DD/MM/YYYY`` heading wins; ``Data:`` and ``Período:``
    lines fill the gaps, and a bare date is the last resort for ``date``.
    Anything not found stays ``None``.
    """

    report_type: str | None = None
    date: str | None = None
    period: str | None = None
    lines = header_block(text)
    for line in lines:
        heading = REPORT_HEADING_RE.match(line)
        if heading:
            report_type = heading.group(1).strip()
            date = heading.group(2)
            break
    for line in lines:
        pair = split_key_value(line)
        if pair is None:
            continue
        key = pair[0].casefold()
        if key in DATE_KEYS and date is None:
            date = pair[1]
        elif key in PERIOD_KEYS and period is None:
            period = pair[1]
    if date is None:
        for line in lines:
            found = DATE_RE.search(line)
            if found:
                date = found.group(1)
                break
    return Metadata(report_type=report_type, date=date, period=period)
