"""Entry point that turns report text into a :class:`ParsedReport`."""
from __future__ import annotations

import logging

from .kinds import GENERIC, identify_kind, identify_report_type
from .metadata import extract_metadata
from .models import Metadata, ParsedReport
from .scanner import scan_document

logger = logging.getLogger(__name__)

__all__ = ["parse_report", "identify_report_type"]


def parse_report(text: str | None) -> ParsedReport:
    """Parse ``text`` into sections, tables, metadata and a kind-specific summary.

    Never raises for any string input. ``None`` and empty text give an empty
    report of kind ``unknown``.
    """

    if not text:
        return ParsedReport(title=GENERIC.default_title, date="", metadata=Metadata())
    kind = identify_kind(text)
    scan = scan_document(text)
    metadata = extract_metadata(text)
    summary = kind.extract_summary(scan.sections, scan.tables)
    logger.debug(
        "Parsed %s report: %d sections, %d tables, %d summary keys",
        kind.name,
        len(scan.sections),
        len(scan.tables),
        len(summary),
    )
    return ParsedReport(
        title=metadata.report_type or kind.default_title,
        date=metadata.date or "",
        sections=scan.sections,
        tables=scan.tables,
        summary=summary,
        metadata=metadata,
        kind=kind.name,
    )
