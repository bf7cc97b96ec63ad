"""Report parser package."""
from __future__ import annotations

from pathlib import Path

from . import charts, engine, export, kinds, lines, metadata, renderer, scanner, sources, values
from .charts import Statistic, extract_chart_data
from .engine import identify_report_type, parse_report
from .export import report_to_csv, report_to_json
from .models import CriticalNVR, Metadata, ParsedReport, Section, Table
from .renderer import format_report
from .scanner import extract_sections, extract_tables
from .values import Boolean, Number, ScalarValue, Text, coerce

__all__ = [
    "charts",
    "engine",
    "export",
    "kinds",
    "lines",
    "metadata",
    "renderer",
    "scanner",
    "sources",
    "values",
    "Boolean",
    "CriticalNVR",
    "Metadata",
    "Number",
    "ParsedReport",
    "ScalarValue",
    "Section",
    "Statistic",
    "Table",
    "Text",
    "coerce",
    "extract_chart_data",
    "extract_sections",
    "extract_tables",
    "format_report",
    "identify_report_type",
    "parse_report",
    "parse_report_file",
    "report_to_csv",
    "report_to_json",
]


def parse_report_file(path: Path) -> ParsedReport:
    """Convenience wrapper that reads ``path`` and parses its text."""
    from .sources import read_document

    return parse_report(read_document(path))
