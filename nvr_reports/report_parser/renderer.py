"""Plain-text rendering of parsed reports."""
from __future__ import annotations

from collections.abc import Sequence

from .models import ParsedReport, Section, Table
from .values import render_value


def format_report(report: ParsedReport) -> str:
    """Render ``report`` as an aligned plain-text document.

    The layout is meant for display: titles are underlined, section fields
    become ``key: value`` lines and table columns are padded to their widest
    cell. It does not reproduce the original text.
    """

    lines: list[str] = []
    if report.title:
        lines.append(report.title)
        lines.append("=" * len(report.title))
        lines.append("")
    metadata_lines = format_metadata(report)
    if metadata_lines:
        lines.extend(metadata_lines)
        lines.append("")
    for section in report.sections:
        lines.extend(format_section(section))
        lines.append("")
    for table in report.tables:
        lines.extend(format_table(table))
        lines.append("")
    return "\n".join(lines)


def format_metadata(report: ParsedReport) -> list[str]:
    metadata = report.metadata
    lines: list[str] = []
    date = report.date or metadata.date
    if date:
        lines.append(f"Data: {date}")
    if metadata.period:
        lines.append(f"Período: {metadata.period}")
    return lines


def format_section(section: Section) -> list[str]:
    lines = [f"{section.title}:", "-" * (len(section.title) + 1)]
    for key, value in section.fields.items():
        lines.append(f"{key}: {render_value(value)}")
    return lines


def column_widths(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> list[int]:
    widths = [len(header) for header in headers]
    for row in rows:
        for index, cell in enumerate(row[: len(widths)]):
            widths[index] = max(widths[index], len(cell))
    return widths


def format_table(table: Table) -> list[str]:
    cells = [[render_value(value) for value in row] for row in table.rows]
    widths = column_widths(table.headers, cells)
    lines = [
        "".join(header.ljust(width + 2) for header, width in zip(table.headers, widths)),
        "".join("-" * width + "  " for width in widths),
    ]
    for row in cells:
        padded = [
            (row[index] if index < len(row) else "").ljust(width + 2)
            for index, width in enumerate(widths)
        ]
        lines.append("".join(padded))
    return lines
