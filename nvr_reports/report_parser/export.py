"""JSON and CSV serializers for parsed reports."""
from __future__ import annotations

import csv
import io
import json

from .models import ParsedReport
from .values import render_value


def report_to_json(report: ParsedReport, *, indent: int | None = 2) -> str:
    return json.dumps(report.to_dict(), ensure_ascii=False, indent=indent)


def report_to_csv(report: ParsedReport) -> str:
    """Flatten ``report`` into CSV blocks: metadata, sections, then tables.

    Cells holding a comma, quote or newline are quoted and inner quotes are
    doubled.
    """

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["Título", report.title])
    date = report.date or report.metadata.date
    if date:
        writer.writerow(["Data", date])
    if report.metadata.period:
        writer.writerow(["Período", report.metadata.period])
    writer.writerow([])
    for section in report.sections:
        writer.writerow([section.title])
        writer.writerow(["Propriedade", "Valor"])
        for key, value in section.fields.items():
            writer.writerow([key, render_value(value)])
        writer.writerow([])
    for table in report.tables:
        writer.writerow(table.headers)
        for row in table.rows:
            writer.writerow([render_value(cell) for cell in row])
        writer.writerow([])
    return buffer.getvalue()
