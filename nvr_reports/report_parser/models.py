"""Structured report records produced by the parsing engine."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from .lines import TableDialect
from .values import ScalarValue, to_native

ReportKindName = Literal["nvr", "hd-evolution", "unknown"]


@dataclass(frozen=True)
class Section:
    """A titled, underlined block of a report."""

    title: str
    raw_lines: tuple[str, ...] = ()
    fields: dict[str, ScalarValue] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        return {
            "title": self.title,
            "rawLines": list(self.raw_lines),
            "fields": {key: to_native(value) for key, value in self.fields.items()},
        }


@dataclass(frozen=True)
class Table:
    """Rows sharing one delimiter convention. Every row matches ``headers`` in length."""

    headers: tuple[str, ...]
    rows: tuple[tuple[ScalarValue, ...], ...] = ()
    dialect: TableDialect = TableDialect.COMMA

    def to_dict(self) -> dict[str, object]:
        return {
            "headers": list(self.headers),
            "rows": [[to_native(cell) for cell in row] for row in self.rows],
        }


@dataclass(frozen=True)
class Metadata:
    report_type: str | None = None
    date: str | None = None
    period: str | None = None

    def to_dict(self) -> dict[str, str]:
        data: dict[str, str] = {}
        if self.report_type is not None:
            data["reportType"] = self.report_type
        if self.date is not None:
            data["date"] = self.date
        if self.period is not None:
            data["period"] = self.period
        return data


@dataclass(frozen=True)
class CriticalNVR:
    marina: str
    numeracao: str
    problema: str

    def to_dict(self) -> dict[str, str]:
        return {"marina": self.marina, "numeracao": self.numeracao, "problema": self.problema}


SummaryValue = ScalarValue | list[CriticalNVR]


def summary_to_dict(summary: dict[str, SummaryValue]) -> dict[str, Any]:
    data: dict[str, Any] = {}
    for key, value in summary.items():
        if isinstance(value, list):
            data[key] = [entry.to_dict() for entry in value]
        else:
            data[key] = to_native(value)
    return data


@dataclass(frozen=True)
class ParsedReport:
    """Everything recovered from one report text."""

    title: str
    date: str
    sections: tuple[Section, ...] = ()
    tables: tuple[Table, ...] = ()
    summary: dict[str, SummaryValue] = field(default_factory=dict)
    metadata: Metadata = field(default_factory=Metadata)
    kind: ReportKindName = "unknown"

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "date": self.date,
            "sections": [section.to_dict() for section in self.sections],
            "tables": [table.to_dict() for table in self.tables],
            "summary": summary_to_dict(self.summary),
            "metadata": self.metadata.to_dict(),
        }
