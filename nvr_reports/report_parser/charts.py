"""Numeric series for charts."""
from __future__ import annotations

from dataclasses import dataclass

from .models import ParsedReport
from .values import Number

STATISTICS_MARKERS = ("estatística", "estatistica")


@dataclass(frozen=True)
class Statistic:
    name: str
    value: float

    def to_dict(self) -> dict[str, object]:
        return {"name": self.name, "value": self.value}


def is_statistics_title(title: str) -> bool:
    lowered = title.casefold()
    return any(marker in lowered for marker in STATISTICS_MARKERS)


def extract_chart_data(report: ParsedReport) -> list[Statistic]:
    """Numeric fields of statistics sections, or of the summary when there are none."""
    statistics = [
        Statistic(name=key, value=value.value)
        for section in report.sections
        if is_statistics_title(section.title)
        for key, value in section.fields.items()
        if isinstance(value, Number)
    ]
    if statistics:
        return statistics
    return [
        Statistic(name=key, value=value.value)
        for key, value in report.summary.items()
        if isinstance(value, Number)
    ]
