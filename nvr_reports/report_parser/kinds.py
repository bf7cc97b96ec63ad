"""Report kinds, their signatures and kind-specific summary extraction."""
from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .models import CriticalNVR, ReportKindName, Section, SummaryValue, Table
from .sections import find_section, find_section_containing, summary_fields
from .values import Number, numeric_or_zero

NVR_SIGNATURE = "RELATÓRIO DE STATUS DO SISTEMA NVR"
HD_EVOLUTION_SIGNATURE = "RELATÓRIO DE EVOLUÇÃO DE HDs"

CRITICAL_SECTION_MARKER = "CRÍTICO"
PURCHASE_SECTION_TITLE = "COMPRA DOS NVRS"

CRITICAL_LINE_RE = re.compile(
    r"^(?P<marina>.+?)\s*-\s*NVR\s*(?P<number>\d+)\s*:\s*(?P<problem>.+)$",
    re.IGNORECASE,
)

SLOTS_COLUMN = 2
COST_COLUMN = 3

SummaryExtractor = Callable[[Sequence[Section], Sequence[Table]], dict[str, SummaryValue]]


def parse_critical_line(line: str) -> CriticalNVR | None:
    match = CRITICAL_LINE_RE.match(line.strip())
    if not match:
        return None
    marina = match.group("marina").strip()
    if not marina:
        return None
    return CriticalNVR(
        marina=marina,
        numeracao=match.group("number"),
        problema=match.group("problem").strip(),
    )


def extract_generic_summary(
    sections: Sequence[Section], tables: Sequence[Table]
) -> dict[str, SummaryValue]:
    return dict(summary_fields(sections))


def extract_nvr_summary(
    sections: Sequence[Section], tables: Sequence[Table]
) -> dict[str, SummaryValue]:
    summary = extract_generic_summary(sections, tables)
    critical = find_section_containing(sections, CRITICAL_SECTION_MARKER)
    if critical is None:
        return summary
    entries: list[CriticalNVR] = []
    for line in critical.raw_lines:
        entry = parse_critical_line(line)
        if entry is not None:
            entries.append(entry)
    summary["criticalNVRs"] = entries
    return summary


def extract_hd_evolution_summary(
    sections: Sequence[Section], tables: Sequence[Table]
) -> dict[str, SummaryValue]:
    summary = extract_generic_summary(sections, tables)
    if find_section(sections, PURCHASE_SECTION_TITLE) is None or not tables:
        return summary
    total_slots = 0.0
    total_cost = 0.0
    for row in tables[0].rows:
        if len(row) <= COST_COLUMN:
            continue
        total_slots += numeric_or_zero(row[SLOTS_COLUMN])
        total_cost += numeric_or_zero(row[COST_COLUMN])
    summary["totalSlots"] = Number(total_slots)
    summary["totalCost"] = Number(total_cost)
    return summary


@dataclass(frozen=True)
class ReportKind:
    """One known report family and the summary rules that apply to it."""

    name: ReportKindName
    signature: str | None
    default_title: str
    extract_summary: SummaryExtractor


NVR = ReportKind("nvr", NVR_SIGNATURE, "Relatório NVR", extract_nvr_summary)
HD_EVOLUTION = ReportKind(
    "hd-evolution",
    HD_EVOLUTION_SIGNATURE,
    "Relatório de Evolução de HDs",
    extract_hd_evolution_summary,
)
GENERIC = ReportKind("unknown", None, "Relatório", extract_generic_summary)

# Signatures are checked in this order.
SIGNED_KINDS = (NVR, HD_EVOLUTION)


def identify_kind(text: str | None) -> ReportKind:
    if not text:
        return GENERIC
    for kind in SIGNED_KINDS:
        if kind.signature and kind.signature in text:
            return kind
    return GENERIC


def identify_report_type(text: str | None) -> ReportKindName:
    """Classify a whole report as ``nvr``, ``hd-evolution`` or ``unknown``."""
    return identify_kind(text).name
