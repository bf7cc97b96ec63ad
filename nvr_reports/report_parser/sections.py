"""Section building and lookup."""
from __future__ import annotations

from collections.abc import Iterable

from .models import Section
from .values import ScalarValue

SUMMARY_SECTION_TITLE = "RESUMO GERAL"


class SectionBuilder:
    """Accumulates the body of a section until the scanner closes it."""

    def __init__(self, title: str) -> None:
        self.title = title
        self.raw_lines: list[str] = []
        self.fields: dict[str, ScalarValue] = {}

    def add_line(self, line: str) -> None:
        self.raw_lines.append(line)

    def add_field(self, key: str, value: ScalarValue) -> None:
        # Duplicate keys keep their first position; the later value wins.
        self.fields[key] = value

    def build(self) -> Section:
        return Section(title=self.title, raw_lines=tuple(self.raw_lines), fields=dict(self.fields))


def find_section(sections: Iterable[Section], title: str) -> Section | None:
    return next((section for section in sections if section.title == title), None)


def find_section_containing(sections: Iterable[Section], fragment: str) -> Section | None:
    return next((section for section in sections if fragment in section.title), None)


def summary_fields(sections: Iterable[Section]) -> dict[str, ScalarValue]:
    """Key/value pairs of the ``RESUMO GERAL`` section, copied verbatim."""
    section = find_section(sections, SUMMARY_SECTION_TITLE)
    if section is None:
        return {}
    return dict(section.fields)
