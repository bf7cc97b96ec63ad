"""Single pass over a report that collects sections and tables together."""
from __future__ import annotations

from dataclasses import dataclass

from .lines import LineCursor, LineKind, classify
from .models import Section, Table
from .sections import SectionBuilder
from .tables import read_table
from .values import coerce


@dataclass(frozen=True)
class ScanResult:
    sections: tuple[Section, ...]
    tables: tuple[Table, ...]


def scan_document(text: str) -> ScanResult:
    """Walk the lines of ``text`` once, closing sections at titles and tables.

    Lines that follow a table belong to no section until the next title.
    Space-aligned tables are only recognized outside sections.
    """

    cursor = LineCursor.from_text(text)
    sections: list[Section] = []
    tables: list[Table] = []
    current: SectionBuilder | None = None
    while not cursor.at_end():
        line = classify(cursor, in_section=current is not None)
        if line.kind is LineKind.BLANK:
            cursor.advance()
            continue
        if line.kind is LineKind.TITLE and line.title is not None:
            if current is not None:
                sections.append(current.build())
            current = SectionBuilder(line.title)
            cursor.advance(2)
            continue
        if line.kind is LineKind.KEY_VALUE and line.key is not None and line.value is not None:
            if current is not None:
                current.add_line(line.text)
                current.add_field(line.key, coerce(line.value))
            cursor.advance()
            continue
        if line.kind is LineKind.TABLE_HEADER and line.dialect is not None:
            table = read_table(cursor, line.dialect)
            if table is not None:
                if current is not None:
                    sections.append(current.build())
                    current = None
                tables.append(table)
                continue
        if current is not None:
            current.add_line(line.text)
        cursor.advance()
    if current is not None:
        sections.append(current.build())
    return ScanResult(sections=tuple(sections), tables=tuple(tables))


def extract_sections(text: str) -> list[Section]:
    return list(scan_document(text).sections)


def extract_tables(text: str) -> list[Table]:
    return list(scan_document(text).tables)
