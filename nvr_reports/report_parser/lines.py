"""Line cursor and line classification rules for plain-text reports."""
from __future__ import annotations

import csv
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

TITLE_UNDERLINE_RE = re.compile(r"^={2,}$")
DASH_UNDERLINE_RE = re.compile(r"^-{2,}$")
ACRONYM_PLURAL_RE = re.compile(r"(?<=[A-Z]{2})s\b")
KEY_VALUE_RE = re.compile(r"^([^:]+):\s*(.+)$")
SPACE_RUN_RE = re.compile(r" {2,}")
SEPARATOR_ROW_RE = re.compile(r"^-[-\s]*$")

# Column names that mark a comma line as a table header even with two fields.
HEADER_HINTS = ("Numeração", "Marina")


class LineCursor:
    """Forward-only view over the lines of a document."""

    def __init__(self, lines: Sequence[str]) -> None:
        self._lines = list(lines)
        self.index = 0

    @classmethod
    def from_text(cls, text: str) -> LineCursor:
        return cls(text.split("\n"))

    def at_end(self) -> bool:
        return self.index >= len(self._lines)

    def peek(self, offset: int = 0) -> str | None:
        position = self.index + offset
        if 0 <= position < len(self._lines):
            return self._lines[position]
        return None

    def peek_next(self) -> str | None:
        return self.peek(1)

    def advance(self, count: int = 1) -> None:
        self.index = min(self.index + count, len(self._lines))

    def peek_while(self, predicate: Callable[[str], bool], offset: int = 0) -> list[str]:
        """Lines from ``offset`` on that satisfy ``predicate``, without moving."""
        matched: list[str] = []
        position = self.index + offset
        while 0 <= position < len(self._lines) and predicate(self._lines[position]):
            matched.append(self._lines[position])
            position += 1
        return matched


class LineKind(Enum):
    BLANK = "blank"
    TITLE = "title"
    KEY_VALUE = "key_value"
    TABLE_HEADER = "table_header"
    CONTENT = "content"


def split_comma(line: str) -> list[str]:
    try:
        fields = next(csv.reader([line], skipinitialspace=True), [])
    except csv.Error:
        fields = line.split(",")
    return [field.strip() for field in fields]


def split_tab(line: str) -> list[str]:
    return [field.strip() for field in line.split("\t") if field.strip()]


def split_space(line: str) -> list[str]:
    return [field.strip() for field in SPACE_RUN_RE.split(line) if field.strip()]


class TableDialect(Enum):
    COMMA = "comma"
    TAB = "tab"
    SPACE = "space"

    def split(self, line: str) -> list[str]:
        stripped = line.strip()
        if self is TableDialect.COMMA:
            return split_comma(stripped)
        if self is TableDialect.TAB:
            return split_tab(stripped)
        return split_space(stripped)

    def continues(self, line: str) -> bool:
        """Whether ``line`` can still be a row of a table in this dialect."""
        stripped = line.strip()
        if not stripped:
            return False
        if self is TableDialect.COMMA:
            return "," in stripped
        if self is TableDialect.TAB:
            return "\t" in stripped
        return len(split_space(stripped)) > 1


def is_uppercase_title(line: str) -> bool:
    if not line:
        return False
    normalized = ACRONYM_PLURAL_RE.sub("S", line)
    return normalized == normalized.upper()


def match_title(cursor: LineCursor) -> str | None:
    """Return the section title starting at the cursor, if any.

    Titles are an uppercase line underlined with ``=`` or a line ending in
    ``:`` underlined with ``-``. Both lines belong to the title.
    """

    current = cursor.peek()
    following = cursor.peek_next()
    if current is None or following is None:
        return None
    line = current.strip()
    underline = following.strip()
    if is_uppercase_title(line) and TITLE_UNDERLINE_RE.match(underline):
        return line
    if len(line) > 1 and line.endswith(":") and DASH_UNDERLINE_RE.match(underline):
        return line[:-1].strip()
    return None


def split_key_value(line: str) -> tuple[str, str] | None:
    match = KEY_VALUE_RE.match(line.strip())
    if not match:
        return None
    key = match.group(1).strip()
    value = match.group(2).strip()
    if not key or not value:
        return None
    return key, value


def detect_header_dialect(line: str, *, allow_space: bool = True) -> TableDialect | None:
    stripped = line.strip()
    if not stripped:
        return None
    if "," in stripped:
        fields = split_comma(stripped)
        if len(fields) > 2 or any(hint in field for field in fields for hint in HEADER_HINTS):
            return TableDialect.COMMA
    if "\t" in stripped and len(split_tab(stripped)) > 2:
        return TableDialect.TAB
    if allow_space and len(split_space(stripped)) > 1:
        return TableDialect.SPACE
    return None


def is_separator_row(line: str) -> bool:
    return bool(SEPARATOR_ROW_RE.match(line.strip()))


@dataclass(frozen=True)
class ClassifiedLine:
    kind: LineKind
    text: str
    title: str | None = None
    key: str | None = None
    value: str | None = None
    dialect: TableDialect | None = None


def classify(cursor: LineCursor, *, in_section: bool = False) -> ClassifiedLine:
    """Classify the line under the cursor without moving it.

    Precedence is title, key/value, table header (comma, tab, then
    space-aligned) and finally plain content. A table header is only a
    candidate here; the table reader decides whether rows follow. Inside a
    section, lines aligned with runs of spaces stay section content.
    """

    raw = cursor.peek()
    text = raw.strip() if raw is not None else ""
    if not text:
        return ClassifiedLine(LineKind.BLANK, text)
    title = match_title(cursor)
    if title is not None:
        return ClassifiedLine(LineKind.TITLE, text, title=title)
    pair = split_key_value(text)
    if pair is not None:
        return ClassifiedLine(LineKind.KEY_VALUE, text, key=pair[0], value=pair[1])
    dialect = detect_header_dialect(raw or "", allow_space=not in_section)
    if dialect is not None:
        return ClassifiedLine(LineKind.TABLE_HEADER, text, dialect=dialect)
    return ClassifiedLine(LineKind.CONTENT, text)
