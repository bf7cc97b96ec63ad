"""Scalar values extracted from report text and their coercion rules."""
from __future__ import annotations

import re
from dataclasses import dataclass

NUMBER_RE = re.compile(r"^-?\d+(?:\.\d+)?$")
CURRENCY_RE = re.compile(r"^R\$\s*([\d.,]+)$")
PERCENT_RE = re.compile(r"^(\d+)%$")

TRUE_TOKENS = {"sim", "true"}
FALSE_TOKENS = {"não", "false"}


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Boolean:
    value: bool


@dataclass(frozen=True)
class Text:
    value: str


ScalarValue = Number | Boolean | Text


def coerce(raw: str) -> ScalarValue:
    """Map a raw token to the first matching scalar kind.

    The checks run in a fixed order because the formats overlap: plain
    numbers (comma accepted as decimal separator), ``R$`` currency, integer
    percentages, ``sim``/``não`` style booleans and finally text.
    """

    value = raw.strip()
    dotted = value.replace(",", ".")
    if NUMBER_RE.match(dotted):
        return Number(float(dotted))
    currency = CURRENCY_RE.match(value)
    if currency:
        amount = currency.group(1).replace(".", "").replace(",", ".")
        if NUMBER_RE.match(amount):
            return Number(float(amount))
    percent = PERCENT_RE.match(value)
    if percent:
        return Number(float(percent.group(1)) / 100)
    lowered = value.casefold()
    if lowered in TRUE_TOKENS:
        return Boolean(True)
    if lowered in FALSE_TOKENS:
        return Boolean(False)
    return Text(value)


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(value)


def render_value(value: ScalarValue) -> str:
    """Natural display form of a scalar, used by the formatter and CSV export."""
    if isinstance(value, Number):
        return format_number(value.value)
    if isinstance(value, Boolean):
        return "sim" if value.value else "não"
    if isinstance(value, Text):
        return value.value
    raise TypeError(f"unsupported scalar value: {value!r}")


def to_native(value: ScalarValue) -> float | int | bool | str:
    if isinstance(value, Number):
        if float(value.value).is_integer():
            return int(value.value)
        return value.value
    if isinstance(value, Boolean):
        return value.value
    if isinstance(value, Text):
        return value.value
    raise TypeError(f"unsupported scalar value: {value!r}")


def numeric_or_zero(value: ScalarValue) -> float:
    if isinstance(value, Number):
        return value.value
    return 0.0
