"""Matcher for unit and temperature conversions."""
from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional, Pattern, Tuple

from ..formats import CalculationResult, Category
from ..formatting import DEFAULT_LOCALE, format_number, format_plain
from ..parsers.numbers import SIGNED_NUMBER, parse_leading_float
from ..parsers.units import UNIT_TABLES, UnitTable, convert_temperature, normalize_temperature_unit

__all__ = ["try_conversion", "try_temperature", "try_unit_tables"]

_TEMP_UNIT = r"(?:celsius|fahrenheit|kelvin|c|f|k)"

# Examples handled:
#   convert 100 fahrenheit to celsius
#   -40 degrees c in f
#   300 kelvin into degrees celsius
_TEMPERATURE_PATTERN = re.compile(
    rf"""
    (?:convert\s+)?
    {SIGNED_NUMBER}
    \s*(?:degrees?\s*)?
    (?P<source>{_TEMP_UNIT})
    \s+(?:to|in|into)\s+
    (?:degrees?\s*)?
    (?P<target>{_TEMP_UNIT})\b
    """,
    re.IGNORECASE | re.VERBOSE,
)


def _conversion_result(
    text: str, value: float, source: str, target: str, converted: float, locale: Optional[str]
) -> CalculationResult:
    return CalculationResult(
        input=text,
        parsed=f"{format_plain(value)} {source} to {target}",
        result=f"{format_number(converted, locale=locale)} {target}",
        category=Category.CONVERSION,
    )


def try_temperature(text: str, *, locale: Optional[str] = DEFAULT_LOCALE) -> Optional[CalculationResult]:
    lower = text.lower().strip()
    match = _TEMPERATURE_PATTERN.search(lower)
    if not match:
        return None
    value = parse_leading_float(match.group(1))
    if value is None:
        return None
    source = normalize_temperature_unit(match.group("source"))
    target = normalize_temperature_unit(match.group("target"))
    if source is None or target is None:
        return None
    converted = convert_temperature(value, source, target)
    if converted is None:
        return None
    return _conversion_result(text, value, source, target, converted, locale)


@lru_cache(maxsize=None)
def _pair_patterns(source: str, target: str) -> Tuple[Pattern[str], ...]:
    src = re.escape(source)
    dst = re.escape(target)
    return (
        re.compile(rf"(?:convert\s+)?([-\d.]+)\s*{src}\s+(?:to|in|into)\s+{dst}", re.IGNORECASE),
        re.compile(rf"(?:what\s+is\s+|what's\s+)?([-\d.]+)\s*{src}\s+in\s+{dst}", re.IGNORECASE),
        re.compile(rf"(?:how\s+many\s+){dst}\s+(?:in|are\s+in)\s+([-\d.]+)\s*{src}", re.IGNORECASE),
    )


def _search_table(lower: str, table: UnitTable) -> Optional[Tuple[float, str, str]]:
    # Only pairs whose synonyms both occur in the text can match.
    present = [unit for unit in table.by_length if unit in lower]
    for source in present:
        for target in present:
            if source == target:
                continue
            for pattern in _pair_patterns(source, target):
                match = pattern.search(lower)
                if not match:
                    continue
                value = parse_leading_float(match.group(1))
                if value is None:
                    continue
                return value, source, target
    return None


def try_unit_tables(text: str, *, locale: Optional[str] = DEFAULT_LOCALE) -> Optional[CalculationResult]:
    lower = text.lower().strip()
    for table in UNIT_TABLES:
        found = _search_table(lower, table)
        if found is None:
            continue
        value, source, target = found
        converted = table.convert(value, source, target)
        return _conversion_result(text, value, source, target, converted, locale)
    return None


def try_conversion(text: str, *, locale: Optional[str] = DEFAULT_LOCALE) -> Optional[CalculationResult]:
    """Recognise "<value> <unit> to <unit>" phrasings, temperatures first."""

    return try_temperature(text, locale=locale) or try_unit_tables(text, locale=locale)
