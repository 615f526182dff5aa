"""Locale-aware rendering of numeric results."""
from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

__all__ = [
    "DEFAULT_LOCALE",
    "MAX_DECIMALS",
    "SUPPORTED_LOCALES",
    "extract_numeric",
    "format_number",
    "format_plain",
]

DEFAULT_LOCALE = "en"
MAX_DECIMALS = 8
_QUANTUM = Decimal(1).scaleb(-MAX_DECIMALS)

# locale -> (grouping separator, decimal separator)
SUPPORTED_LOCALES: Mapping[str, Tuple[str, str]] = MappingProxyType(
    {
        "en": (",", "."),
        "it": (".", ","),
        "de": (".", ","),
        "fr": ("\u202f", ","),
        "ch": ("'", "."),
    }
)


def _separators(locale: Optional[str]) -> Tuple[str, str]:
    key = (locale or DEFAULT_LOCALE).strip().lower()
    try:
        return SUPPORTED_LOCALES[key]
    except KeyError:
        raise ValueError(f"Unsupported locale '{locale}'") from None


def format_number(value: float | int, *, locale: Optional[str] = DEFAULT_LOCALE) -> str:
    """Render ``value`` with thousands grouping and at most eight decimals.

    Integral values never show a decimal point; other values are rounded to
    :data:`MAX_DECIMALS` places with trailing zeros stripped. Non-finite values
    render as ``Infinity``, ``-Infinity`` and ``NaN``.
    """

    group, decimal = _separators(locale)

    if isinstance(value, int) and not isinstance(value, bool):
        text = f"{value:,d}"
    else:
        value = float(value)
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            # Shortest repr digits, so 1e23 reads 100,000,... and not its binary expansion.
            text = f"{int(Decimal(repr(value))):,d}"
        else:
            # Exact binary value, ties away from zero.
            rounded = Decimal(value).quantize(_QUANTUM, rounding=ROUND_HALF_UP)
            text = f"{rounded:,f}".rstrip("0").rstrip(".")
            if text == "-0":
                text = "0"

    return text.translate(str.maketrans({",": group, ".": decimal}))


def format_plain(value: float | int) -> str:
    """Echo an operand the way it reads back in a parsed expression (``5``, ``1.75``)."""

    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(float(value))
    if text in {"inf", "-inf"}:
        return "Infinity" if value > 0 else "-Infinity"
    if text == "nan":
        return "NaN"
    return re.sub(r"e([+-])0*(\d)", r"e\1\2", text)


def extract_numeric(result_text: Optional[str], *, locale: Optional[str] = DEFAULT_LOCALE) -> Optional[float]:
    """Recover the leading number of a formatted result (``"8.04672 km"`` -> 8.04672).

    Keypad front-ends use this to chain a result into the next calculation.
    """

    if not result_text:
        return None
    group, decimal = _separators(locale)
    grp = re.escape(group)
    dec = re.escape(decimal)
    pattern = re.compile(rf"-?(?:\d{{1,3}}(?:{grp}\d{{3}})+|\d+)(?:{dec}\d+)?")
    match = pattern.search(result_text)
    if not match:
        return None
    raw = match.group(0).replace(group, "").replace(decimal, ".")
    return float(raw)
