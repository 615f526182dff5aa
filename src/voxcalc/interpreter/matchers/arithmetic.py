"""Fallback matcher evaluating spoken arithmetic."""
from __future__ import annotations

import math
import re
from typing import Optional

from ..formats import CalculationResult, Category
from ..formatting import DEFAULT_LOCALE, format_number
from ..lexicon import normalize_spoken_arithmetic
from ..parsers.expression import evaluate_expression

__all__ = ["sanitize_expression", "try_arithmetic"]

_DISALLOWED = re.compile(r"[^0-9+\-*/.%() ]")
_DIGIT = re.compile(r"\d")


def sanitize_expression(text: str) -> str:
    """Drop every character outside digits, ``+ - * / % ( ) .`` and spaces."""

    return _DISALLOWED.sub("", text).strip()


def try_arithmetic(text: str, *, locale: Optional[str] = DEFAULT_LOCALE) -> Optional[CalculationResult]:
    """Normalize spoken operators and evaluate what remains as a formula."""

    expression = sanitize_expression(normalize_spoken_arithmetic(text))
    if not expression or not _DIGIT.search(expression):
        return None

    try:
        value = evaluate_expression(expression)
    except (ValueError, ArithmeticError):
        return None

    if not math.isfinite(value):
        return None

    return CalculationResult(
        input=text,
        parsed=expression,
        result=format_number(value, locale=locale),
        category=Category.ARITHMETIC,
    )
