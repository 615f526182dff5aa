"""Matcher for named scientific operations."""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Callable, Optional, Pattern, Sequence, Tuple

from ..formats import CalculationResult, Category
from ..formatting import DEFAULT_LOCALE, format_number, format_plain
from ..lexicon import OPERATOR_WORDS
from ..parsers.numbers import SIGNED_NUMBER, UNSIGNED_NUMBER as N, parse_leading_float

__all__ = ["FACTORIAL_LIMIT", "SCIENTIFIC_RULES", "ScientificRule", "try_scientific"]

# Largest n whose factorial fits in a double.
FACTORIAL_LIMIT = 170
# Whole-number powers up to this exponent are computed exactly before rounding.
_EXACT_EXPONENT_LIMIT = 1100

Compute = Callable[[Sequence[float]], Tuple[str, float | int]]


@dataclass(frozen=True)
class ScientificRule:
    name: str
    pattern: Pattern[str]
    compute: Compute
    unless: Optional[Pattern[str]] = None


def _rule(name: str, pattern: str, compute: Compute, *, unless: Optional[Pattern[str]] = None) -> ScientificRule:
    return ScientificRule(name, re.compile(pattern, re.IGNORECASE), compute, unless)


def _ln(x: float) -> float:
    return -math.inf if x == 0 else math.log(x)


def _log10(x: float) -> float:
    return -math.inf if x == 0 else math.log10(x)


def _divide(a: float, b: float) -> float:
    if b == 0:
        return math.nan if a == 0 or math.isnan(a) else math.copysign(math.inf, a)
    return a / b


def _power(base: float, exponent: float) -> float:
    try:
        if float(base).is_integer() and float(exponent).is_integer() and 0 <= exponent <= _EXACT_EXPONENT_LIMIT:
            # Integer power rounded once, so 10^23 is the double nearest 1e23.
            return float(int(base) ** int(exponent))
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf


def _factorial(args: Sequence[float]) -> Tuple[str, float | int]:
    value = args[0]
    if value > FACTORIAL_LIMIT:
        return f"{format_plain(value)}!", math.inf
    n = int(value)
    return f"{n}!", math.factorial(n)


def _trig(name: str, fn: Callable[[float], float]) -> Compute:
    def compute(args: Sequence[float]) -> Tuple[str, float]:
        (degrees,) = args
        return f"{name}({format_plain(degrees)}deg)", fn(math.radians(degrees))

    return compute


SCIENTIFIC_RULES: Tuple[ScientificRule, ...] = (
    _rule(
        "sqrt",
        rf"\b(?:square\s+root\s+of|sqrt(?:\s+of)?)\s+{N}",
        lambda a: (f"sqrt({format_plain(a[0])})", math.sqrt(a[0])),
    ),
    _rule(
        "cbrt",
        rf"\b(?:cube\s+root\s+of|cbrt)\s+{N}",
        lambda a: (f"cbrt({format_plain(a[0])})", math.cbrt(a[0])),
    ),
    # power-of is checked before squared, squared before cubed
    _rule(
        "power",
        rf"{N}\s+(?:to\s+the\s+power\s+of|raised\s+to(?:\s+the\s+power\s+of)?|power)\s+{N}",
        lambda a: (f"{format_plain(a[0])}^{format_plain(a[1])}", _power(a[0], a[1])),
    ),
    _rule(
        "squared",
        rf"{N}\s+(?:squared|square)",
        lambda a: (f"{format_plain(a[0])}^2", _power(a[0], 2)),
    ),
    _rule(
        "cubed",
        rf"{N}\s+cubed",
        lambda a: (f"{format_plain(a[0])}^3", _power(a[0], 3)),
    ),
    # log base N is more specific than ln, ln more specific than log
    _rule(
        "log_base",
        rf"\blog\s+base\s+{N}\s+of\s+{N}",
        lambda a: (f"log_{format_plain(a[0])}({format_plain(a[1])})", _divide(_ln(a[1]), _ln(a[0]))),
    ),
    _rule(
        "ln",
        rf"\b(?:natural\s+log(?:arithm)?\s+of|ln(?:\s+of)?)\s+{N}",
        lambda a: (f"ln({format_plain(a[0])})", _ln(a[0])),
    ),
    _rule(
        "log",
        rf"\b(?:log\s+of|log|logarithm\s+of|logarithm)\s+{N}",
        lambda a: (f"log({format_plain(a[0])})", _log10(a[0])),
    ),
    _rule("sin", rf"\b(?:sine|sin)\s+(?:of\s+)?{N}\s*(?:degrees|deg)?", _trig("sin", math.sin)),
    _rule("cos", rf"\b(?:cosine|cos)\s+(?:of\s+)?{N}\s*(?:degrees|deg)?", _trig("cos", math.cos)),
    _rule("tan", rf"\b(?:tangent|tan)\s+(?:of\s+)?{N}\s*(?:degrees|deg)?", _trig("tan", math.tan)),
    _rule("factorial", r"\b(?:factorial\s+of|factorial)\s+(\d+)", _factorial),
    _rule("pi", r"\bpi\b", lambda a: ("pi", math.pi), unless=OPERATOR_WORDS),
    _rule(
        "abs",
        rf"\b(?:absolute\s+value\s+of|abs)\s+{SIGNED_NUMBER}",
        lambda a: (f"|{format_plain(a[0])}|", abs(a[0])),
    ),
    _rule(
        "percent_of",
        rf"(?:what\s+is\s+)?{N}\s*(?:percent|%)\s+of\s+{N}",
        lambda a: (f"{format_plain(a[0])}% of {format_plain(a[1])}", (a[0] / 100) * a[1]),
    ),
)


def try_scientific(text: str, *, locale: Optional[str] = DEFAULT_LOCALE) -> Optional[CalculationResult]:
    """Evaluate the first scientific operation whose phrasing matches ``text``."""

    lower = text.lower().strip()
    for rule in SCIENTIFIC_RULES:
        match = rule.pattern.search(lower)
        if not match:
            continue
        if rule.unless is not None and rule.unless.search(lower):
            continue
        args = [parse_leading_float(group) for group in match.groups()]
        if any(arg is None for arg in args):
            continue
        try:
            parsed, value = rule.compute(args)  # type: ignore[arg-type]
        except (ValueError, ArithmeticError):
            continue
        return CalculationResult(
            input=text,
            parsed=parsed,
            result=format_number(value, locale=locale),
            category=Category.SCIENTIFIC,
        )
    return None
