"""Matcher for named geometry and health formulas."""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Callable, Optional, Pattern, Sequence, Tuple

from ..formats import CalculationResult, Category
from ..formatting import DEFAULT_LOCALE, format_number, format_plain
from ..parsers.numbers import UNSIGNED_NUMBER as N
from ..parsers.numbers import parse_leading_float

__all__ = ["MEASUREMENT_RULES", "MeasurementRule", "bmi_band", "try_measurement"]

# Each compute callback returns (parsed, value, suffix).
Compute = Callable[[Sequence[float]], Tuple[str, float, str]]


@dataclass(frozen=True)
class MeasurementRule:
    name: str
    pattern: Pattern[str]
    compute: Compute


def _rule(name: str, pattern: str, compute: Compute) -> MeasurementRule:
    return MeasurementRule(name, re.compile(pattern, re.IGNORECASE), compute)


def bmi_band(bmi: float) -> str:
    """Return the WHO label for a body mass index."""

    if bmi < 18.5:
        return "Underweight"
    if bmi < 25:
        return "Normal"
    if bmi < 30:
        return "Overweight"
    return "Obese"


def _circle_area(args: Sequence[float]) -> Tuple[str, float, str]:
    (r,) = args
    return f"pi * {format_plain(r)}^2", math.pi * r * r, " sq units"


def _circumference(args: Sequence[float]) -> Tuple[str, float, str]:
    (r,) = args
    return f"2 * pi * {format_plain(r)}", 2 * math.pi * r, " units"


def _rectangle_area(args: Sequence[float]) -> Tuple[str, float, str]:
    length, width = args
    return f"{format_plain(length)} x {format_plain(width)}", length * width, " sq units"


def _triangle_area(args: Sequence[float]) -> Tuple[str, float, str]:
    base, height = args
    return f"0.5 * {format_plain(base)} * {format_plain(height)}", 0.5 * base * height, " sq units"


def _sphere_volume(args: Sequence[float]) -> Tuple[str, float, str]:
    (r,) = args
    return f"(4/3) * pi * {format_plain(r)}^3", (4 / 3) * math.pi * r * r * r, " cubic units"


def _cylinder_volume(args: Sequence[float]) -> Tuple[str, float, str]:
    r, h = args
    return f"pi * {format_plain(r)}^2 * {format_plain(h)}", math.pi * r * r * h, " cubic units"


def _rectangle_perimeter(args: Sequence[float]) -> Tuple[str, float, str]:
    length, width = args
    return f"2 * ({format_plain(length)} + {format_plain(width)})", 2 * (length + width), " units"


def _hypotenuse(args: Sequence[float]) -> Tuple[str, float, str]:
    a, b = args
    return f"sqrt({format_plain(a)}^2 + {format_plain(b)}^2)", math.sqrt(a * a + b * b), " units"


def _bmi(args: Sequence[float]) -> Tuple[str, float, str]:
    weight, height = args
    if height == 0:
        raise ZeroDivisionError("height must be non-zero")
    bmi = weight / (height * height)
    return f"{format_plain(weight)}kg / ({format_plain(height)}m)^2", bmi, f" ({bmi_band(bmi)})"


MEASUREMENT_RULES: Tuple[MeasurementRule, ...] = (
    _rule(
        "circle_area",
        rf"area\s+of\s+(?:a\s+)?circle\s+(?:with\s+)?(?:radius|r)\s+{N}",
        _circle_area,
    ),
    _rule(
        "circumference",
        rf"circumference\s+of\s+(?:a\s+)?circle\s+(?:with\s+)?(?:radius|r)\s+{N}",
        _circumference,
    ),
    _rule(
        "rectangle_area",
        rf"area\s+of\s+(?:a\s+)?rectangle\s+{N}\s+(?:by|x|times)\s+{N}",
        _rectangle_area,
    ),
    _rule(
        "triangle_area",
        rf"area\s+of\s+(?:a\s+)?triangle\s+(?:(?:with\s+)?base\s+)?{N}\s+(?:(?:and\s+)?height\s+|(?:by|x)\s+){N}",
        _triangle_area,
    ),
    _rule(
        "sphere_volume",
        rf"volume\s+of\s+(?:a\s+)?sphere\s+(?:with\s+)?(?:radius|r)\s+{N}",
        _sphere_volume,
    ),
    _rule(
        "cylinder_volume",
        rf"volume\s+of\s+(?:a\s+)?cylinder\s+(?:(?:with\s+)?radius\s+)?{N}\s+(?:(?:and\s+)?height\s+|(?:by|x)\s+){N}",
        _cylinder_volume,
    ),
    _rule(
        "rectangle_perimeter",
        rf"perimeter\s+of\s+(?:a\s+)?rectangle\s+{N}\s+(?:by|x|times)\s+{N}",
        _rectangle_perimeter,
    ),
    _rule(
        "hypotenuse",
        rf"(?:hypotenuse|hyp)\s+{N}\s+(?:and|by)\s+{N}",
        _hypotenuse,
    ),
    _rule(
        "bmi",
        rf"(?:bmi|body\s+mass\s+index)\s+{N}\s*(?:kg|kilograms?)?\s+(?:and|height)?\s*{N}\s*(?:m|meters?|metres?)?",
        _bmi,
    ),
)


def try_measurement(text: str, *, locale: Optional[str] = DEFAULT_LOCALE) -> Optional[CalculationResult]:
    """Evaluate the first geometry/health formula whose phrasing matches ``text``."""

    lower = text.lower().strip()
    for rule in MEASUREMENT_RULES:
        match = rule.pattern.search(lower)
        if not match:
            continue
        args = [parse_leading_float(group) for group in match.groups()]
        if any(arg is None for arg in args):
            continue
        try:
            parsed, value, suffix = rule.compute(args)  # type: ignore[arg-type]
        except ArithmeticError:
            continue
        return CalculationResult(
            input=text,
            parsed=parsed,
            result=f"{format_number(value, locale=locale)}{suffix}",
            category=Category.MEASUREMENT,
        )
    return None
