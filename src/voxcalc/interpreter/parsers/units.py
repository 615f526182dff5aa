"""Unit synonym tables and temperature conversion."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

__all__ = [
    "TEMPERATURE_UNITS",
    "UNIT_TABLES",
    "UnitTable",
    "convert_temperature",
    "normalize_temperature_unit",
]

# Factors relative to the canonical unit of each quantity.
_LENGTH = {
    "meter": 1,
    "meters": 1,
    "metre": 1,
    "metres": 1,
    "m": 1,
    "kilometer": 1000,
    "kilometers": 1000,
    "kilometre": 1000,
    "kilometres": 1000,
    "km": 1000,
    "centimeter": 0.01,
    "centimeters": 0.01,
    "centimetre": 0.01,
    "centimetres": 0.01,
    "cm": 0.01,
    "millimeter": 0.001,
    "millimeters": 0.001,
    "millimetre": 0.001,
    "millimetres": 0.001,
    "mm": 0.001,
    "mile": 1609.344,
    "miles": 1609.344,
    "yard": 0.9144,
    "yards": 0.9144,
    "foot": 0.3048,
    "feet": 0.3048,
    "inch": 0.0254,
    "inches": 0.0254,
}

_WEIGHT = {
    "kilogram": 1,
    "kilograms": 1,
    "kg": 1,
    "gram": 0.001,
    "grams": 0.001,
    "g": 0.001,
    "milligram": 0.000001,
    "milligrams": 0.000001,
    "mg": 0.000001,
    "pound": 0.453592,
    "pounds": 0.453592,
    "lb": 0.453592,
    "lbs": 0.453592,
    "ounce": 0.0283495,
    "ounces": 0.0283495,
    "oz": 0.0283495,
    "ton": 907.185,
    "tons": 907.185,
    "tonne": 1000,
    "tonnes": 1000,
    "metric ton": 1000,
    "metric tons": 1000,
    "stone": 6.35029,
    "stones": 6.35029,
}

_VOLUME = {
    "liter": 1,
    "liters": 1,
    "litre": 1,
    "litres": 1,
    "l": 1,
    "milliliter": 0.001,
    "milliliters": 0.001,
    "millilitre": 0.001,
    "millilitres": 0.001,
    "ml": 0.001,
    "gallon": 3.78541,
    "gallons": 3.78541,
    "quart": 0.946353,
    "quarts": 0.946353,
    "pint": 0.473176,
    "pints": 0.473176,
    "cup": 0.236588,
    "cups": 0.236588,
    "fluid ounce": 0.0295735,
    "fluid ounces": 0.0295735,
    "tablespoon": 0.0147868,
    "tablespoons": 0.0147868,
    "teaspoon": 0.00492892,
    "teaspoons": 0.00492892,
}

_SPEED = {
    "meter per second": 1,
    "meters per second": 1,
    "m/s": 1,
    "kilometer per hour": 0.277778,
    "kilometers per hour": 0.277778,
    "km/h": 0.277778,
    "kph": 0.277778,
    "mile per hour": 0.44704,
    "miles per hour": 0.44704,
    "mph": 0.44704,
    "knot": 0.514444,
    "knots": 0.514444,
}

_AREA = {
    "square meter": 1,
    "square meters": 1,
    "square metre": 1,
    "square metres": 1,
    "sqm": 1,
    "square kilometer": 1000000,
    "square kilometers": 1000000,
    "sqkm": 1000000,
    "square foot": 0.092903,
    "square feet": 0.092903,
    "sqft": 0.092903,
    "square mile": 2590000,
    "square miles": 2590000,
    "acre": 4046.86,
    "acres": 4046.86,
    "hectare": 10000,
    "hectares": 10000,
}


@dataclass(frozen=True)
class UnitTable:
    """Synonym -> scale factor mapping for one physical quantity."""

    name: str
    canonical: str
    factors: Mapping[str, float]
    by_length: Tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        for unit, factor in self.factors.items():
            if factor <= 0:
                raise ValueError(f"Unit '{unit}' in table '{self.name}' must have a positive factor")
        object.__setattr__(self, "factors", MappingProxyType({k.lower(): float(v) for k, v in self.factors.items()}))
        # Longest synonyms first so "square meter" wins over "meter".
        ordered = sorted(self.factors, key=len, reverse=True)
        object.__setattr__(self, "by_length", tuple(ordered))

    def __contains__(self, unit: object) -> bool:
        return isinstance(unit, str) and unit.lower() in self.factors

    def convert(self, value: float, from_unit: str, to_unit: str) -> float:
        """Convert ``value`` between two units of this table."""

        return value * self.factors[from_unit.lower()] / self.factors[to_unit.lower()]


UNIT_TABLES: Tuple[UnitTable, ...] = (
    UnitTable("length", "meter", _LENGTH),
    UnitTable("weight", "kilogram", _WEIGHT),
    UnitTable("volume", "liter", _VOLUME),
    UnitTable("speed", "meter per second", _SPEED),
    UnitTable("area", "square meter", _AREA),
)

TEMPERATURE_UNITS: Tuple[str, ...] = ("celsius", "fahrenheit", "kelvin")

_TEMPERATURE_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "c": "celsius",
        "f": "fahrenheit",
        "k": "kelvin",
        "celsius": "celsius",
        "fahrenheit": "fahrenheit",
        "kelvin": "kelvin",
    }
)


def normalize_temperature_unit(token: Optional[str]) -> Optional[str]:
    """Return ``celsius``, ``fahrenheit`` or ``kelvin`` for a recognised synonym."""

    if token is None:
        return None
    cleaned = " ".join(token.lower().split())
    for prefix in ("degrees ", "degree "):
        if cleaned.startswith(prefix):
            cleaned = cleaned[len(prefix):]
            break
    return _TEMPERATURE_ALIASES.get(cleaned)


def convert_temperature(value: float, from_unit: str, to_unit: str) -> Optional[float]:
    """Convert a temperature, pivoting through celsius.

    Returns ``None`` when either unit is not recognised.
    """

    source = normalize_temperature_unit(from_unit)
    target = normalize_temperature_unit(to_unit)
    if source is None or target is None:
        return None
    if source == target:
        return value

    if source == "celsius":
        celsius = value
    elif source == "fahrenheit":
        celsius = (value - 32) * (5 / 9)
    else:
        celsius = value - 273.15

    if target == "celsius":
        return celsius
    if target == "fahrenheit":
        return celsius * (9 / 5) + 32
    return celsius + 273.15
