"""Static catalog of example phrasings shown to users."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

__all__ = ["ExampleGroup", "get_example_commands"]


@dataclass(frozen=True)
class ExampleGroup:
    category: str
    examples: Tuple[str, ...]

    def as_dict(self) -> Dict[str, Any]:
        return {"category": self.category, "examples": list(self.examples)}


_EXAMPLES: Tuple[ExampleGroup, ...] = (
    ExampleGroup(
        "Arithmetic",
        (
            "What is 25 plus 17?",
            "125 divided by 5",
            "48 times 12",
            "1000 minus 347",
            "15 percent of 200",
        ),
    ),
    ExampleGroup(
        "Scientific",
        (
            "Square root of 144",
            "5 to the power of 3",
            "Sine of 45 degrees",
            "Log of 1000",
            "Factorial of 6",
        ),
    ),
    ExampleGroup(
        "Conversions",
        (
            "Convert 5 miles to kilometers",
            "100 fahrenheit to celsius",
            "Convert 10 pounds to kilograms",
            "50 gallons to liters",
            "Convert 3 feet to centimeters",
        ),
    ),
    ExampleGroup(
        "Measurements",
        (
            "Area of a circle radius 5",
            "Volume of a sphere radius 3",
            "Area of a rectangle 10 by 5",
            "Hypotenuse 3 and 4",
            "BMI 70 1.75",
        ),
    ),
)


def get_example_commands() -> Tuple[ExampleGroup, ...]:
    """Return example phrasings grouped by category, for display only."""

    return _EXAMPLES
