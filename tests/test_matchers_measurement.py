import pytest

from voxcalc.interpreter.formats import Category
from voxcalc.interpreter.matchers.measurement import bmi_band, try_measurement


@pytest.mark.parametrize(
    "text, parsed, result",
    [
        ("Area of a circle radius 5", "pi * 5^2", "78.53981634 sq units"),
        ("circumference of a circle with radius 2", "2 * pi * 2", "12.56637061 units"),
        ("Area of a rectangle 10 by 5", "10 x 5", "50 sq units"),
        ("area of a triangle base 6 and height 4", "0.5 * 6 * 4", "12 sq units"),
        ("Volume of a sphere radius 3", "(4/3) * pi * 3^3", "113.09733553 cubic units"),
        ("volume of a cylinder radius 2 and height 5", "pi * 2^2 * 5", "62.83185307 cubic units"),
        ("perimeter of a rectangle 3 x 4", "2 * (3 + 4)", "14 units"),
        ("Hypotenuse 3 and 4", "sqrt(3^2 + 4^2)", "5 units"),
        ("BMI 70 1.75", "70kg / (1.75m)^2", "22.85714286 (Normal)"),
        ("body mass index 50kg and 1.8m", "50kg / (1.8m)^2", "15.43209877 (Underweight)"),
    ],
)
def test_measurement_formulas(text: str, parsed: str, result: str) -> None:
    outcome = try_measurement(text)
    assert outcome is not None
    assert outcome.category is Category.MEASUREMENT
    assert outcome.parsed == parsed
    assert outcome.result == result


@pytest.mark.parametrize(
    "bmi, label",
    [
        (18.4, "Underweight"),
        (18.5, "Normal"),
        (24.9, "Normal"),
        (25.0, "Overweight"),
        (29.99, "Overweight"),
        (30.0, "Obese"),
    ],
)
def test_bmi_band_thresholds(bmi: float, label: str) -> None:
    assert bmi_band(bmi) == label


def test_bmi_with_zero_height_is_not_a_match() -> None:
    assert try_measurement("bmi 70 0") is None


@pytest.mark.parametrize("text", ["area of a hexagon 5", "volume of a sphere", "hello"])
def test_no_measurement(text: str) -> None:
    assert try_measurement(text) is None
