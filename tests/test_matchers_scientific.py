import math

import pytest

from voxcalc.interpreter.formats import Category
from voxcalc.interpreter.matchers.scientific import FACTORIAL_LIMIT, try_scientific


@pytest.mark.parametrize(
    "text, parsed, result",
    [
        ("Square root of 144", "sqrt(144)", "12"),
        ("sqrt 2", "sqrt(2)", "1.41421356"),
        ("cube root of 27", "cbrt(27)", "3"),
        ("5 to the power of 3", "5^3", "125"),
        ("2 raised to 10", "2^10", "1,024"),
        ("7 squared", "7^2", "49"),
        ("3 cubed", "3^3", "27"),
        ("log base 2 of 8", "log_2(8)", "3"),
        ("natural log of 1", "ln(1)", "0"),
        ("ln 10", "ln(10)", "2.30258509"),
        ("Log of 1000", "log(1000)", "3"),
        ("sine of 30 degrees", "sin(30deg)", "0.5"),
        ("Sine of 45 degrees", "sin(45deg)", "0.70710678"),
        ("cos 60", "cos(60deg)", "0.5"),
        ("cosine of 0", "cos(0deg)", "1"),
        ("tan 45", "tan(45deg)", "1"),
        ("Factorial of 6", "6!", "720"),
        ("factorial of 0", "0!", "1"),
        ("pi", "pi", "3.14159265"),
        ("what is pi", "pi", "3.14159265"),
        ("absolute value of -42", "|-42|", "42"),
        ("abs -3.5", "|-3.5|", "3.5"),
        ("15 percent of 200", "15% of 200", "30"),
        ("what is 20% of 50", "20% of 50", "10"),
    ],
)
def test_scientific_operations(text: str, parsed: str, result: str) -> None:
    outcome = try_scientific(text)
    assert outcome is not None
    assert outcome.category is Category.SCIENTIFIC
    assert outcome.parsed == parsed
    assert outcome.result == result


def test_power_of_is_checked_before_squared() -> None:
    outcome = try_scientific("2 to the power of 3 squared")
    assert outcome is not None
    assert outcome.parsed == "2^3"
    assert outcome.result == "8"


@pytest.mark.parametrize(
    "text, result",
    [
        ("log of 0", "-Infinity"),
        ("natural log of 0", "-Infinity"),
        ("log base 1 of 5", "Infinity"),
        ("10 to the power of 400", "Infinity"),
    ],
)
def test_non_finite_results_are_rendered(text: str, result: str) -> None:
    outcome = try_scientific(text)
    assert outcome is not None
    assert outcome.result == result


def test_factorial_at_limit_is_exact() -> None:
    outcome = try_scientific(f"factorial {FACTORIAL_LIMIT}")
    assert outcome is not None
    assert outcome.result == format(math.factorial(FACTORIAL_LIMIT), ",d")


def test_factorial_above_limit_is_infinity() -> None:
    outcome = try_scientific("factorial of 171")
    assert outcome is not None
    assert outcome.parsed == "171!"
    assert outcome.result == "Infinity"


def test_pi_is_skipped_inside_arithmetic() -> None:
    assert try_scientific("pi plus 2") is None


@pytest.mark.parametrize("text", ["catalog 5", "hello", "12 plus 4"])
def test_keywords_need_word_boundaries(text: str) -> None:
    assert try_scientific(text) is None


def test_locale_formatting() -> None:
    outcome = try_scientific("sqrt 2", locale="it")
    assert outcome is not None
    assert outcome.result == "1,41421356"


def test_large_powers_show_shortest_digits() -> None:
    outcome = try_scientific("10 to the power of 23")
    assert outcome is not None
    assert outcome.result == "100,000,000,000,000,000,000,000"


@pytest.mark.parametrize(
    "text, result",
    [
        ("factorial of 23", "25,852,016,738,884,976,640,000"),
        ("factorial of 25", "15,511,210,043,330,985,984,000,000"),
    ],
)
def test_factorial_is_exact(text: str, result: str) -> None:
    outcome = try_scientific(text)
    assert outcome is not None
    assert outcome.result == result


@pytest.mark.parametrize(
    "text, result",
    [
        ("3 to the power of 4", "81"),
        ("2 to the power of 0.5", "1.41421356"),
        ("2 to the power of 1100", "Infinity"),
    ],
)
def test_power_edge_cases(text: str, result: str) -> None:
    outcome = try_scientific(text)
    assert outcome is not None
    assert outcome.result == result
