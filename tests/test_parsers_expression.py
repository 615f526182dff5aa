import pytest

from voxcalc.interpreter.parsers.expression import MAX_DEPTH, ExpressionError, evaluate_expression, tokenize


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("1 + 2 * 3", 7),
        ("(1 + 2) * 3", 9),
        ("10 / 4", 2.5),
        ("7 % 3", 1),
        ("-7 % 3", -1),
        ("7.5 % 2", 1.5),
        ("-3 + 5", 2),
        ("2 * -3", -6),
        ("+4", 4),
        ("- (2 + 3)", -5),
        ("8 - 3 - 2", 3),
        ("100 / 10 / 5", 2),
        ("2 * (3 + (4 - 1))", 12),
        (".5 + 5.", 5.5),
        ("25 + 17", 42),
        ("  42  ", 42),
    ],
)
def test_evaluate_expression(expr: str, expected: float) -> None:
    assert evaluate_expression(expr) == pytest.approx(expected)


@pytest.mark.parametrize(
    "expr",
    ["", "   ", "1 +", "(1 + 2", "1 + 2)", "1 2", "1 + )", "1..2", ".", "2 $ 3", "* 3", "2 (3)", "import os"],
)
def test_evaluate_expression_rejects_malformed_input(expr: str) -> None:
    with pytest.raises(ExpressionError):
        evaluate_expression(expr)


@pytest.mark.parametrize("expr", ["1 / 0", "0 / 0", "5 % 0", "3 / (2 - 2)"])
def test_division_by_zero_raises(expr: str) -> None:
    with pytest.raises(ZeroDivisionError):
        evaluate_expression(expr)


def test_expression_error_is_value_error() -> None:
    assert issubclass(ExpressionError, ValueError)


def test_tokenize_reports_positions() -> None:
    tokens = tokenize("12 + (3.5)")
    assert [(token.kind, token.text, token.position) for token in tokens] == [
        ("number", "12", 0),
        ("op", "+", 3),
        ("op", "(", 5),
        ("number", "3.5", 6),
        ("op", ")", 9),
    ]


def test_nesting_within_limit() -> None:
    depth = MAX_DEPTH // 2
    assert evaluate_expression("(" * depth + "7" + ")" * depth) == 7


@pytest.mark.parametrize(
    "expr",
    [
        "(" * 3000 + "1" + ")" * 3000,
        "-" * 3000 + "1",
        "(" * (MAX_DEPTH + 1) + "1" + ")" * (MAX_DEPTH + 1),
    ],
)
def test_excessive_nesting_is_an_expression_error(expr: str) -> None:
    with pytest.raises(ExpressionError):
        evaluate_expression(expr)


def test_long_flat_chain_is_not_nesting() -> None:
    assert evaluate_expression(" + ".join(["1"] * 1000)) == 1000
