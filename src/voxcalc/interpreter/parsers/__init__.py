"""Parser primitives shared by the interpreter matchers."""

from .expression import ExpressionError, evaluate_expression, tokenize
from .numbers import NUMBER_WORDS, expand_number_words, parse_leading_float
from .units import (
    TEMPERATURE_UNITS,
    UNIT_TABLES,
    UnitTable,
    convert_temperature,
    normalize_temperature_unit,
)

__all__ = [
    "ExpressionError",
    "evaluate_expression",
    "tokenize",
    "NUMBER_WORDS",
    "expand_number_words",
    "parse_leading_float",
    "TEMPERATURE_UNITS",
    "UNIT_TABLES",
    "UnitTable",
    "convert_temperature",
    "normalize_temperature_unit",
]
