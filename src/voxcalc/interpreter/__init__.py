"""Natural-language calculation interpreter.

The :func:`process_voice_input` dispatcher tries the conversion, measurement,
scientific and arithmetic matchers in that order and returns the first
:class:`CalculationResult` they produce.
"""

from .examples import ExampleGroup, get_example_commands
from .formats import CalculationResult, Category
from .formatting import SUPPORTED_LOCALES, extract_numeric, format_number
from .matchers import try_arithmetic, try_conversion, try_measurement, try_scientific
from .parsers.expression import ExpressionError, evaluate_expression
from .router import CalculatorRouter, DEFAULT_MATCHERS, process_voice_input

__all__ = [
    "ExampleGroup",
    "get_example_commands",
    "CalculationResult",
    "Category",
    "SUPPORTED_LOCALES",
    "extract_numeric",
    "format_number",
    "try_arithmetic",
    "try_conversion",
    "try_measurement",
    "try_scientific",
    "ExpressionError",
    "evaluate_expression",
    "CalculatorRouter",
    "DEFAULT_MATCHERS",
    "process_voice_input",
]
