"""voxcalc – natural-language calculator interpreter."""

from ._version import __version__
from .interpreter import (
    CalculationResult,
    Category,
    format_number,
    get_example_commands,
    process_voice_input,
)

__all__ = [
    "__version__",
    "CalculationResult",
    "Category",
    "format_number",
    "get_example_commands",
    "process_voice_input",
    "cli",
    "config",
    "interpreter",
    "service",
    "utils",
]
