"""Category matchers tried by the dispatcher."""

from .arithmetic import sanitize_expression, try_arithmetic
from .conversion import try_conversion, try_temperature, try_unit_tables
from .measurement import MEASUREMENT_RULES, MeasurementRule, bmi_band, try_measurement
from .scientific import FACTORIAL_LIMIT, SCIENTIFIC_RULES, ScientificRule, try_scientific

__all__ = [
    "sanitize_expression",
    "try_arithmetic",
    "try_conversion",
    "try_temperature",
    "try_unit_tables",
    "MEASUREMENT_RULES",
    "MeasurementRule",
    "bmi_band",
    "try_measurement",
    "FACTORIAL_LIMIT",
    "SCIENTIFIC_RULES",
    "ScientificRule",
    "try_scientific",
]
