"""Common data structures shared across the interpreter matchers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

__all__ = [
    "Category",
    "CalculationResult",
]


class Category(str, Enum):
    """Domain of the matcher that produced a result."""

    ARITHMETIC = "arithmetic"
    SCIENTIFIC = "scientific"
    CONVERSION = "conversion"
    MEASUREMENT = "measurement"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of interpreting one utterance."""

    input: str
    parsed: str
    result: str
    category: Category = Category.ARITHMETIC
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_dict(self) -> Dict[str, Any]:
        """Return a serialisable representation of the result."""

        payload: Dict[str, Any] = {
            "input": self.input,
            "parsed": self.parsed,
            "result": self.result,
            "category": self.category.value,
        }
        if self.error is not None:
            payload["error"] = self.error
        return payload
