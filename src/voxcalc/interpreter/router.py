"""Dispatcher trying each category matcher in priority order."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence, Tuple

from ..config import get_settings
from ..utils.logging import generate_trace_id, log_event
from .formats import CalculationResult, Category
from .formatting import DEFAULT_LOCALE, SUPPORTED_LOCALES
from .matchers import try_arithmetic, try_conversion, try_measurement, try_scientific

__all__ = [
    "CalculatorRouter",
    "DEFAULT_MATCHERS",
    "Matcher",
    "NO_INPUT_ERROR",
    "not_understood",
    "process_voice_input",
]

LOGGER = logging.getLogger(__name__)

Matcher = Callable[..., Optional[CalculationResult]]

# Conversion and measurement phrasings carry domain keywords and must be
# tried before the arithmetic catch-all, which would pick up stray digits.
DEFAULT_MATCHERS: Tuple[Tuple[Category, Matcher], ...] = (
    (Category.CONVERSION, try_conversion),
    (Category.MEASUREMENT, try_measurement),
    (Category.SCIENTIFIC, try_scientific),
    (Category.ARITHMETIC, try_arithmetic),
)

NO_INPUT_ERROR = "No input received"


def not_understood(text: str) -> CalculationResult:
    """Generic failure naming the input and suggesting example phrasings."""

    return CalculationResult(
        input=text,
        parsed=text,
        result="",
        category=Category.ARITHMETIC,
        error=(
            f'Could not understand: "{text}". Try saying something like "5 plus 3", '
            '"convert 10 miles to kilometers", or "square root of 144".'
        ),
    )


def _default_locale() -> str:
    try:
        return get_settings().locale
    except (OSError, RuntimeError, ValueError) as exc:
        log_event(LOGGER, "settings.error", level=logging.WARNING, error=str(exc))
        return DEFAULT_LOCALE


class CalculatorRouter:
    """Try each matcher in order and return the first result."""

    def __init__(self, matchers: Sequence[Tuple[Category, Matcher]] = DEFAULT_MATCHERS) -> None:
        self.matchers = tuple(matchers)

    @property
    def order(self) -> Tuple[Category, ...]:
        return tuple(category for category, _ in self.matchers)

    def process(self, text: Optional[str], *, locale: Optional[str] = None) -> CalculationResult:
        """Interpret ``text``; never raises for any input text.

        ``locale`` defaults to the configured one; an explicit unsupported
        locale raises :class:`ValueError`.
        """

        if locale is None:
            locale = _default_locale()
        elif locale.strip().lower() not in SUPPORTED_LOCALES:
            raise ValueError(f"Unsupported locale '{locale}'")

        if text is None or not text.strip():
            return CalculationResult(
                input=text or "",
                parsed="",
                result="",
                category=Category.ARITHMETIC,
                error=NO_INPUT_ERROR,
            )

        trace_id = generate_trace_id()
        for category, matcher in self.matchers:
            try:
                outcome = matcher(text, locale=locale)
            except Exception as exc:
                log_event(
                    LOGGER,
                    "matcher.error",
                    trace_id=trace_id,
                    level=logging.ERROR,
                    category=category.value,
                    error=repr(exc),
                )
                continue
            if outcome is not None:
                log_event(
                    LOGGER,
                    "calculation.completed",
                    trace_id=trace_id,
                    level=logging.DEBUG,
                    category=outcome.category.value,
                    parsed=outcome.parsed,
                    result=outcome.result,
                )
                return outcome

        log_event(LOGGER, "calculation.failed", trace_id=trace_id, level=logging.DEBUG, input=text)
        return not_understood(text)


_DEFAULT_ROUTER = CalculatorRouter()


def process_voice_input(text: Optional[str], *, locale: Optional[str] = None) -> CalculationResult:
    """Interpret a spoken or typed utterance with the default matcher order."""

    return _DEFAULT_ROUTER.process(text, locale=locale)
