"""Spoken operator vocabulary used to normalize arithmetic phrases."""
from __future__ import annotations

import re
from typing import Pattern, Tuple

from .parsers.numbers import expand_number_words

__all__ = [
    "FILLER_PREFIXES",
    "OPERATOR_PHRASES",
    "OPERATOR_WORDS",
    "normalize_spoken_arithmetic",
]

# Applied in order, each on the output of the previous one.
OPERATOR_PHRASES: Tuple[Tuple[Pattern[str], str], ...] = tuple(
    (re.compile(pattern, flags=re.IGNORECASE), symbol)
    for pattern, symbol in (
        (r"\bplus\b", "+"),
        (r"\badd\b", "+"),
        (r"\baddition\b", "+"),
        (r"\bminus\b", "-"),
        (r"\bsubtract\b", "-"),
        (r"\bsubtraction\b", "-"),
        (r"\btake\s+away\b", "-"),
        (r"\btimes\b", "*"),
        (r"\bmultiply\b", "*"),
        (r"\bmultiplied\s+by\b", "*"),
        (r"\bmultiplication\b", "*"),
        (r"\bx\b", "*"),
        (r"\bdivided\s+by\b", "/"),
        (r"\bdivide\b", "/"),
        (r"\bdivision\b", "/"),
        (r"\bover\b", "/"),
        (r"\bmodulo\b", "%"),
        (r"\bmod\b", "%"),
        (r"\bremainder\s+of\b", "%"),
    )
)

FILLER_PREFIXES: Tuple[Pattern[str], ...] = tuple(
    re.compile(pattern, flags=re.IGNORECASE)
    for pattern in (
        r"^what\s+is\s+",
        r"^calculate\s+",
        r"^compute\s+",
        r"^what's\s+",
        r"^how\s+much\s+is\s+",
    )
)

# Words that mark a phrase as arithmetic rather than a bare constant lookup.
OPERATOR_WORDS = re.compile(r"\bplus\b|\bminus\b|\btimes\b|\bdivided\b", flags=re.IGNORECASE)

_TRAILING_QUESTION = re.compile(r"\?$")


def normalize_spoken_arithmetic(text: str) -> str:
    """Turn "what is twenty three plus 4?" into "23 + 4"."""

    normalized = expand_number_words(text.lower().strip())
    for pattern, symbol in OPERATOR_PHRASES:
        normalized = pattern.sub(symbol, normalized)
    for pattern in FILLER_PREFIXES:
        normalized = pattern.sub("", normalized)
    normalized = _TRAILING_QUESTION.sub("", normalized)
    return normalized.strip()
