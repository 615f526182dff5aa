"""Utilities to read numeric operands and spoken number words from text."""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, Optional

__all__ = [
    "NUMBER_WORDS",
    "SIGNED_NUMBER",
    "UNSIGNED_NUMBER",
    "expand_number_words",
    "parse_leading_float",
]

# Capture groups used by the matchers: loose runs of digits and dots, read
# back with :func:`parse_leading_float`.
UNSIGNED_NUMBER = r"([\d.]+)"
SIGNED_NUMBER = r"(-?[\d.]+)"

NUMBER_WORDS: Mapping[str, int] = MappingProxyType(
    {
        "zero": 0,
        "one": 1,
        "two": 2,
        "three": 3,
        "four": 4,
        "five": 5,
        "six": 6,
        "seven": 7,
        "eight": 8,
        "nine": 9,
        "ten": 10,
        "eleven": 11,
        "twelve": 12,
        "thirteen": 13,
        "fourteen": 14,
        "fifteen": 15,
        "sixteen": 16,
        "seventeen": 17,
        "eighteen": 18,
        "nineteen": 19,
        "twenty": 20,
        "thirty": 30,
        "forty": 40,
        "fifty": 50,
        "sixty": 60,
        "seventy": 70,
        "eighty": 80,
        "ninety": 90,
        "hundred": 100,
        "thousand": 1000,
        "million": 1000000,
        "billion": 1000000000,
    }
)

_LEADING_FLOAT = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_COMPOUND_PATTERN = re.compile(
    r"\b(twenty|thirty|forty|fifty|sixty|seventy|eighty|ninety)\s+"
    r"(one|two|three|four|five|six|seven|eight|nine)\b",
    flags=re.IGNORECASE,
)

_WORD_PATTERNS = tuple(
    (re.compile(rf"\b{word}\b", flags=re.IGNORECASE), str(value)) for word, value in NUMBER_WORDS.items()
)


def parse_leading_float(raw: str) -> Optional[float]:
    """Read the longest numeric prefix of ``raw`` (``"1.5.2"`` -> 1.5).

    Returns ``None`` when ``raw`` does not start with a number, e.g. ``"."`` or
    ``"-"``.
    """

    match = _LEADING_FLOAT.match(raw)
    if not match:
        return None
    return float(match.group(0))


def _compound(match: re.Match[str]) -> str:
    tens = NUMBER_WORDS[match.group(1).lower()]
    ones = NUMBER_WORDS[match.group(2).lower()]
    return str(tens + ones)


def expand_number_words(text: str) -> str:
    """Replace spoken number words with digits.

    Compound tens ("twenty three") are merged first; every remaining word is
    then replaced on its own, so "one hundred" becomes "1 100".
    """

    result = _COMPOUND_PATTERN.sub(_compound, text)
    for pattern, digits in _WORD_PATTERNS:
        result = pattern.sub(digits, result)
    return result
