"""Stroke table and stroke counting.

The table maps each Hangul jamo to its traditional stroke count.
Compound vowels are listed for completeness; their values equal the
sum of their components, so a decomposer that splits them yields the
same totals.

INVARIANT: Units missing from the table contribute zero strokes.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

STROKE_TABLE: Mapping[str, int] = MappingProxyType(
    {
        # Consonants
        "ㄱ": 2,
        "ㄴ": 2,
        "ㄷ": 3,
        "ㄹ": 5,
        "ㅁ": 4,
        "ㅂ": 4,
        "ㅅ": 2,
        "ㅇ": 1,
        "ㅈ": 3,
        "ㅊ": 4,
        "ㅋ": 3,
        "ㅌ": 4,
        "ㅍ": 4,
        "ㅎ": 3,
        "ㄲ": 4,
        "ㄸ": 6,
        "ㅃ": 8,
        "ㅆ": 4,
        "ㅉ": 6,
        # Vowels
        "ㅏ": 2,
        "ㅑ": 3,
        "ㅓ": 2,
        "ㅕ": 3,
        "ㅗ": 2,
        "ㅛ": 3,
        "ㅜ": 2,
        "ㅠ": 3,
        "ㅡ": 1,
        "ㅣ": 1,
        "ㅘ": 4,
        "ㅚ": 3,
        "ㅙ": 5,
        "ㅝ": 4,
        "ㅞ": 5,
        "ㅢ": 2,
        "ㅐ": 3,
        "ㅔ": 3,
        "ㅟ": 3,
        "ㅖ": 4,
        "ㅒ": 4,
    }
)


def stroke_value(units: Iterable[str], *, reduce_to_digit: bool) -> int:
    """Sum the stroke counts of *units*.

    Args:
        units: Jamo sequence, usually from a decomposer.
        reduce_to_digit: Keep the running total below 10 by dropping the
            tens place after each addition (equivalent to ``sum % 10``).
            When False, return the raw sum, which may exceed 9.

    Examples:
        >>> stroke_value(["ㅊ", "ㅓ", "ㄹ"], reduce_to_digit=False)
        11
        >>> stroke_value(["ㅊ", "ㅓ", "ㄹ"], reduce_to_digit=True)
        1
    """
    total = 0
    for unit in units:
        strokes = STROKE_TABLE.get(unit)
        if strokes is None:
            continue
        total += strokes
        # Table values never exceed 8, so one subtraction keeps it a digit.
        if reduce_to_digit and total >= 10:
            total -= 10
    return total


def reduce_digit(value: int) -> int:
    """Drop the tens place of a two-digit pair sum (0-18)."""
    return value - 10 if value >= 10 else value
