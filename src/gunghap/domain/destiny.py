"""Destiny reduction — the stroke-count compatibility cascade.

Pipeline for two names::

    interleave -> per-character stroke totals (display)
               -> per-adjacent-pair reduced digits (first row)
               -> pairwise digit sums until two digits remain

Example with 철수 / 영희::

    sequence      철  영  수  희
    strokes       11   5   4   5
    first row       6   9   9
    result            5   8        -> 58%

INVARIANT: The reduction is a pure function of the two names. It keeps no
state between calls and never validates its input; callers reject invalid
names before invoking it.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel

from gunghap.domain.decomposer import PhoneticDecomposer
from gunghap.domain.interleave import interleave
from gunghap.domain.strokes import reduce_digit, stroke_value


class DestinyResult(BaseModel):
    """Immutable outcome of one compatibility computation.

    Attributes:
        name1: First name as given.
        name2: Second name as given.
        combined_sequence: Interleaved characters of both names.
        stroke_totals: Raw stroke count per character (may exceed 9).
        trace: Every reduction row from the first pairwise row down to the
            row of length 3. The final two-digit row is not included.
        result: The final two digits.
    """

    model_config = {"frozen": True}

    name1: str
    name2: str
    combined_sequence: tuple[str, ...]
    stroke_totals: tuple[int, ...]
    trace: tuple[tuple[int, ...], ...]
    result: tuple[int, int]

    @property
    def score(self) -> int:
        """The two result digits read as a decimal number (0-99)."""
        return int(f"{self.result[0]}{self.result[1]}")

    @property
    def percentage(self) -> str:
        """Display form of :attr:`score`, e.g. ``"91%"``."""
        return f"{self.score}%"


def first_row(sequence: Sequence[str], decomposer: PhoneticDecomposer) -> tuple[int, ...]:
    """Reduced stroke digit for every adjacent character pair."""
    return tuple(
        stroke_value(decomposer.decompose(a + b), reduce_to_digit=True)
        for a, b in zip(sequence, sequence[1:])
    )


def next_row(row: Sequence[int]) -> tuple[int, ...]:
    """Sum adjacent digits, keeping only the ones place."""
    return tuple(reduce_digit(a + b) for a, b in zip(row, row[1:]))


def compute_destiny(name1: str, name2: str, decomposer: PhoneticDecomposer) -> DestinyResult:
    """Run the full compatibility pipeline for *name1* and *name2*.

    Argument order matters: swapping the names changes the interleaving
    and usually the score.
    """
    sequence = interleave(name1, name2)
    stroke_totals = tuple(
        stroke_value(decomposer.decompose(char), reduce_to_digit=False) for char in sequence
    )

    trace: list[tuple[int, ...]] = []
    row = first_row(sequence, decomposer)
    while len(row) > 2:
        trace.append(row)
        row = next_row(row)

    # Only reachable for fewer than four characters in total.
    if len(row) < 2:
        row = (0,) * (2 - len(row)) + row

    return DestinyResult(
        name1=name1,
        name2=name2,
        combined_sequence=sequence,
        stroke_totals=stroke_totals,
        trace=tuple(trace),
        result=(row[0], row[1]),
    )
