"""Phonetic decomposition contract.

The reducer only needs a way to turn text into an ordered jamo sequence.
Any implementation must be concatenation-compatible: decomposing
``a + b`` yields the decomposition of ``a`` followed by that of ``b``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PhoneticDecomposer(Protocol):
    """Capability that splits text into its phonetic units."""

    def decompose(self, text: str) -> tuple[str, ...]:
        """Return the ordered phonetic units of *text*."""
        ...
