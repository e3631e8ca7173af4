"""Hangul jamo decomposition via Unicode syllable arithmetic.

A precomposed syllable (가-힣) encodes its parts in its code point::

    code = 0xAC00 + (initial * 21 + vowel) * 28 + final

Compound vowels (ㅘ, ㅢ, ...) and compound finals (ㄳ, ㄺ, ...) are split
into their simple components. Tense consonants (ㄲ, ㄸ, ...) and the
single-glyph vowels ㅐ, ㅔ, ㅒ, ㅖ stay whole. Any other character passes
through unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

HANGUL_BASE = 0xAC00
HANGUL_LAST = 0xD7A3
VOWEL_COUNT = 21
FINAL_COUNT = 28

INITIALS: tuple[str, ...] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)  # fmt: skip

VOWELS: tuple[str, ...] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ", "ㅗ", "ㅘ",
    "ㅙ", "ㅚ", "ㅛ", "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ", "ㅡ", "ㅢ", "ㅣ",
)  # fmt: skip

# Index 0 is "no final consonant".
FINALS: tuple[str, ...] = (
    "", "ㄱ", "ㄲ", "ㄳ", "ㄴ", "ㄵ", "ㄶ", "ㄷ", "ㄹ", "ㄺ",
    "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ", "ㅁ", "ㅂ", "ㅄ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)  # fmt: skip

COMPOUND_JAMO: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        # Vowels
        "ㅘ": ("ㅗ", "ㅏ"),
        "ㅙ": ("ㅗ", "ㅐ"),
        "ㅚ": ("ㅗ", "ㅣ"),
        "ㅝ": ("ㅜ", "ㅓ"),
        "ㅞ": ("ㅜ", "ㅔ"),
        "ㅟ": ("ㅜ", "ㅣ"),
        "ㅢ": ("ㅡ", "ㅣ"),
        # Final consonant clusters
        "ㄳ": ("ㄱ", "ㅅ"),
        "ㄵ": ("ㄴ", "ㅈ"),
        "ㄶ": ("ㄴ", "ㅎ"),
        "ㄺ": ("ㄹ", "ㄱ"),
        "ㄻ": ("ㄹ", "ㅁ"),
        "ㄼ": ("ㄹ", "ㅂ"),
        "ㄽ": ("ㄹ", "ㅅ"),
        "ㄾ": ("ㄹ", "ㅌ"),
        "ㄿ": ("ㄹ", "ㅍ"),
        "ㅀ": ("ㄹ", "ㅎ"),
        "ㅄ": ("ㅂ", "ㅅ"),
    }
)


def is_hangul_syllable(char: str) -> bool:
    """Check if *char* is a single precomposed Hangul syllable (가-힣)."""
    return len(char) == 1 and HANGUL_BASE <= ord(char) <= HANGUL_LAST


def split_syllable(char: str) -> tuple[str, str, str]:
    """Split a syllable into (initial, vowel, final); final may be ``""``.

    Raises:
        ValueError: if *char* is not a precomposed Hangul syllable.

    Examples:
        >>> split_syllable("한")
        ('ㅎ', 'ㅏ', 'ㄴ')
        >>> split_syllable("희")
        ('ㅎ', 'ㅢ', '')
    """
    if not is_hangul_syllable(char):
        raise ValueError(f"Not a Hangul syllable: {char!r}")
    offset = ord(char) - HANGUL_BASE
    initial, rest = divmod(offset, VOWEL_COUNT * FINAL_COUNT)
    vowel, final = divmod(rest, FINAL_COUNT)
    return INITIALS[initial], VOWELS[vowel], FINALS[final]


def expand_jamo(jamo: str) -> tuple[str, ...]:
    """Break a compound jamo into its components; simple jamo map to themselves."""
    return COMPOUND_JAMO.get(jamo, (jamo,))


class HangulDecomposer:
    """Decompose Hangul text into simple jamo.

    Works character by character, so decomposing ``a + b`` always equals
    decomposing ``a`` followed by ``b``.
    """

    def decompose(self, text: str) -> tuple[str, ...]:
        units: list[str] = []
        for char in text:
            if is_hangul_syllable(char):
                for jamo in split_syllable(char):
                    if jamo:
                        units.extend(expand_jamo(jamo))
            else:
                units.extend(expand_jamo(char))
        return tuple(units)
