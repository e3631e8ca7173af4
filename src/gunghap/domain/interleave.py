"""Name interleaving — merge two names one character at a time."""

from __future__ import annotations


def interleave(name1: str, name2: str) -> tuple[str, ...]:
    """Alternate the characters of two names, *name1* first at each index.

    A name that runs out simply stops contributing.

    Examples:
        >>> interleave("철수", "영희")
        ('철', '영', '수', '희')
        >>> interleave("남궁민수", "김철수")
        ('남', '김', '궁', '철', '민', '수', '수')
    """
    combined: list[str] = []
    for i in range(max(len(name1), len(name2))):
        if i < len(name1):
            combined.append(name1[i])
        if i < len(name2):
            combined.append(name2[i])
    return tuple(combined)
