"""Name validation rules applied before a compatibility computation.

The reducer trusts its input. These checks are the caller's side of that
contract: Hangul-only names, bounded length, and lengths that differ by
less than ``max_diff``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

# Complete syllables plus compatibility consonants.
HANGUL_NAME_RE = re.compile(r"^[ㄱ-ㅎ가-힣]+$")


class NameErrorCode(StrEnum):
    """Error codes reported for rejected names."""

    INVALID_SCRIPT = "INVALID_SCRIPT"
    NAME_TOO_SHORT = "NAME_TOO_SHORT"
    NAME_TOO_LONG = "NAME_TOO_LONG"
    LENGTH_MISMATCH = "LENGTH_MISMATCH"


@dataclass(frozen=True)
class NameIssue:
    """A single reason a name pair was rejected."""

    code: NameErrorCode
    message: str
    detail: dict[str, Any] = field(default_factory=dict)


def is_hangul_name(text: str) -> bool:
    """Return True if *text* is non-empty and written only in Hangul."""
    return HANGUL_NAME_RE.match(text) is not None


def validate_name(name: str, *, label: str, min_length: int, max_length: int) -> list[NameIssue]:
    """Check a single name against script and length rules."""
    issues: list[NameIssue] = []
    if not is_hangul_name(name):
        issues.append(
            NameIssue(
                NameErrorCode.INVALID_SCRIPT,
                f"{label} must be written in Hangul only: {name!r}",
                {"name": name},
            )
        )
    if len(name) < min_length:
        issues.append(
            NameIssue(
                NameErrorCode.NAME_TOO_SHORT,
                f"{label} must be at least {min_length} characters long",
                {"name": name, "length": len(name), "min_length": min_length},
            )
        )
    elif len(name) > max_length:
        issues.append(
            NameIssue(
                NameErrorCode.NAME_TOO_LONG,
                f"{label} must be at most {max_length} characters long",
                {"name": name, "length": len(name), "max_length": max_length},
            )
        )
    return issues


def validate_pair(
    name1: str,
    name2: str,
    *,
    min_length: int = 2,
    max_length: int = 4,
    max_diff: int = 2,
) -> list[NameIssue]:
    """Validate both names and their length difference.

    Returns an empty list when the pair may be passed to the reducer.
    The length difference must be strictly less than *max_diff*.
    """
    issues = validate_name(name1, label="name1", min_length=min_length, max_length=max_length)
    issues += validate_name(name2, label="name2", min_length=min_length, max_length=max_length)
    diff = abs(len(name1) - len(name2))
    if diff >= max_diff:
        issues.append(
            NameIssue(
                NameErrorCode.LENGTH_MISMATCH,
                f"Name lengths may differ by at most {max_diff - 1} character(s)",
                {"length1": len(name1), "length2": len(name2), "max_diff": max_diff},
            )
        )
    return issues
