"""DestinyService — validated name compatibility and stroke lookups."""

from __future__ import annotations

import logging
from typing import Any

from gunghap.domain.destiny import DestinyResult, compute_destiny
from gunghap.domain.strokes import stroke_value
from gunghap.domain.validation import NameIssue, validate_pair
from gunghap.services.base import BaseService
from gunghap.services.result import ServiceError, ServiceResult
from gunghap.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


def _issue_error(issues: list[NameIssue]) -> ServiceError:
    """Report the first issue; the detail carries every issue found."""
    first = issues[0]
    return ServiceError(
        code=str(first.code),
        message=first.message,
        detail={
            **first.detail,
            "issues": [{"code": str(i.code), "message": i.message} for i in issues],
        },
    )


def destiny_payload(result: DestinyResult) -> dict[str, Any]:
    """Serialize a DestinyResult with its derived score fields."""
    payload = result.model_dump(mode="json")
    payload["score"] = result.score
    payload["percentage"] = result.percentage
    return payload


class DestinyService(BaseService):
    """Compute compatibility scores for validated name pairs."""

    def _validate(self, name1: str, name2: str) -> list[NameIssue]:
        cfg = self._settings.validation
        return validate_pair(
            name1,
            name2,
            min_length=cfg.min_name_length,
            max_length=cfg.max_name_length,
            max_diff=cfg.max_name_diff,
        )

    def _compute(self, name1: str, name2: str) -> DestinyResult:
        with trace_span("compute_destiny") as span:
            result = compute_destiny(name1, name2, self._decomposer)
            if span:
                span.annotate("sequence_length", len(result.combined_sequence))
                span.annotate("rows", len(result.trace))
        logger.debug("Computed %s + %s -> %s", name1, name2, result.percentage)
        return result

    @traced
    def compute(self, name1: str, name2: str) -> ServiceResult:
        """Validate *name1* and *name2*, then run the reduction cascade.

        Surrounding whitespace is ignored. Order matters: *name1*
        contributes the first character of the interleaved sequence.
        """
        op = "destiny"
        name1, name2 = name1.strip(), name2.strip()

        with trace_span("validate"):
            issues = self._validate(name1, name2)
        if issues:
            logger.debug("Rejected %r + %r: %s", name1, name2, [str(i.code) for i in issues])
            return ServiceResult(ok=False, op=op, error=_issue_error(issues))

        result = self._compute(name1, name2)
        return ServiceResult(ok=True, op=op, data=destiny_payload(result))

    @traced
    def compute_both(self, name1: str, name2: str) -> ServiceResult:
        """Compute the score in both argument orders.

        The two scores usually differ because interleaving follows
        argument order.
        """
        op = "destiny_both"
        name1, name2 = name1.strip(), name2.strip()

        with trace_span("validate"):
            issues = self._validate(name1, name2)
        if issues:
            return ServiceResult(ok=False, op=op, error=_issue_error(issues))

        forward = self._compute(name1, name2)
        reverse = self._compute(name2, name1)
        warnings: list[str] = []
        if forward.score != reverse.score:
            warnings.append(
                f"Score depends on name order: {forward.percentage} vs {reverse.percentage}"
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "forward": destiny_payload(forward),
                "reverse": destiny_payload(reverse),
            },
            warnings=warnings,
        )

    @traced
    def strokes(self, text: str) -> ServiceResult:
        """Break *text* into jamo and report stroke counts per character."""
        op = "strokes"
        text = text.strip()
        if not text:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="EMPTY_TEXT", message="Text must not be empty"),
            )

        characters: list[dict[str, Any]] = []
        warnings: list[str] = []
        for char in text:
            if char.isspace():
                continue
            units = self._decomposer.decompose(char)
            raw = stroke_value(units, reduce_to_digit=False)
            if raw == 0:
                warnings.append(f"No stroke value for {char!r}")
            characters.append(
                {
                    "char": char,
                    "units": list(units),
                    "strokes": raw,
                    "digit": stroke_value(units, reduce_to_digit=True),
                }
            )

        total = sum(c["strokes"] for c in characters)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "text": text,
                "characters": characters,
                "total": total,
                "digit": total % 10,
            },
            warnings=warnings,
        )
