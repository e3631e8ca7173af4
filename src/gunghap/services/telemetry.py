"""Timing spans for service calls, collected only under ``--verbose``.

A ``@traced`` service method opens a root span; ``trace_span`` blocks
inside it nest beneath. The finished tree lands in
``ServiceResult.meta["telemetry"]``. When telemetry is off both are a
single ContextVar lookup.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from gunghap.services.result import ServiceResult

log = structlog.get_logger("gunghap.telemetry")

_enabled: ContextVar[bool] = ContextVar("gunghap_telemetry", default=False)
_active: ContextVar[Span | None] = ContextVar("gunghap_active_span", default=None)


@dataclass
class Span:
    """One timed step and the steps it started."""

    name: str
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)
    children: list[Span] = field(default_factory=list)

    @property
    def duration_ms(self) -> float:
        if self.finished is None:
            return 0.0
        return (self.finished - self.started) * 1000

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        tree: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 3)}
        if self.annotations:
            tree["annotations"] = dict(self.annotations)
        if self.children:
            tree["children"] = [c.to_dict() for c in self.children]
        return tree


def enable_telemetry(enabled: bool = True) -> None:
    """Switch span collection on or off for the current context."""
    _enabled.set(enabled)


@contextmanager
def _activate(span: Span) -> Generator[Span]:
    token = _active.set(span)
    try:
        yield span
    finally:
        span.finished = time.perf_counter()
        _active.reset(token)


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Time a block as a child of the running span.

    Yields None outside a ``@traced`` call or when telemetry is off.
    """
    parent = _active.get() if _enabled.get() else None
    if parent is None:
        yield None
        return
    child = Span(name=name)
    parent.children.append(child)
    with _activate(child):
        yield child


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Time a service method and attach its span tree to the returned result."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        root = Span(name=func.__qualname__)
        ok = False
        try:
            with _activate(root):
                result = func(*args, **kwargs)
            ok = result.ok if isinstance(result, ServiceResult) else True
        finally:
            log.debug(
                "span.complete",
                span_name=root.name,
                duration_ms=round(root.duration_ms, 3),
                ok=ok,
                children=len(root.children),
            )

        if isinstance(result, ServiceResult):
            meta = {**(result.meta or {}), "telemetry": root.to_dict()}
            return result.model_copy(update={"meta": meta})  # type: ignore[return-value]
        return result

    return wrapper
