"""Output mode dispatch.

The CLI renders ServiceResult for humans (Rich tables and panels) or
machines (--json). The formatter picks the mode from OutputSettings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from gunghap.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from gunghap.services.result import ServiceResult


class OutputSettings(BaseModel):
    """How a result should be rendered."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    show_strokes: bool = True
    show_process: bool = True


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON takes precedence over quiet, which takes precedence over the
    Rich renderers.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        show_strokes=settings.show_strokes,
        show_process=settings.show_process,
    )
