"""Command: show stroke counts for each character of a text."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gunghap.commands._base import GunghapCommand

if TYPE_CHECKING:
    from gunghap.commands._context import AppContext


@click.command(
    cls=GunghapCommand,
    examples="""\
  gunghap strokes 철수
  gunghap --json strokes 희""",
)
@click.argument("text")
@click.pass_obj
def strokes(app: AppContext, text: str) -> None:
    """Break TEXT into jamo and show the stroke count of each character."""
    app.emit(app.destiny.strokes(text))
