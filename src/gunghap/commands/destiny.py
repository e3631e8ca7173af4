"""Command: compute the compatibility score of two names."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gunghap.commands._base import GunghapCommand

if TYPE_CHECKING:
    from gunghap.commands._context import AppContext


@click.command(
    cls=GunghapCommand,
    examples="""\
  gunghap destiny 철수 영희
  gunghap destiny 홍길동 아무개 --both-ways
  gunghap -q destiny 철수 영희
  gunghap --json destiny 남궁민수 김철수""",
)
@click.argument("name1")
@click.argument("name2")
@click.option("--both-ways", is_flag=True, help="Also compute with the names swapped.")
@click.pass_obj
def destiny(app: AppContext, name1: str, name2: str, both_ways: bool) -> None:
    """Compute the stroke-count compatibility of NAME1 and NAME2."""
    if both_ways:
        app.emit(app.destiny.compute_both(name1, name2))
    else:
        app.emit(app.destiny.compute(name1, name2))
