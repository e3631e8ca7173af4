"""Subcommand modules for gunghap.

Provides register_commands() which uses deferred imports to keep
``gunghap --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from gunghap.commands.destiny import destiny
    from gunghap.commands.strokes import strokes

    cli.add_command(destiny)
    cli.add_command(strokes)
