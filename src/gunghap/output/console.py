"""Rich console for gunghap output.

Everything renders into a StringIO buffer so ``format_result`` can hand
back a plain string. Rich drops colour by itself when stdout is not a
terminal, which keeps piped output and CliRunner captures clean.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

# Wide enough for a four-plus-four name stroke table on one line.
RENDER_WIDTH = 100

GUNGHAP_THEME = Theme(
    {
        "gh.ok": "bold green",
        "gh.error": "bold red",
        "gh.op": "bold cyan",
        "gh.key": "dim",
        "gh.name": "bold",
        "gh.char": "bold",
        "gh.stroke": "#bb2372",
        "gh.digit": "cyan",
        "gh.result": "bold magenta",
    }
)


def create_console() -> Console:
    return Console(file=StringIO(), theme=GUNGHAP_THEME, highlight=False, width=RENDER_WIDTH)


def get_output(console: Console) -> str:
    """Text rendered so far into a console from :func:`create_console`."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
