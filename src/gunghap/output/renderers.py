"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from gunghap.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from gunghap.services.result import ServiceResult


@dataclass(frozen=True)
class RenderOptions:
    verbose: bool = False
    show_strokes: bool = True
    show_process: bool = True


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    show_strokes: bool = True,
    show_process: bool = True,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    options = RenderOptions(
        verbose=verbose,
        show_strokes=show_strokes,
        show_process=show_process,
    )

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, options)
    else:
        _render_error(result, console, options)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "destiny":
        return str(result.data.get("percentage", ""))
    if result.op == "destiny_both":
        forward = result.data.get("forward", {})
        reverse = result.data.get("reverse", {})
        return f"{forward.get('percentage', '')}\n{reverse.get('percentage', '')}"
    if result.op == "strokes":
        return str(result.data.get("total", ""))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text.assemble(("OK", "gh.ok"), (f"  {result.op}", "gh.op")))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    console.print(Text.assemble((f"  {key}: ", "gh.key"), (str(value), style)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 100:
        style = "bold red"
    elif duration > 10:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.3f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        extras = ", ".join(f"{ak}={av}" for ak, av in annotations.items())
        line += f"  ({extras})"

    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _digit_row(values: Sequence[int], depth: int) -> Text:
    """One cascade row, indented so the rows form a narrowing pyramid."""
    digits = "   ".join(str(v) for v in values)
    return Text(" " * (4 + 2 * depth) + digits, style="gh.digit")


def _stroke_table(characters: Sequence[str], strokes: Sequence[int]) -> Table:
    """Interleaved characters as the header row, stroke totals beneath."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False, box=None)
    for char in characters:
        table.add_column(Text(char, style="gh.char"), justify="center")
    table.add_row(*(Text(str(s), style="gh.stroke") for s in strokes))
    return table


def _render_destiny_body(data: dict[str, Any], console: Console, options: RenderOptions) -> None:
    _field(console, "name1", data.get("name1", ""), "gh.name")
    _field(console, "name2", data.get("name2", ""), "gh.name")

    if options.show_strokes:
        console.print()
        console.print(Text("  strokes:", style="gh.key"))
        table = _stroke_table(data.get("combined_sequence", []), data.get("stroke_totals", []))
        console.print(table)

    rows: list[list[int]] = data.get("trace", [])
    result = data.get("result", [])
    if options.show_process:
        console.print()
        console.print(Text("  process:", style="gh.key"))
        for depth, row in enumerate(rows):
            console.print(_digit_row(row, depth))
        if result:
            console.print(_digit_row(result, len(rows)))

    console.print()
    _field(console, "result", " ".join(str(d) for d in result))
    _field(console, "score", data.get("percentage", ""), "gh.result")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, options: RenderOptions) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text.assemble(("ERROR", "gh.error"), (f"  {result.op}", "gh.op"), " — ", msg))

    if options.verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_destiny(result: ServiceResult, console: Console, options: RenderOptions) -> None:
    _status_line(console, result)
    _render_destiny_body(result.data, console, options)
    if options.verbose:
        _render_meta(console, result)


def _render_destiny_both(result: ServiceResult, console: Console, options: RenderOptions) -> None:
    _status_line(console, result)
    for key in ("forward", "reverse"):
        data = result.data.get(key)
        if not data:
            continue
        console.print()
        console.print(Text(f"  [{key}] {data.get('name1')} + {data.get('name2')}", style="bold"))
        _render_destiny_body(data, console, options)
    if options.verbose:
        _render_meta(console, result)


def _render_strokes(result: ServiceResult, console: Console, options: RenderOptions) -> None:
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Char", style="gh.char", justify="center")
    table.add_column("Jamo")
    table.add_column("Strokes", style="gh.stroke", justify="right")
    table.add_column("Digit", style="gh.digit", justify="right")
    for item in result.data.get("characters", []):
        table.add_row(
            str(item.get("char", "")),
            " ".join(item.get("units", [])),
            str(item.get("strokes", 0)),
            str(item.get("digit", 0)),
        )
    console.print(table)
    _field(console, "total", result.data.get("total", 0))
    _field(console, "digit", result.data.get("digit", 0))
    if options.verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, options: RenderOptions) -> None:
    """Fallback: status line and key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if options.verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console, RenderOptions], None]] = {
    "destiny": _render_destiny,
    "destiny_both": _render_destiny_both,
    "strokes": _render_strokes,
}
