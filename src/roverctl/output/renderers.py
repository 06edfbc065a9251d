"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text

from roverctl.output.console import create_console, get_output, style_for_direction

if TYPE_CHECKING:
    from rich.console import Console

    from roverctl.services.result import RoverState, ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _OP_RENDERERS[result.op](result, console)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    run/trace collapse to ``x y facing`` of the final state, parse to the
    program string.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    if result.final is not None:
        return result.final.describe()
    return result.program


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="rover.ok")
    op = Text(f"  {result.op}", style="rover.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Text | str | int) -> None:
    k = Text(f"  {key}: ", style="rover.key")
    v = value if isinstance(value, Text) else Text(str(value))
    console.print(k, v, sep="")


def _program(result: ServiceResult) -> Text:
    return Text(result.program, style="rover.instruction")


def _state_text(state: RoverState | None) -> Text:
    if state is None:
        return Text("-")
    text = Text(f"({state.x}, {state.y})", style="rover.coord")
    text.append(" ")
    text.append(str(state.facing), style=style_for_direction(state.facing))
    return text


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="rover.error")
    op = Text(f"  {result.op}", style="rover.op")
    console.print(label, op, Text(" - "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Rover renderers ───────────────────────────────────────────────────


def _render_run(result: ServiceResult, console: Console) -> None:
    """Program, step count, start and final state."""
    _status_line(console, result)
    _field(console, "program", _program(result))
    _field(console, "steps", result.steps)
    _field(console, "start", _state_text(result.start))
    _field(console, "final", _state_text(result.final))


def _render_trace(result: ServiceResult, console: Console) -> None:
    """Every visited state as a table, then the final state."""
    _status_line(console, result)
    _field(console, "program", _program(result))

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Step", justify="right", style="dim")
    table.add_column("Instr", style="rover.instruction")
    table.add_column("X", justify="right", style="rover.coord")
    table.add_column("Y", justify="right", style="rover.coord")
    table.add_column("Facing")

    for row in result.states:
        table.add_row(
            str(row.step),
            row.instruction.code if row.instruction is not None else "-",
            str(row.x),
            str(row.y),
            Text(str(row.facing), style=style_for_direction(row.facing)),
        )

    console.print()
    console.print(table)
    _field(console, "final", _state_text(result.final))


def _render_parse(result: ServiceResult, console: Console) -> None:
    """One numbered line per instruction."""
    _status_line(console, result)
    _field(console, "program", _program(result))
    _field(console, "count", len(result.instructions))
    for index, instruction in enumerate(result.instructions):
        line = Text(f"    {index:>3}  ", style="dim")
        line.append(instruction.code, style="rover.instruction")
        line.append(f"  {instruction.name.lower()}")
        console.print(line)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "run": _render_run,
    "trace": _render_trace,
    "parse": _render_parse,
}
