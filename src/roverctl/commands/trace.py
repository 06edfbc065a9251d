"""Command: execute a program and list every intermediate state."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roverctl.commands._base import RoverCommand, start_options

if TYPE_CHECKING:
    from roverctl.commands._context import AppContext


@click.command(
    cls=RoverCommand,
    examples="""\
  roverctl trace FRFFLF
  roverctl trace RRFF --facing S
  roverctl --json trace FLF""",
)
@click.argument("program")
@start_options
@click.pass_obj
def trace(
    app: AppContext,
    program: str,
    x: int | None,
    y: int | None,
    facing: str | None,
) -> None:
    """Execute PROGRAM step by step and print each rover state."""
    start = app.start_rover(x=x, y=y, facing=facing)
    app.emit(app.navigation.trace(program, start=start))
