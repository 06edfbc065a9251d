"""Command: execute a program and report the final rover state."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roverctl.commands._base import RoverCommand, start_options

if TYPE_CHECKING:
    from roverctl.commands._context import AppContext


@click.command(
    cls=RoverCommand,
    examples="""\
  roverctl run FRFFLF
  roverctl run FFRFF --x 3 --y -2 --facing E
  roverctl --json run LLF
  roverctl -q run FRFFLF""",
)
@click.argument("program")
@start_options
@click.pass_obj
def run(
    app: AppContext,
    program: str,
    x: int | None,
    y: int | None,
    facing: str | None,
) -> None:
    """Execute PROGRAM (a string of F, R, L codes) and print the final state."""
    start = app.start_rover(x=x, y=y, facing=facing)
    app.emit(app.navigation.run(program, start=start))
