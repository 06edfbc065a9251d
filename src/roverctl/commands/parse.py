"""Command: validate a program without running it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roverctl.commands._base import RoverCommand

if TYPE_CHECKING:
    from roverctl.commands._context import AppContext


@click.command(
    cls=RoverCommand,
    examples="""\
  roverctl parse FFRL
  roverctl --json parse FFRasdfL""",
)
@click.argument("program")
@click.pass_obj
def parse(app: AppContext, program: str) -> None:
    """Check that PROGRAM only contains F, R, and L and list its instructions."""
    app.emit(app.navigation.parse(program))
