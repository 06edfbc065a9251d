"""Subcommand modules for roverctl.

Provides register_commands() which uses deferred imports to keep
``roverctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from roverctl.commands.parse import parse
    from roverctl.commands.run import run
    from roverctl.commands.trace import trace

    cli.add_command(run)
    cli.add_command(trace)
    cli.add_command(parse)
