"""Root CLI group for roverctl with global flags and command registration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from roverctl import __version__
from roverctl.commands import register_commands
from roverctl.commands._context import AppContext
from roverctl.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME
from roverctl.config.settings import RoverctlSettings
from roverctl.domain.instruction import Instruction


def _epilog() -> str:
    codes = ", ".join(f"{i.code}={i.name.lower()}" for i in Instruction)
    return (
        f"Programs are strings of instruction codes ({codes}). "
        f"The starting rover comes from the [rover] table of {CONFIG_FILENAME} "
        f"(or ${CONFIG_ENV_VAR}), then ROVERCTL_ROVER__* env vars, then "
        "--x/--y/--facing."
    )


@click.group(invoke_without_command=True, epilog=_epilog())
@click.version_option(version=__version__, prog_name="roverctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the final 'x y facing'.")
@click.option("-v", "--verbose", is_flag=True, help="Error detail and rover.* debug events.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help=f"Use this file instead of discovering {CONFIG_FILENAME}.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, **flags: Any) -> None:
    """roverctl: drive a rover around an unbounded grid."""
    ctx.obj = AppContext(RoverctlSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
