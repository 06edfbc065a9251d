"""Locate and read ``roverctl.toml``.

Lookup order: ``--config`` (checked by click), then ``$ROVERCTL_CONFIG``,
then the nearest ``roverctl.toml`` in the working directory or any parent.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "roverctl.toml"
CONFIG_ENV_VAR = "ROVERCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    A ``ROVERCTL_CONFIG`` pointing at a missing file disables discovery
    rather than falling back to the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        click.ClickException: the file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
