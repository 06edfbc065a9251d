"""Shared pytest fixtures for roverctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from roverctl.domain import Direction, Position, Rover


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None]:
    """Undo handlers installed by CLI invocations (they point at closed streams)."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    rover = logging.getLogger("roverctl")
    rover_level = rover.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    rover.setLevel(rover_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def origin_rover() -> Rover[int]:
    """Rover at (0, 0) facing north."""
    return Rover(Position(0, 0), Direction.N)


@pytest.fixture
def _isolated_cwd(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path]:
    """Run from an empty temp directory with no config env override.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` so no stray
    ``roverctl.toml`` above the checkout leaks into a test.
    """
    monkeypatch.delenv("ROVERCTL_CONFIG", raising=False)
    for var in ("ROVERCTL_ROVER__X", "ROVERCTL_ROVER__Y", "ROVERCTL_ROVER__FACING"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
