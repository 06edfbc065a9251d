"""Tests for the run command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from roverctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestRunCommand:
    def test_kata(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["run", "FRFFLF"])
        assert result.exit_code == 0, result.output
        assert "(2, 2) N" in result.output

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "run", "FRFFLF"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["final"] == {"x": 2, "y": 2, "facing": "N"}

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "run", "FRFFLF"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "2 2 N"

    def test_start_overrides(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "run", "FF", "--x", "3", "--y", "-2", "--facing", "e"]
        )
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "5 -2 E"

    def test_invalid_facing_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["run", "F", "--facing", "Q"])
        assert result.exit_code == 2

    def test_invalid_program(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "run", "FFRxL"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["ok"] is False
        assert data["error"]["code"] == "INVALID_INSTRUCTION"
        assert data["error"]["detail"] == {"char": "x", "index": 3}

    def test_empty_program_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "run", ""])
        assert result.exit_code == 0
        assert result.stdout.strip() == "0 0 N"
        assert "WARNING: Empty program" in result.stderr

    def test_config_start(self, cli_runner: CliRunner, _isolated_cwd: Path) -> None:
        (_isolated_cwd / "roverctl.toml").write_text('[rover]\nx = 10\ny = 10\nfacing = "S"\n')
        result = cli_runner.invoke(cli, ["-q", "run", "F"])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "10 9 S"

    def test_flags_override_config(self, cli_runner: CliRunner, _isolated_cwd: Path) -> None:
        (_isolated_cwd / "roverctl.toml").write_text('[rover]\nx = 10\nfacing = "S"\n')
        result = cli_runner.invoke(cli, ["-q", "run", "F", "--facing", "N"])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "10 1 N"

    def test_explicit_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        custom = tmp_path / "elsewhere.toml"
        custom.write_text('[rover]\nfacing = "W"\n')
        result = cli_runner.invoke(cli, ["-q", "-c", str(custom), "run", "F"])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "-1 0 W"

    def test_missing_explicit_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["-c", str(tmp_path / "nope.toml"), "run", "F"])
        assert result.exit_code == 2
        assert "does not exist" in result.stderr

    def test_invalid_toml(self, cli_runner: CliRunner, _isolated_cwd: Path) -> None:
        (_isolated_cwd / "roverctl.toml").write_text("[rover\n")
        result = cli_runner.invoke(cli, ["run", "F"])
        assert result.exit_code == 1
        assert "Invalid TOML" in result.stderr
