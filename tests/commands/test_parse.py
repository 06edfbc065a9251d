"""Tests for the parse command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from roverctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestParseCommand:
    def test_lists_instructions(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "FFRL"])
        assert result.exit_code == 0
        assert "count: 4" in result.output
        assert "rotate_cw" in result.output

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "FFRL"])
        data = json.loads(result.stdout)
        assert data["instructions"] == ["F", "F", "R", "L"]
        assert data["final"] is None

    def test_first_bad_char(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "FFRasdfL"])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["program"] == "FFRasdfL"
        error = payload["error"]
        assert error["detail"] == {"char": "a", "index": 3}

    def test_verbose_error_detail(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "parse", "FFRasdfL"])
        assert result.exit_code == 1
        assert "char: a" in result.stderr
        assert "index: 3" in result.stderr
