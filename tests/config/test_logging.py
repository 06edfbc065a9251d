"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from roverctl.config.logging import configure_logging, rover_values
from roverctl.domain import Direction, Position, Rover
from roverctl.services.navigation import NavigationService


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("roverctl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("roverctl").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("roverctl.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "roverctl.test"
        assert "timestamp" in parsed

    def test_service_debug_events_reach_stderr(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        NavigationService().run("FF")
        captured = capfd.readouterr()
        events = [json.loads(line) for line in captured.err.strip().splitlines()]
        run_events = [e for e in events if e["event"] == "rover.run"]
        assert run_events
        assert run_events[0]["steps"] == 2
        assert run_events[0]["start"] == {"x": 0, "y": 0, "facing": "N"}
        assert run_events[0]["final"] == {"x": 0, "y": 2, "facing": "N"}
        assert run_events[0]["op"] == "run"
        assert run_events[0]["program"] == "FF"

    def test_parse_failure_carries_program(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        NavigationService().trace("FQ")
        events = [json.loads(line) for line in capfd.readouterr().err.strip().splitlines()]
        (failed,) = [e for e in events if e["event"] == "rover.parse_failed"]
        assert (failed["op"], failed["program"]) == ("trace", "FQ")
        assert (failed["char"], failed["index"]) == ("Q", 1)

    def test_context_unbound_after_operation(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        NavigationService().run("F")
        capfd.readouterr()
        structlog.get_logger("roverctl.test").warning("after")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert "program" not in parsed

    def test_console_mode_renders_rover_text(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=False)
        NavigationService(Rover(Position(3, 4), Direction.W)).run("F")
        err = capfd.readouterr().err
        assert "rover.run" in err
        assert "(2, 4) W" in err

    def test_non_verbose_hides_debug(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("roverctl.services.navigation").debug("hidden")
        captured = capfd.readouterr()
        assert captured.err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        root = logging.getLogger()
        assert len(root.handlers) == 1


class TestRoverValues:
    @pytest.mark.parametrize(
        "as_text,expected",
        [(True, "(1, -2) S"), (False, {"x": 1, "y": -2, "facing": "S"})],
    )
    def test_flattens_rovers(self, as_text: bool, expected: object) -> None:
        processor = rover_values(as_text=as_text)
        event = {"event": "rover.run", "final": Rover(Position(1, -2), Direction.S), "steps": 3}
        out = processor(None, "debug", event)
        assert out["final"] == expected
        assert out["steps"] == 3
