"""structlog configuration for roverctl.

Everything goes to stderr so stdout stays clean for results.

- Console (default): ``rover.run  final=(2, 2) N  op=run  program=FRFFLF``
- JSON (``--log-json``): one object per line, rovers as ``{"x", "y", "facing"}``

Services log :class:`~roverctl.domain.rover.Rover` values directly;
:func:`rover_values` flattens them for whichever renderer is active.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from roverctl.domain.rover import Rover

ROVER_LOGGER = "roverctl"


def rover_values(*, as_text: bool) -> Processor:
    """Build a processor that flattens Rover values in the event dict.

    With *as_text* a rover becomes ``"(x, y) F"``; otherwise it becomes a
    ``{"x", "y", "facing"}`` mapping suitable for JSON.
    """

    def flatten(rover: Rover[Any]) -> Any:
        x, y = rover.position
        if as_text:
            return f"({x}, {y}) {rover.direction}"
        return {"x": x, "y": y, "facing": str(rover.direction)}

    def processor(_logger: WrappedLogger, _name: str, event_dict: EventDict) -> EventDict:
        for key, value in event_dict.items():
            if isinstance(value, Rover):
                event_dict[key] = flatten(value)
        return event_dict

    return processor


def _shared_processors(*, log_json: bool) -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        rover_values(as_text=not log_json),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(*, log_json: bool) -> Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog through stdlib logging to stderr.

    Args:
        verbose: Show ``rover.*`` debug events (``roverctl`` logger at DEBUG).
            Otherwise only warnings and above get through.
        log_json: Render JSON lines instead of the console format.

    Safe to call repeatedly: the root handler is replaced, not stacked.
    """
    shared = _shared_processors(log_json=log_json)

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json=log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger(ROVER_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
