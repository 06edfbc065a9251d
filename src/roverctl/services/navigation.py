"""NavigationService: parse programs and drive rovers.

Wraps the pure domain layer for embedding callers (the CLI).  Invalid
programs never raise out of the service: they come back as a failed
ServiceResult whose error detail carries the offending character and
its index.

Each operation binds ``op`` and ``program`` into structlog's context, so
every ``rover.*`` event logged underneath carries both.
"""

from __future__ import annotations

from typing import Any

import structlog
from structlog.contextvars import bound_contextvars

from roverctl.domain.direction import Direction
from roverctl.domain.instruction import Instruction, InvalidInstructionError, parse_string
from roverctl.domain.position import Position
from roverctl.domain.rover import Rover
from roverctl.services.result import Op, RoverState, ServiceError, ServiceResult, TraceStep

logger = structlog.get_logger(__name__)

INVALID_INSTRUCTION = "INVALID_INSTRUCTION"
EMPTY_PROGRAM_WARNING = "Empty program; rover state unchanged"


class NavigationService:
    """Rover operations over instruction programs.

    Args:
        start: Rover used when a call does not pass its own *start*.
            Defaults to the origin facing north.
    """

    def __init__(self, start: Rover[Any] | None = None) -> None:
        self._start = start if start is not None else Rover(Position(0, 0), Direction.N)

    @property
    def start(self) -> Rover[Any]:
        return self._start

    def parse(self, program: str) -> ServiceResult:
        """Validate *program* and list its instructions."""
        with bound_contextvars(op="parse", program=program):
            instructions, error = self._parse("parse", program)
            if error is not None:
                return error
            return ServiceResult(
                ok=True,
                op="parse",
                program=program,
                instructions=instructions,
                warnings=self._warnings(instructions),
            )

    def run(self, program: str, *, start: Rover[Any] | None = None) -> ServiceResult:
        """Execute *program* and report the start and final states."""
        with bound_contextvars(op="run", program=program):
            instructions, error = self._parse("run", program)
            if error is not None:
                return error
            initial = start if start is not None else self._start
            final = initial.execute_many(instructions)
            logger.debug("rover.run", steps=len(instructions), start=initial, final=final)
            return ServiceResult(
                ok=True,
                op="run",
                program=program,
                instructions=instructions,
                start=RoverState.from_rover(initial),
                final=RoverState.from_rover(final),
                warnings=self._warnings(instructions),
            )

    def trace(self, program: str, *, start: Rover[Any] | None = None) -> ServiceResult:
        """Execute *program* and report every intermediate state."""
        with bound_contextvars(op="trace", program=program):
            instructions, error = self._parse("trace", program)
            if error is not None:
                return error
            initial = start if start is not None else self._start
            visited = initial.trace(instructions)
            applied: list[Instruction | None] = [None, *instructions]
            states = [
                TraceStep(step=step, instruction=instruction, **_state_fields(rover))
                for step, (instruction, rover) in enumerate(zip(applied, visited, strict=True))
            ]
            logger.debug("rover.trace", steps=len(instructions), final=visited[-1])
            return ServiceResult(
                ok=True,
                op="trace",
                program=program,
                instructions=instructions,
                start=RoverState.from_rover(initial),
                final=RoverState.from_rover(visited[-1]),
                states=states,
                warnings=self._warnings(instructions),
            )

    # --- Internals ---

    @staticmethod
    def _parse(op: Op, program: str) -> tuple[list[Instruction], ServiceResult | None]:
        try:
            return parse_string(program), None
        except InvalidInstructionError as exc:
            logger.info("rover.parse_failed", char=exc.char, index=exc.index)
            return [], ServiceResult(
                ok=False,
                op=op,
                program=program,
                error=ServiceError(
                    code=INVALID_INSTRUCTION,
                    message=str(exc),
                    detail={"char": exc.char, "index": exc.index},
                ),
            )

    @staticmethod
    def _warnings(instructions: list[Instruction]) -> list[str]:
        return [] if instructions else [EMPTY_PROGRAM_WARNING]


def _state_fields(rover: Rover[Any]) -> dict[str, Any]:
    return RoverState.from_rover(rover).model_dump()
