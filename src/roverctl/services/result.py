"""Rover-shaped service results.

INVARIANT: every NavigationService operation returns a ServiceResult.
Rover states travel as :class:`RoverState` snapshots so the output layer
never has to know about ``Position`` or ``Direction`` internals.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, Field, computed_field

from roverctl.domain.direction import Direction
from roverctl.domain.instruction import Instruction

if TYPE_CHECKING:
    from roverctl.domain.rover import Rover

Op = Literal["run", "trace", "parse"]


class RoverState(BaseModel):
    """Snapshot of a rover: where it is and which way it faces."""

    model_config = {"frozen": True}

    x: Any
    y: Any
    facing: Direction

    @classmethod
    def from_rover(cls, rover: Rover[Any]) -> RoverState:
        x, y = rover.position
        return cls(x=x, y=y, facing=rover.direction)

    def describe(self, sep: str = " ") -> str:
        """``x y facing`` joined by *sep*."""
        return sep.join(str(v) for v in (self.x, self.y, self.facing))


class TraceStep(RoverState):
    """One row of a trace: the state after *instruction* was applied.

    Step 0 is the starting state and has no instruction.
    """

    step: int
    instruction: Instruction | None = None


class ServiceError(BaseModel):
    """Why an operation failed.

    For ``INVALID_INSTRUCTION`` the detail carries ``char`` and ``index``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of a run, trace, or parse.

    Attributes:
        ok: Whether the program parsed (and, for run/trace, executed).
        op: ``"run"``, ``"trace"`` or ``"parse"``.
        program: The program string as given, kept on failures too.
        instructions: Parsed instructions, in program order.
        start: Rover state before the first instruction.
        final: Rover state after the last instruction.
        states: Every visited state (trace only).
        warnings: Non-fatal issues, e.g. an empty program.
        error: Set exactly when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: Op
    program: str = ""
    instructions: list[Instruction] = Field(default_factory=list)
    start: RoverState | None = None
    final: RoverState | None = None
    states: list[TraceStep] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def steps(self) -> int:
        return len(self.instructions)
