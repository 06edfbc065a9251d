"""Rover state machine.

States are all ``(position, direction)`` pairs.  Transitions are driven by
Instruction values and are total: every instruction applies to every
state.  Each transition returns a new Rover; the original is never touched.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce
from itertools import accumulate
from typing import Self, assert_never

from roverctl.domain.direction import Direction
from roverctl.domain.instruction import Instruction
from roverctl.domain.position import Numeric, Position, add_direction


@dataclass(frozen=True)
class Rover[N: Numeric]:
    """A rover at *position* facing *direction*."""

    position: Position[N]
    direction: Direction

    @classmethod
    def new(cls, position: Position[N], direction: Direction) -> Self:
        return cls(position, direction)

    def execute(self, instruction: Instruction) -> Self:
        """Apply a single instruction and return the resulting rover.

        Only Instruction members are accepted.  Raw codes such as ``"F"``
        must go through ``parse_char``/``parse_string`` first.
        """
        if not isinstance(instruction, Instruction):
            msg = f"Not an instruction: {instruction!r}"
            raise TypeError(msg)
        match instruction:
            case Instruction.FORWARD:
                return type(self)(add_direction(self.position, self.direction), self.direction)
            case Instruction.ROTATE_CW:
                return type(self)(self.position, self.direction.rotate_cw())
            case Instruction.ROTATE_CCW:
                return type(self)(self.position, self.direction.rotate_ccw())
        assert_never(instruction)

    def execute_many(self, instructions: Iterable[Instruction]) -> Self:
        """Apply *instructions* in order; an empty sequence returns ``self``."""
        return reduce(Rover.execute, instructions, self)

    def trace(self, instructions: Iterable[Instruction]) -> list[Self]:
        """Every state visited, starting with ``self`` and ending with the final state."""
        return list(accumulate(instructions, Rover.execute, initial=self))


def execute[N: Numeric](rover: Rover[N], instruction: Instruction) -> Rover[N]:
    return rover.execute(instruction)


def execute_many[N: Numeric](
    rover: Rover[N], instructions: Iterable[Instruction]
) -> Rover[N]:
    return rover.execute_many(instructions)
