"""Domain layer: directions, positions, instructions, and rovers.

This layer depends only on the stdlib.
It must never import from services, commands, output, or config.
"""

from __future__ import annotations

from roverctl.domain.direction import Direction, rotate_ccw, rotate_cw
from roverctl.domain.instruction import (
    Instruction,
    InvalidInstructionError,
    format_program,
    parse_char,
    parse_string,
)
from roverctl.domain.position import Numeric, Position, add, add_direction, sub
from roverctl.domain.rover import Rover, execute, execute_many

__all__ = [
    "Direction",
    "Instruction",
    "InvalidInstructionError",
    "Numeric",
    "Position",
    "Rover",
    "add",
    "add_direction",
    "execute",
    "execute_many",
    "format_program",
    "parse_char",
    "parse_string",
    "rotate_ccw",
    "rotate_cw",
    "sub",
]
