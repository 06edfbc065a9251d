"""Rover instructions and program parsing.

A program is a string of single-character instruction codes:

- ``F``: advance one unit forward
- ``R``: rotate 90 degrees clockwise
- ``L``: rotate 90 degrees counterclockwise

INVARIANT: parsing fails fast.  The first invalid character aborts the
whole program and no partial instruction list is returned.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum


class InvalidInstructionError(ValueError):
    """A character that is not an instruction code.

    Attributes:
        char: The offending character, verbatim.
        index: Zero-based offset of *char* within the program, or None when
            a lone character was parsed.
    """

    def __init__(self, char: str, index: int | None = None) -> None:
        self.char = char
        self.index = index
        if index is None:
            msg = f"Invalid instruction {char!r}"
        else:
            msg = f"Invalid instruction {char!r} at index {index}"
        super().__init__(msg)


class Instruction(StrEnum):
    """Single rover command, valued by its program code."""

    FORWARD = "F"
    ROTATE_CW = "R"
    ROTATE_CCW = "L"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_char(cls, char: str) -> Instruction:
        return parse_char(char)

    @classmethod
    def from_string(cls, program: Iterable[str]) -> list[Instruction]:
        return parse_string(program)


_CODES: dict[str, Instruction] = {member.value: member for member in Instruction}


def parse_char(char: str) -> Instruction:
    """Parse one instruction code.

    Codes are case-sensitive.  Raises InvalidInstructionError carrying
    *char* for anything other than ``F``, ``R``, or ``L``.

    Examples:
        >>> parse_char("F")
        <Instruction.FORWARD: 'F'>
        >>> parse_char("w")
        Traceback (most recent call last):
            ...
        roverctl.domain.instruction.InvalidInstructionError: Invalid instruction 'w'
    """
    try:
        return _CODES[char]
    except (KeyError, TypeError):
        raise InvalidInstructionError(char) from None


def parse_string(program: Iterable[str]) -> list[Instruction]:
    """Parse a whole program, left to right, stopping at the first bad code.

    Characters after the first invalid one are never examined.

    Examples:
        >>> [i.code for i in parse_string("FFRL")]
        ['F', 'F', 'R', 'L']
    """
    instructions: list[Instruction] = []
    for index, char in enumerate(program):
        try:
            instructions.append(parse_char(char))
        except InvalidInstructionError as exc:
            raise InvalidInstructionError(exc.char, index) from None
    return instructions


def format_program(instructions: Iterable[Instruction]) -> str:
    """Render instructions back into their program string."""
    return "".join(instruction.code for instruction in instructions)
