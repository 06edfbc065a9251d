"""Cardinal directions and rotation.

The four directions form a cyclic group of order 4 under rotation:
``rotate_cw`` and ``rotate_ccw`` are mutual inverses, and four turns in
either sense return the starting direction.
"""

from __future__ import annotations

from enum import StrEnum


class Direction(StrEnum):
    """Compass heading of a rover."""

    N = "N"
    S = "S"
    E = "E"
    W = "W"

    def rotate_cw(self) -> Direction:
        """Turn 90 degrees clockwise."""
        return CW_ROTATIONS[self]

    def rotate_ccw(self) -> Direction:
        """Turn 90 degrees counterclockwise."""
        return CCW_ROTATIONS[self]

    @property
    def opposite(self) -> Direction:
        return CW_ROTATIONS[CW_ROTATIONS[self]]

    @classmethod
    def parse(cls, value: str) -> Direction:
        """Coerce user input (``"n"``, ``" E "``) to a Direction.

        Raises ValueError for anything that is not one of the four codes.
        """
        code = value.strip().upper()
        try:
            return cls(code)
        except ValueError:
            msg = f"Unknown direction {value!r}; expected one of N, S, E, W"
            raise ValueError(msg) from None


# --- Rotation maps ---

CW_ROTATIONS: dict[Direction, Direction] = {
    Direction.N: Direction.E,
    Direction.E: Direction.S,
    Direction.S: Direction.W,
    Direction.W: Direction.N,
}

CCW_ROTATIONS: dict[Direction, Direction] = {after: before for before, after in CW_ROTATIONS.items()}


def rotate_cw(direction: Direction) -> Direction:
    """Function form of :meth:`Direction.rotate_cw`."""
    return direction.rotate_cw()


def rotate_ccw(direction: Direction) -> Direction:
    """Function form of :meth:`Direction.rotate_ccw`."""
    return direction.rotate_ccw()
