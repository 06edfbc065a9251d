"""Grid positions generic over their coordinate type.

A Position works with any coordinate type that can build its own zero and
one (``type(v)(0)``, ``type(v)(1)``) and supports ``+`` and ``-``: ``int``,
``Fraction``, ``Decimal``, ``float``, or a fixed-width integer type from a
numeric library.  Overflow, wrapping, or trapping is whatever that type
does; nothing here clamps or checks it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Protocol, Self, overload

from roverctl.domain.direction import Direction


class Numeric(Protocol):
    """Coordinate capability: additive closure plus zero/one constructors."""

    def __add__(self, other: Any, /) -> Any: ...

    def __sub__(self, other: Any, /) -> Any: ...


def _zero[N: Numeric](value: N) -> N:
    return type(value)(0)  # type: ignore[call-arg]


def _one[N: Numeric](value: N) -> N:
    return type(value)(1)  # type: ignore[call-arg]


@dataclass(frozen=True)
class Position[N: Numeric]:
    """An ``(x, y)`` coordinate pair on the unbounded grid."""

    x: N
    y: N

    def __iter__(self) -> Iterator[N]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    @overload
    def __add__(self, other: Direction) -> Self: ...
    @overload
    def __add__(self, other: Position[N]) -> Self: ...

    def __add__(self, other: Position[N] | Direction) -> Self:
        if isinstance(other, Direction):
            return add_direction(self, other)
        if isinstance(other, Position):
            return type(self)(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __radd__(self, other: Direction) -> Self:
        if isinstance(other, Direction):
            return add_direction(self, other)
        return NotImplemented

    @overload
    def __sub__(self, other: Direction) -> Self: ...
    @overload
    def __sub__(self, other: Position[N]) -> Self: ...

    def __sub__(self, other: Position[N] | Direction) -> Self:
        if isinstance(other, Direction):
            return add_direction(self, other.opposite)
        if isinstance(other, Position):
            return type(self)(self.x - other.x, self.y - other.y)
        return NotImplemented


def add[N: Numeric](a: Position[N], b: Position[N]) -> Position[N]:
    """Componentwise sum of two positions."""
    return a + b


def sub[N: Numeric](a: Position[N], b: Position[N]) -> Position[N]:
    """Componentwise difference of two positions."""
    return a - b


def add_direction[N: Numeric](position: Position[N], direction: Direction) -> Position[N]:
    """Offset *position* by exactly one unit along *direction*.

    The unit is built from the coordinate's own type, so an ``int`` grid
    steps by ``1`` and a ``Fraction`` grid by ``Fraction(1)``.

    Examples:
        >>> add_direction(Position(1, 1), Direction.N)
        Position(x=1, y=2)
        >>> add_direction(Position(1, 1), Direction.W)
        Position(x=0, y=1)
    """
    x, y = position
    cls = type(position)
    match direction:
        case Direction.N:
            return position + cls(_zero(x), _one(y))
        case Direction.S:
            return position - cls(_zero(x), _one(y))
        case Direction.E:
            return position + cls(_one(x), _zero(y))
        case Direction.W:
            return position - cls(_one(x), _zero(y))
