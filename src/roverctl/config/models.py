"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, roverctl.toml only contains
overrides.  An empty file (or none at all) starts the rover at the origin
facing north.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from roverctl.domain.direction import Direction
from roverctl.domain.position import Position
from roverctl.domain.rover import Rover

# --- roverctl.toml sections ---


class RoverConfig(BaseModel):
    """[rover] section: default starting state."""

    model_config = {"frozen": True}

    x: int = 0
    y: int = 0
    facing: Direction = Direction.N

    @field_validator("facing", mode="before")
    @classmethod
    def _coerce_facing(cls, value: object) -> object:
        if isinstance(value, str):
            return Direction.parse(value)
        return value

    def to_rover(self) -> Rover[int]:
        """Build the starting Rover described by this section."""
        return Rover(Position(self.x, self.y), self.facing)


class RoverctlConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    rover: RoverConfig = Field(default_factory=RoverConfig)
