"""Core types shared by the world and location grids."""

from enum import IntEnum

from pydantic import BaseModel


class Direction(IntEnum):
    """Cardinal movement directions."""

    NORTH = 1
    EAST = 2
    SOUTH = 3
    WEST = 4


# Coordinate system: +X is East, +Y is South
DIRECTION_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}


class Position(BaseModel, frozen=True):
    """Immutable 2D tile coordinate.

    Coordinates may be negative or exceed grid bounds; grids normalise them
    before indexing.
    """

    x: int
    y: int

    def __add__(self, other: "Position") -> "Position":
        return Position(x=self.x + other.x, y=self.y + other.y)

    def offset(self, direction: Direction) -> "Position":
        """Return new position offset by direction."""
        dx, dy = DIRECTION_DELTAS[direction]
        return Position(x=self.x + dx, y=self.y + dy)

    def manhattan(self, other: "Position") -> int:
        """Manhattan distance to another position (no wrapping)."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def chebyshev(self, other: "Position") -> int:
        """Chebyshev distance to another position."""
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def __repr__(self) -> str:
        return f"Position(x={self.x}, y={self.y})"
