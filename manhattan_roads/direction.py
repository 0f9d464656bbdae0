"""
Compass directions for a Manhattan-style road network.
"""

from enum import Enum


class Direction(Enum):
    """One of the four compass points a street can leave or enter by."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    def opposite(self) -> "Direction":
        """Return the opposite direction (NORTH -> SOUTH)."""
        return opposite(self)

    def right_turn(self) -> "Direction":
        """Return the direction faced after a right turn (NORTH -> EAST)."""
        return right_turn(self)

    def left_turn(self) -> "Direction":
        """Return the direction faced after a left turn (NORTH -> WEST)."""
        return left_turn(self)

    @property
    def is_vertical(self) -> bool:
        return is_vertical(self)

    def __str__(self) -> str:
        return self.value


_OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}

# Clockwise rotation; the left turn table is its inverse
_RIGHT_TURN = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
}

_LEFT_TURN = {after: before for before, after in _RIGHT_TURN.items()}


def opposite(direction: Direction) -> Direction:
    return _OPPOSITE[direction]


def right_turn(direction: Direction) -> Direction:
    return _RIGHT_TURN[direction]


def left_turn(direction: Direction) -> Direction:
    return _LEFT_TURN[direction]


def is_vertical(direction: Direction) -> bool:
    """True for NORTH and SOUTH."""
    return direction in (Direction.NORTH, Direction.SOUTH)
