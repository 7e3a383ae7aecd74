"""
Cardinal headings for the grid rover.

A heading is one of four unit vectors. Rotation is an exact 90 degree turn
and is closed over the four cardinals.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple


Vector = Tuple[int, int]


class Direction(tuple, Enum):
    """Unit-vector heading (dx, dy) on the grid."""

    NORTH = (0, 1)
    EAST = (1, 0)
    SOUTH = (0, -1)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self[0]

    @property
    def dy(self) -> int:
        return self[1]

    def rotate(self, clockwise: bool) -> "Direction":
        """Return the heading after a quarter turn."""
        return rotate(self, clockwise)

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        """Look up a heading by name, case-insensitive (``"north"``, ``"N"``...)."""
        key = name.strip().upper()
        for member in cls:
            if member.name == key or member.name[0] == key:
                return member
        raise ValueError(f"Unknown heading: {name!r}")


def rotate(heading: Vector, clockwise: bool) -> Direction:
    """Rotate a heading by 90 degrees.

    Clockwise maps (dx, dy) -> (dy, -dx); counter-clockwise maps
    (dx, dy) -> (-dy, dx).
    """
    dx, dy = heading
    if clockwise:
        return Direction((dy, -dx))
    return Direction((-dy, dx))


def heading_name(heading: Vector) -> str:
    """Name of a heading, or ``"unknown"`` for a non-cardinal vector."""
    try:
        return Direction(tuple(heading)).name
    except ValueError:
        return "unknown"
