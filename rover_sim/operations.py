"""
Rover operations.

Operations form a closed set of immutable values: four atomic moves and
rotations plus ``Compose``, an ordered sequence of operations treated as one
command. ``execute_operation`` is the single place that gives them meaning.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Tuple, Union

from .state import compute_move, compute_rotate

if TYPE_CHECKING:
    from .rover import Rover


@dataclass(frozen=True)
class MoveForward:
    pass


@dataclass(frozen=True)
class MoveBackward:
    pass


@dataclass(frozen=True)
class RotateLeft:
    pass


@dataclass(frozen=True)
class RotateRight:
    pass


@dataclass(frozen=True)
class Compose:
    """Run child operations in order, halting once the rover is stopped."""

    operations: Tuple["Operation", ...] = ()


Operation = Union[MoveForward, MoveBackward, RotateLeft, RotateRight, Compose]


def execute_operation(operation: Operation, rover: "Rover") -> None:
    """Apply an operation to a rover, replacing its current state."""
    if isinstance(operation, MoveForward):
        rover.state = compute_move(rover.state, True, rover.danger_exists)
    elif isinstance(operation, MoveBackward):
        rover.state = compute_move(rover.state, False, rover.danger_exists)
    elif isinstance(operation, RotateLeft):
        rover.state = compute_rotate(rover.state, clockwise=False)
    elif isinstance(operation, RotateRight):
        rover.state = compute_rotate(rover.state, clockwise=True)
    elif isinstance(operation, Compose):
        for child in operation.operations:
            # Checked before each child: the first blocked step aborts the rest
            if rover.state.stopped:
                break
            execute_operation(child, rover)
    else:
        raise TypeError(f"Not a rover operation: {operation!r}")


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def move_forward() -> MoveForward:
    return MoveForward()


def move_backward() -> MoveBackward:
    return MoveBackward()


def rotate_left() -> RotateLeft:
    return RotateLeft()


def rotate_right() -> RotateRight:
    return RotateRight()


def compose(operations: Iterable[Operation]) -> Compose:
    """Build a composite from an ordered iterable of operations."""
    return Compose(tuple(operations))
