from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Tuple

from .direction import Vector, heading_name, rotate


DangerProbe = Callable[[int, int], bool]


@dataclass(frozen=True)
class State:
    """Snapshot of the rover on the grid.

    Attributes
    ----------
    x : int
        Column coordinate (unbounded, signed).
    y : int
        Row coordinate (unbounded, signed), increasing to the north.
    heading : Direction
        Current heading. Before landing this is the zero vector.
    stopped : bool
        True when the most recent operation was blocked or aborted.
    """

    x: int
    y: int
    heading: Vector
    stopped: bool = False

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def with_stopped(self, stopped: bool) -> "State":
        """Return a copy with the stopped flag replaced."""
        return replace(self, stopped=stopped)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize state to a dict for logging/telemetry."""
        return {
            "x": self.x,
            "y": self.y,
            "heading": heading_name(self.heading),
            "stopped": self.stopped,
        }


def compute_move(state: State, forward: bool, danger_probe: DangerProbe) -> State:
    """Advance one cell along (or against) the current heading.

    The candidate cell is checked with ``danger_probe``. When it reports
    danger the rover keeps its position and the new state is stopped.
    """
    dx, dy = state.heading
    if forward:
        new_x, new_y = state.x + dx, state.y + dy
    else:
        new_x, new_y = state.x - dx, state.y - dy

    if danger_probe(new_x, new_y):
        return State(x=state.x, y=state.y, heading=state.heading, stopped=True)
    return State(x=new_x, y=new_y, heading=state.heading, stopped=False)


def compute_rotate(state: State, clockwise: bool) -> State:
    """Turn in place. Rotation is never blocked."""
    return State(
        x=state.x,
        y=state.y,
        heading=rotate(state.heading, clockwise),
        stopped=False,
    )
