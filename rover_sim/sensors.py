from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, FrozenSet, Iterable, Tuple

from .world import TerrainMap


class Sensor(ABC):
    """Safety oracle consulted before every move.

    Implementations answer whether the rover may occupy a candidate cell.
    """

    @abstractmethod
    def is_safe(self, x: int, y: int) -> bool:
        """Return True if the rover may move onto (x, y)."""


class TerrainSensor(Sensor):
    """Reports cells blocked on a terrain map as unsafe."""

    def __init__(self, terrain: TerrainMap) -> None:
        self.terrain = terrain

    def is_safe(self, x: int, y: int) -> bool:
        return not self.terrain.is_blocked(x, y)


class BoundsSensor(Sensor):
    """Geofence: only cells inside the inclusive rectangle are safe."""

    def __init__(self, xmin: int, ymin: int, xmax: int, ymax: int) -> None:
        if xmin > xmax or ymin > ymax:
            raise ValueError(
                f"Empty geofence: x in [{xmin}, {xmax}], y in [{ymin}, {ymax}]"
            )
        self.xmin = xmin
        self.ymin = ymin
        self.xmax = xmax
        self.ymax = ymax

    def is_safe(self, x: int, y: int) -> bool:
        return self.xmin <= x <= self.xmax and self.ymin <= y <= self.ymax


class BlockedCellsSensor(Sensor):
    """Reports an explicit set of cells as unsafe."""

    def __init__(self, cells: Iterable[Tuple[int, int]]) -> None:
        self.cells: FrozenSet[Tuple[int, int]] = frozenset(
            (int(x), int(y)) for x, y in cells
        )

    def is_safe(self, x: int, y: int) -> bool:
        return (x, y) not in self.cells


class CallableSensor(Sensor):
    """Adapts a plain ``(x, y) -> bool`` safety predicate."""

    def __init__(self, predicate: Callable[[int, int], bool]) -> None:
        self.predicate = predicate

    def is_safe(self, x: int, y: int) -> bool:
        return bool(self.predicate(x, y))
