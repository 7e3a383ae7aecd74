from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple
import json
import random

import numpy as np


Cell = Tuple[int, int]


class TerrainMap:
    """Rectangular patch of the grid with impassable cells.

    The grid itself is unbounded; the map only covers ``width`` x ``height``
    cells starting at ``origin`` (bottom-left). Cells outside the patch are
    free.

    Parameters
    ----------
    width : int
        Number of columns covered by the map.
    height : int
        Number of rows covered by the map.
    origin : tuple[int, int]
        Grid coordinate of the bottom-left mapped cell.
    obstacles : iterable of (x, y)
        Initially blocked cells, in grid coordinates.
    """

    def __init__(
        self,
        width: int,
        height: int,
        origin: Cell = (0, 0),
        obstacles: Optional[Iterable[Cell]] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Map size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.origin = (int(origin[0]), int(origin[1]))
        # Indexed [row, col] = [y - oy, x - ox]
        self.blocked = np.zeros((self.height, self.width), dtype=bool)
        for x, y in obstacles or []:
            self.block(x, y)

    # ------------------------------------------------------------------
    # Map loading
    # ------------------------------------------------------------------
    @classmethod
    def from_map_dict(cls, data: Dict[str, Any]) -> "TerrainMap":
        """Create a map from a dict with ``width``, ``height``, ``origin``, ``obstacles``."""
        origin = data.get("origin", [0, 0])
        obstacles = [(int(c[0]), int(c[1])) for c in data.get("obstacles", [])]
        return cls(
            width=int(data["width"]),
            height=int(data["height"]),
            origin=(int(origin[0]), int(origin[1])),
            obstacles=obstacles,
        )

    @classmethod
    def from_map_file(cls, path: str) -> "TerrainMap":
        """Create a map from a JSON map file."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls.from_map_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the map to a Python dict (inverse of ``from_map_dict``)."""
        return {
            "width": self.width,
            "height": self.height,
            "origin": list(self.origin),
            "obstacles": [list(c) for c in self.obstacle_cells()],
        }

    # ------------------------------------------------------------------
    # Random obstacle generation
    # ------------------------------------------------------------------
    def clear_obstacles(self) -> None:
        """Remove all obstacles."""
        self.blocked[:] = False

    def generate_random_obstacles(
        self,
        density: float,
        rng: random.Random,
        keep_clear: Iterable[Cell] = (),
    ) -> None:
        """Block each mapped cell independently with probability ``density``.

        Cells listed in ``keep_clear`` (e.g. the landing site) stay free.
        """
        if not 0.0 <= density <= 1.0:
            raise ValueError(f"Density must be in [0, 1], got {density}")
        self.clear_obstacles()
        ox, oy = self.origin
        for row in range(self.height):
            for col in range(self.width):
                if rng.random() < density:
                    self.blocked[row, col] = True
        for x, y in keep_clear:
            if self.contains(x, y):
                self.blocked[y - oy, x - ox] = False

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def contains(self, x: int, y: int) -> bool:
        """Return True if (x, y) lies inside the mapped patch."""
        ox, oy = self.origin
        return ox <= x < ox + self.width and oy <= y < oy + self.height

    def block(self, x: int, y: int) -> None:
        """Mark a cell as impassable."""
        if not self.contains(x, y):
            raise ValueError(f"Cell ({x}, {y}) is outside the map")
        ox, oy = self.origin
        self.blocked[y - oy, x - ox] = True

    def is_blocked(self, x: int, y: int) -> bool:
        if not self.contains(x, y):
            return False
        ox, oy = self.origin
        return bool(self.blocked[y - oy, x - ox])

    def obstacle_cells(self) -> List[Cell]:
        """Blocked cells in grid coordinates, row-major from the bottom."""
        ox, oy = self.origin
        rows, cols = np.nonzero(self.blocked)
        return [(int(c) + ox, int(r) + oy) for r, c in zip(rows, cols)]
