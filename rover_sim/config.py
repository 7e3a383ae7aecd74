"""
YAML mission configuration.

A mission file binds command characters to operations, lists the sensors
to mount, and optionally gives a landing pose and a default program::

    commands:
      f: forward
      b: backward
      l: left
      r: right
      u: [right, right]
    sensors:
      - {type: terrain, map: ../rover_sim/maps/crater_field.json}
      - {type: bounds, xmin: -10, ymin: -10, xmax: 10, ymax: 10}
    landing: {x: 0, y: 0, heading: NORTH}
    program: "ffrff"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import os
import random

import yaml

from telemetry.logger import TelemetryLogger

from .builder import RoverBuilder
from .direction import Direction
from .operations import (
    Operation,
    compose,
    move_backward,
    move_forward,
    rotate_left,
    rotate_right,
)
from .rover import Rover
from .sensors import BlockedCellsSensor, BoundsSensor, Sensor, TerrainSensor
from .world import TerrainMap


_ATOMIC_OPERATIONS = {
    "forward": move_forward,
    "f": move_forward,
    "backward": move_backward,
    "b": move_backward,
    "left": rotate_left,
    "l": rotate_left,
    "right": rotate_right,
    "r": rotate_right,
}


def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def parse_operation(value: Any) -> Operation:
    """Turn an operation name, or a nested list of them, into an Operation."""
    if isinstance(value, str):
        factory = _ATOMIC_OPERATIONS.get(value.strip().lower())
        if factory is None:
            raise ValueError(
                f"Unknown operation: {value!r}. Available: {sorted(set(_ATOMIC_OPERATIONS))}"
            )
        return factory()
    if isinstance(value, list):
        return compose(parse_operation(child) for child in value)
    raise ValueError(f"Operation must be a name or a list, got {value!r}")


def make_sensor(entry: Dict[str, Any], base_dir: str = ".") -> Sensor:
    """Instantiate a sensor from its config entry.

    Relative map paths are resolved against ``base_dir``. A terrain entry
    without ``map`` generates random obstacles from ``width``, ``height``,
    ``density`` and optional ``origin``, ``seed`` and ``keep_clear``.
    """
    kind = entry["type"]
    if kind == "terrain":
        if "map" in entry:
            map_path = entry["map"]
            if not os.path.isabs(map_path):
                map_path = os.path.join(base_dir, map_path)
            return TerrainSensor(TerrainMap.from_map_file(map_path))
        origin = entry.get("origin", [0, 0])
        terrain = TerrainMap(
            width=int(entry["width"]),
            height=int(entry["height"]),
            origin=(int(origin[0]), int(origin[1])),
        )
        terrain.generate_random_obstacles(
            float(entry["density"]),
            random.Random(entry.get("seed")),
            keep_clear=[(int(c[0]), int(c[1])) for c in entry.get("keep_clear", [])],
        )
        return TerrainSensor(terrain)
    if kind == "bounds":
        return BoundsSensor(
            xmin=int(entry["xmin"]),
            ymin=int(entry["ymin"]),
            xmax=int(entry["xmax"]),
            ymax=int(entry["ymax"]),
        )
    if kind == "blocked_cells":
        return BlockedCellsSensor((int(c[0]), int(c[1])) for c in entry["cells"])
    raise ValueError(f"Unknown sensor type: {kind!r}")


@dataclass
class LandingConfig:
    x: int
    y: int
    heading: Direction


@dataclass
class MissionConfig:
    """Parsed mission file."""

    commands: Dict[str, Operation]
    sensors: List[Sensor] = field(default_factory=list)
    landing: Optional[LandingConfig] = None
    program: str = ""
    telemetry_path: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_dir: str = ".") -> "MissionConfig":
        commands = {str(key): parse_operation(value) for key, value in data["commands"].items()}
        sensors = [make_sensor(s, base_dir=base_dir) for s in data.get("sensors", [])]

        landing = None
        landing_cfg = data.get("landing")
        if landing_cfg is not None:
            landing = LandingConfig(
                x=int(landing_cfg["x"]),
                y=int(landing_cfg["y"]),
                heading=Direction.from_name(str(landing_cfg["heading"])),
            )

        telemetry_cfg = data.get("telemetry") or {}
        return cls(
            commands=commands,
            sensors=sensors,
            landing=landing,
            program=str(data.get("program", "")),
            telemetry_path=telemetry_cfg.get("path"),
        )


def load_mission_config(path: str) -> MissionConfig:
    """Load a mission YAML file; relative paths inside it are relative to the file."""
    data = load_yaml(path)
    return MissionConfig.from_dict(data, base_dir=os.path.dirname(os.path.abspath(path)))


def build_rover(config: MissionConfig, telemetry: Optional[TelemetryLogger] = None) -> Rover:
    """Assemble a rover from a mission config (not landed)."""
    builder = RoverBuilder().with_telemetry(telemetry)
    for key, operation in config.commands.items():
        builder.program_command(key, operation)
    for sensor in config.sensors:
        builder.add_sensor(sensor)
    return builder.build()
