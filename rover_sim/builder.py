from __future__ import annotations

from typing import Dict, List, Optional

from telemetry.logger import TelemetryLogger

from .operations import Operation
from .rover import Rover
from .sensors import Sensor


class RoverBuilder:
    """Collects a command table and sensors, then builds rovers.

    Every ``build()`` snapshots the collected table and sensor list, so
    rovers already built are not affected by later calls on the builder.
    """

    def __init__(self) -> None:
        self._operations: Dict[str, Operation] = {}
        self._sensors: List[Sensor] = []
        self._telemetry: Optional[TelemetryLogger] = None

    def program_command(self, key: str, operation: Operation) -> "RoverBuilder":
        """Bind a single command character to an operation (last binding wins)."""
        if not isinstance(key, str) or len(key) != 1:
            raise ValueError(f"Command key must be a single character, got {key!r}")
        self._operations[key] = operation
        return self

    def add_sensor(self, sensor: Sensor) -> "RoverBuilder":
        self._sensors.append(sensor)
        return self

    def with_telemetry(self, telemetry: Optional[TelemetryLogger]) -> "RoverBuilder":
        self._telemetry = telemetry
        return self

    def build(self) -> Rover:
        return Rover(
            operations=dict(self._operations),
            sensors=list(self._sensors),
            telemetry=self._telemetry,
        )
