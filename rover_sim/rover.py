from __future__ import annotations

from numbers import Integral
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from telemetry.logger import TelemetryLogger

from .direction import Direction, heading_name
from .operations import Operation, execute_operation
from .sensors import Sensor
from .state import State


class RoverNotLanded(RuntimeError):
    """Raised when commands are sent to a rover that has not landed."""

    def __init__(self, message: str = "RoverNotLanded") -> None:
        super().__init__(message)


class Rover:
    """Grid rover executing single-character command strings.

    Parameters
    ----------
    operations : mapping of str to Operation
        Command table. Copied; later changes to the argument are not seen.
    sensors : iterable of Sensor
        Safety sensors consulted before every move. Copied.
    telemetry : TelemetryLogger, optional
        When given, one record is appended per landing and per command.
    """

    def __init__(
        self,
        operations: Mapping[str, Operation],
        sensors: Iterable[Sensor],
        telemetry: Optional[TelemetryLogger] = None,
    ) -> None:
        self._operations: Mapping[str, Operation] = MappingProxyType(dict(operations))
        self._sensors: Tuple[Sensor, ...] = tuple(sensors)
        self.telemetry = telemetry
        self.landed = False
        # Placeholder until landing; the zero heading renders as "unknown"
        self._state = State(x=0, y=0, heading=(0, 0), stopped=False)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> State:
        return self._state

    @state.setter
    def state(self, new_state: State) -> None:
        self._state = new_state

    @property
    def operations(self) -> Mapping[str, Operation]:
        return self._operations

    @property
    def sensors(self) -> Tuple[Sensor, ...]:
        return self._sensors

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def land(self, position: Tuple[int, int], heading: Tuple[int, int]) -> None:
        """Place the rover at ``position`` facing ``heading``.

        May be called again to re-land; the previous state is discarded.
        A failed landing (non-integer position, non-cardinal heading)
        leaves the rover untouched.
        """
        x, y = position
        if not isinstance(x, Integral) or not isinstance(y, Integral):
            raise TypeError(f"Landing position must be integer cells, got {position!r}")
        new_state = State(x=int(x), y=int(y), heading=Direction(tuple(heading)), stopped=False)
        self.landed = True
        self._state = new_state
        self._log("land")

    def execute(self, commands: Iterable[str]) -> None:
        """Run commands left to right.

        An unbound character stops the rover and discards the rest of the
        batch. Valid commands run even after an earlier one was blocked.
        """
        if not self.landed:
            raise RoverNotLanded()

        self._state = self._state.with_stopped(False)

        for key in commands:
            operation = self._operations.get(key)
            if operation is None:
                self._state = self._state.with_stopped(True)
                self._log("unknown_command", command=key)
                break
            execute_operation(operation, self)
            self._log("command", command=key)

    def danger_exists(self, x: int, y: int) -> bool:
        """True if any sensor reports (x, y) as unsafe."""
        return any(not sensor.is_safe(x, y) for sensor in self._sensors)

    # ------------------------------------------------------------------
    # Utility
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        """Serialize current rover state to a dict for logging/telemetry."""
        record = self._state.to_dict()
        record["landed"] = self.landed
        return record

    def _log(self, event: str, **fields: Any) -> None:
        if self.telemetry is None:
            return
        fields.update(self._state.to_dict())
        self.telemetry.log_event(event, **fields)

    def __str__(self) -> str:
        name = heading_name(self._state.heading)
        if name == "unknown":
            return name
        text = f"({self._state.x}, {self._state.y}) {name}"
        if self._state.stopped:
            text += " stopped"
        return text

    def __repr__(self) -> str:
        return f"Rover({self})"
