"""
Top-level package for the grid rover command engine.

Components:
- direction: cardinal headings and rotation algebra
- state: immutable rover state and move/rotate transitions
- sensors: safety sensors consulted before every move
- world: numpy-backed terrain map feeding the terrain sensor
- operations: atomic moves/rotations and composite commands
- rover: command execution
- builder: rover assembly from a command table and sensors
- config: YAML mission configuration
"""

from .direction import Direction, rotate, heading_name
from .state import State, compute_move, compute_rotate
from .sensors import (
    Sensor,
    TerrainSensor,
    BoundsSensor,
    BlockedCellsSensor,
    CallableSensor,
)
from .world import TerrainMap
from .operations import (
    Operation,
    MoveForward,
    MoveBackward,
    RotateLeft,
    RotateRight,
    Compose,
    execute_operation,
    move_forward,
    move_backward,
    rotate_left,
    rotate_right,
    compose,
)
from .rover import Rover, RoverNotLanded
from .builder import RoverBuilder

__all__ = [
    "Direction",
    "rotate",
    "heading_name",
    "State",
    "compute_move",
    "compute_rotate",
    "Sensor",
    "TerrainSensor",
    "BoundsSensor",
    "BlockedCellsSensor",
    "CallableSensor",
    "TerrainMap",
    "Operation",
    "MoveForward",
    "MoveBackward",
    "RotateLeft",
    "RotateRight",
    "Compose",
    "execute_operation",
    "move_forward",
    "move_backward",
    "rotate_left",
    "rotate_right",
    "compose",
    "Rover",
    "RoverNotLanded",
    "RoverBuilder",
]
