from __future__ import annotations

import pytest

from rover_sim.builder import RoverBuilder
from rover_sim.direction import Direction
from rover_sim.operations import compose, move_backward, move_forward, rotate_left, rotate_right
from rover_sim.rover import Rover, RoverNotLanded
from rover_sim.sensors import BlockedCellsSensor, CallableSensor
from rover_sim.state import State


def _standard_builder() -> RoverBuilder:
    return (
        RoverBuilder()
        .program_command("f", move_forward())
        .program_command("b", move_backward())
        .program_command("l", rotate_left())
        .program_command("r", rotate_right())
    )


def test_execute_before_landing_raises_without_mutation() -> None:
    rover = _standard_builder().build()
    before = rover.state
    with pytest.raises(RoverNotLanded):
        rover.execute("ffr")
    assert rover.state is before
    assert rover.landed is False
    assert str(rover) == "unknown"


def test_not_landed_message() -> None:
    assert str(RoverNotLanded()) == "RoverNotLanded"


def test_land_installs_fresh_state() -> None:
    rover = _standard_builder().build()
    rover.land((5, -3), Direction.SOUTH)
    assert rover.state == State(5, -3, Direction.SOUTH, False)
    assert str(rover) == "(5, -3) SOUTH"


def test_relanding_overwrites_state() -> None:
    rover = _standard_builder().build()
    rover.land((0, 0), Direction.NORTH)
    rover.execute("ff")
    rover.land((10, 10), (-1, 0))
    assert rover.state == State(10, 10, Direction.WEST, False)


def test_land_with_non_cardinal_heading_leaves_rover_unlanded() -> None:
    rover = _standard_builder().build()
    before = rover.state
    with pytest.raises(ValueError):
        rover.land((5, 5), (1, 1))
    assert rover.landed is False
    assert rover.state is before
    with pytest.raises(RoverNotLanded):
        rover.execute("r")


def test_failed_relanding_keeps_previous_landing() -> None:
    rover = _standard_builder().build()
    rover.land((2, 3), Direction.EAST)
    with pytest.raises(ValueError):
        rover.land((0, 0), (0, 0))
    assert rover.landed is True
    assert rover.state == State(2, 3, Direction.EAST, False)


@pytest.mark.parametrize("position", [(1.5, 0), (0, 2.0), ("1", 0)])
def test_land_rejects_non_integer_position(position: tuple) -> None:
    rover = _standard_builder().build()
    with pytest.raises(TypeError):
        rover.land(position, Direction.NORTH)
    assert rover.landed is False
    assert str(rover) == "unknown"


def test_unbound_command_halts_batch() -> None:
    rover = _standard_builder().build()
    rover.land((0, 0), Direction.NORTH)
    rover.execute("ffr b")
    assert rover.state == State(0, 2, Direction.EAST, True)
    assert str(rover) == "(0, 2) EAST stopped"


def test_unbound_command_first_leaves_position() -> None:
    rover = _standard_builder().build()
    rover.land((1, 1), Direction.EAST)
    rover.execute("xff")
    assert rover.state == State(1, 1, Direction.EAST, True)


def test_execute_resets_stopped_flag() -> None:
    rover = _standard_builder().build()
    rover.land((0, 0), Direction.NORTH)
    rover.execute("?")
    assert rover.state.stopped
    rover.execute("")
    assert rover.state == State(0, 0, Direction.NORTH, False)


def test_valid_commands_continue_after_blocked_move() -> None:
    rover = _standard_builder().add_sensor(BlockedCellsSensor([(0, 1)])).build()
    rover.land((0, 0), Direction.NORTH)
    rover.execute("frf")
    # Blocked first move does not stop the batch
    assert rover.state == State(1, 0, Direction.EAST, False)


def test_last_blocked_move_leaves_rover_stopped() -> None:
    rover = _standard_builder().add_sensor(BlockedCellsSensor([(0, 2)])).build()
    rover.land((0, 0), Direction.NORTH)
    rover.execute("fff")
    assert str(rover) == "(0, 1) NORTH stopped"


def test_compose_command() -> None:
    rover = (
        _standard_builder()
        .program_command("F", compose([move_forward(), move_forward()]))
        .add_sensor(BlockedCellsSensor([(0, 1)]))
        .build()
    )
    rover.land((0, 0), Direction.NORTH)
    rover.execute("F")
    assert rover.state == State(0, 0, Direction.NORTH, True)


def test_danger_exists_any_sensor() -> None:
    safe = CallableSensor(lambda x, y: True)
    unsafe_at_origin = CallableSensor(lambda x, y: (x, y) != (0, 0))
    assert Rover({}, []).danger_exists(0, 0) is False
    assert Rover({}, [safe]).danger_exists(0, 0) is False
    assert Rover({}, [safe, unsafe_at_origin]).danger_exists(0, 0) is True
    assert Rover({}, [unsafe_at_origin, safe]).danger_exists(0, 0) is True
    assert Rover({}, [unsafe_at_origin, safe]).danger_exists(1, 0) is False


def test_rendering_stopped_west() -> None:
    rover = Rover({}, [])
    rover.land((3, -2), Direction.WEST)
    rover.execute("z")
    assert str(rover) == "(3, -2) WEST stopped"


def test_command_table_is_read_only() -> None:
    table = {"f": move_forward()}
    rover = Rover(table, [])
    table["b"] = move_backward()
    assert "b" not in rover.operations
    with pytest.raises(TypeError):
        rover.operations["b"] = move_backward()  # type: ignore[index]


def test_to_dict() -> None:
    rover = _standard_builder().build()
    rover.land((2, 2), Direction.EAST)
    assert rover.to_dict() == {
        "x": 2,
        "y": 2,
        "heading": "EAST",
        "stopped": False,
        "landed": True,
    }
