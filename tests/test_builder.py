from __future__ import annotations

import pytest

from rover_sim.builder import RoverBuilder
from rover_sim.direction import Direction
from rover_sim.operations import move_backward, move_forward, rotate_right
from rover_sim.sensors import BlockedCellsSensor


def test_chained_calls_return_builder() -> None:
    builder = RoverBuilder()
    assert builder.program_command("f", move_forward()) is builder
    assert builder.add_sensor(BlockedCellsSensor([])) is builder


def test_build_snapshots_commands_and_sensors() -> None:
    builder = RoverBuilder().program_command("f", move_forward())
    first = builder.build()

    builder.program_command("r", rotate_right())
    builder.add_sensor(BlockedCellsSensor([(0, 1)]))
    second = builder.build()

    assert set(first.operations) == {"f"}
    assert first.sensors == ()
    assert set(second.operations) == {"f", "r"}
    assert len(second.sensors) == 1

    first.land((0, 0), Direction.NORTH)
    first.execute("f")
    assert str(first) == "(0, 1) NORTH"

    second.land((0, 0), Direction.NORTH)
    second.execute("f")
    assert str(second) == "(0, 0) NORTH stopped"


def test_rebinding_key_replaces_operation() -> None:
    rover = (
        RoverBuilder()
        .program_command("x", move_forward())
        .program_command("x", move_backward())
        .build()
    )
    rover.land((0, 0), Direction.NORTH)
    rover.execute("x")
    assert rover.state.position == (0, -1)


@pytest.mark.parametrize("key", ["", "ff", 1])
def test_rejects_non_character_keys(key: object) -> None:
    with pytest.raises(ValueError):
        RoverBuilder().program_command(key, move_forward())  # type: ignore[arg-type]
