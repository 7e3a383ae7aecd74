from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on path when running this script directly
_script_dir = Path(__file__).resolve().parent
_project_root = _script_dir.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from rover_sim.config import build_rover, load_mission_config
from rover_sim.rover import RoverNotLanded
from telemetry.logger import TelemetryLogger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Land a rover and run a command program.")
    parser.add_argument(
        "--config",
        type=str,
        default="configs/mission.yaml",
        help="Path to mission YAML config.",
    )
    parser.add_argument(
        "--commands",
        type=str,
        default=None,
        help="Command string to execute (defaults to the config's program).",
    )
    parser.add_argument(
        "--telemetry",
        type=str,
        default=None,
        help="JSONL telemetry output path (overrides the config).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    config = load_mission_config(args.config)
    telemetry_path = args.telemetry or config.telemetry_path
    telemetry = TelemetryLogger(telemetry_path) if telemetry_path else None

    try:
        rover = build_rover(config, telemetry=telemetry)
        if config.landing is not None:
            rover.land((config.landing.x, config.landing.y), config.landing.heading)

        commands = args.commands if args.commands is not None else config.program
        try:
            rover.execute(commands)
        except RoverNotLanded as exc:
            print(f"Cannot execute commands: {exc} (no landing in {args.config})", file=sys.stderr)
            return 1

        print(rover)
        if telemetry_path:
            print(f"Telemetry written to {telemetry_path}")
    finally:
        if telemetry is not None:
            telemetry.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
