from __future__ import annotations

import argparse
import time
from dataclasses import dataclass
from typing import Any

import matplotlib.pyplot as plt
import pandas as pd
import streamlit as st

from telemetry.analysis import load_telemetry, summarize_mission


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        "--log-path",
        type=str,
        default="telemetry_logs/mission.jsonl",
        help="Path to telemetry JSONL log file.",
    )
    return parser.parse_args()


@dataclass
class DashboardSlots:
    """Placeholders created once and overwritten on every refresh."""

    status: Any
    path_fig: Any
    stats: Any
    rover: Any


def draw_dashboard(df: pd.DataFrame, slots: DashboardSlots, log_path: str) -> bool:
    """Redraw every panel from ``df``. Returns False when there is no pose yet."""
    if df.empty:
        slots.status.info(f"Waiting for telemetry at '{log_path}'...")
        return False

    summary = summarize_mission(df)
    final = summary["final"]
    if final is None:
        slots.status.info(f"No rover pose in '{log_path}' yet...")
        return False

    slots.status.success(f"Streaming from '{log_path}' ({len(df)} records)")

    with slots.rover.container():
        st.subheader("Rover State")
        st.write(f"({final['x']}, {final['y']}) {final['heading']}")
        if final["stopped"]:
            st.warning("stopped")

    with slots.path_fig.container():
        fig, ax = plt.subplots()
        ax.plot(df["x"], df["y"], "-o", markersize=3, label="Path")
        blocked = df[(df["event"] == "command") & df["stopped"].fillna(False).astype(bool)]
        if not blocked.empty:
            ax.scatter(blocked["x"], blocked["y"], c="r", marker="x", label="Blocked")
        ax.scatter([final["x"]], [final["y"]], c="b", label="Rover")
        ax.set_aspect("equal", adjustable="box")
        ax.grid(True)
        ax.set_xlabel("x [cells]")
        ax.set_ylabel("y [cells]")
        ax.set_title("Rover Path")
        ax.legend(loc="upper right")
        slots.path_fig.pyplot(fig)
        plt.close(fig)

    slots.stats.text(
        "Mission stats:\n"
        f"- Landings: {summary['landings']}\n"
        f"- Commands: {summary['commands']}\n"
        f"- Blocked moves: {summary['blocked']}\n"
        f"- Unknown commands: {summary['unknown_commands']}\n"
    )
    return True


def main() -> None:
    args = parse_args()

    st.set_page_config(page_title="Rover Mission Telemetry", layout="wide")
    st.title("Rover Mission Telemetry")

    slots = DashboardSlots(
        status=st.empty(),
        path_fig=st.empty(),
        stats=st.empty(),
        rover=st.sidebar.empty(),
    )
    refresh_interval = st.sidebar.slider("Refresh interval (s)", 0.5, 5.0, 1.0, 0.5)

    while True:
        draw_dashboard(load_telemetry(args.log_path), slots, args.log_path)
        time.sleep(refresh_interval)


if __name__ == "__main__":
    main()
