from __future__ import annotations

import json
import os
from typing import Any, Dict, List

import pandas as pd


def load_telemetry(path: str, max_rows: int = 2000) -> pd.DataFrame:
    """Load the last ``max_rows`` records of a telemetry JSONL file.

    Missing files and malformed lines yield an empty frame / are skipped, so
    a log that is still being written can be polled safely.
    """
    if not os.path.exists(path):
        return pd.DataFrame()
    records: List[Dict[str, Any]] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError:
                continue
    if not records:
        return pd.DataFrame()
    df = pd.json_normalize(records)
    return df.tail(max_rows).reset_index(drop=True)


def summarize_mission(df: pd.DataFrame) -> Dict[str, Any]:
    """Aggregate counts and the final pose from a telemetry frame."""
    if df.empty:
        return {
            "landings": 0,
            "commands": 0,
            "blocked": 0,
            "unknown_commands": 0,
            "final": None,
        }

    events = df["event"]
    commands = df[events == "command"]
    blocked = int(commands["stopped"].fillna(False).astype(bool).sum()) if not commands.empty else 0

    # Records without a pose (e.g. free-form notes) do not move the rover
    final = None
    if "x" in df.columns and "y" in df.columns:
        positioned = df.dropna(subset=["x", "y"])
        if not positioned.empty:
            last = positioned.iloc[-1]
            final = {
                "x": int(last["x"]),
                "y": int(last["y"]),
                "heading": str(last["heading"]),
                "stopped": bool(last["stopped"]),
            }

    return {
        "landings": int((events == "land").sum()),
        "commands": int(len(commands)),
        "blocked": blocked,
        "unknown_commands": int((events == "unknown_command").sum()),
        "final": final,
    }
