"""JSONL telemetry logging and analysis for rover missions."""
