from __future__ import annotations

import json
import os
import threading
import time
from typing import Any, Dict, Optional, TextIO


class TelemetryLogger:
    """Append-only JSONL log of rover events.

    Each call to ``log_event`` writes one JSON object per line carrying the
    event name, a sequence number and a wall-clock timestamp. Writes are
    serialized with a lock so one logger may be shared between rovers.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        self._lock = threading.Lock()
        self._seq = 0
        self._fp: Optional[TextIO] = open(self.path, "a", encoding="utf-8")

    def log_event(self, event: str, **fields: Any) -> None:
        """Append one ``event`` record with the given fields."""
        if self._fp is None:
            return
        with self._lock:
            record: Dict[str, Any] = {"event": event, "seq": self._seq, "time": time.time()}
            record.update(fields)
            self._fp.write(json.dumps(record, separators=(",", ":")) + "\n")
            self._fp.flush()
            self._seq += 1

    @property
    def closed(self) -> bool:
        return self._fp is None

    def close(self) -> None:
        if self._fp is not None:
            self._fp.close()
            self._fp = None

    def __enter__(self) -> "TelemetryLogger":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
