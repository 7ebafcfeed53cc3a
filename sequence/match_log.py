# sequence/match_log.py
from __future__ import annotations

import json
import os
import time
from typing import Any, Dict


class JSONLLogger:
    """Append-only JSON Lines writer; one object per accepted move."""

    def __init__(self, path: str):
        self.path = path
        parent = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(parent, exist_ok=True)
        self._fh = open(self.path, "a", encoding="utf-8")

    def log(self, step: int, payload: Dict[str, Any]) -> None:
        out = {"step": int(step), "ts": int(time.time()), **payload}
        self._fh.write(json.dumps(out, ensure_ascii=False) + "\n")
        self._fh.flush()

    @property
    def closed(self) -> bool:
        return self._fh.closed

    def close(self) -> None:
        if not self._fh.closed:
            self._fh.close()

    def __enter__(self) -> "JSONLLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
