from __future__ import annotations

import io
import json
import os
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, Optional

from morizo_web.config import Settings


@contextmanager
def _locked(path: str) -> Iterator[io.BufferedRandom]:
    """Open `path` for append under an exclusive flock. No locking where fcntl is unavailable."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    try:
        import fcntl
    except ImportError:  # Windows
        fcntl = None
    with open(path, "a+b") as f:
        if fcntl is not None:
            fcntl.flock(f.fileno(), fcntl.LOCK_EX)
        try:
            yield f
        finally:
            if fcntl is not None:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)


class MetricsLogger:
    """Append-only JSONL log of handled API calls and timings under DATA_DIR.

    One JSON object per line:
      - ts: ISO timestamp (UTC)
      - kind: "api_call" | "latency"
      - name: route path or timer name
      - duration_ms: float, when measured
      - extra: method / status / error and any contextual fields
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()
        self.path = os.path.join(self.settings.data_dir, self.settings.metrics_file)

    def log_api_call(
        self,
        method: str,
        path: str,
        status_code: int,
        duration_ms: Optional[float] = None,
        error: Optional[str] = None,
    ) -> None:
        extra: Dict[str, Any] = {"method": method, "status": status_code}
        if error:
            extra["error"] = error
        self._append("api_call", path, duration_ms, extra)

    def log_latency(self, name: str, duration_ms: float, extra: Optional[Dict[str, Any]] = None) -> None:
        self._append("latency", name, duration_ms, extra)

    def read_all(self) -> list[dict]:
        if not os.path.exists(self.path):
            return []
        with open(self.path, "r", encoding="utf-8") as f:
            return [json.loads(line) for line in f if line.strip()]

    def _append(
        self,
        kind: str,
        name: str,
        duration_ms: Optional[float],
        extra: Optional[Dict[str, Any]],
    ) -> None:
        entry: Dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "kind": kind,
            "name": name,
        }
        if duration_ms is not None:
            entry["duration_ms"] = float(duration_ms)
        if extra:
            entry["extra"] = extra
        line = (json.dumps(entry, ensure_ascii=False, separators=(",", ":")) + "\n").encode("utf-8")
        try:
            with _locked(self.path) as f:
                f.seek(0, os.SEEK_END)
                f.write(line)
                f.flush()
                os.fsync(f.fileno())
        except OSError:
            # Metrics should never impact user flows.
            pass
