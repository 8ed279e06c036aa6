"""Per-client visit history over a trailing window."""
from __future__ import annotations

import time
from threading import Lock
from typing import Callable, Dict, List, Protocol


class VisitorLog(Protocol):
    """Storage for client visits consulted by the jail."""

    def record(self, client_id: str) -> None:
        ...

    def count_since(self, client_id: str, cutoff: float) -> int:
        ...


class VisitLedger:
    """Thread-safe in-memory visitor log.

    ``count_since`` prunes as it counts: only visits at or after ``cutoff`` are
    kept for the client, so history never grows beyond the freshest window.
    Callers must query with a cutoff that never moves backwards for a client,
    pruned visits cannot be recovered.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._visits: Dict[str, List[float]] = {}
        self._lock = Lock()

    def record(self, client_id: str) -> None:
        with self._lock:
            self._visits.setdefault(client_id, []).append(self._clock())

    def count_since(self, client_id: str, cutoff: float) -> int:
        with self._lock:
            fresh = [visit for visit in self._visits.get(client_id, []) if visit >= cutoff]
            if fresh:
                self._visits[client_id] = fresh
            else:
                self._visits.pop(client_id, None)
            return len(fresh)

    def clear(self) -> None:
        with self._lock:
            self._visits.clear()
