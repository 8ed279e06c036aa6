"""Cooloff sentences keyed by client identifier."""
from __future__ import annotations

import time
from threading import Lock
from typing import Callable, Dict


class SentenceBoard:
    """Thread-safe map of client ids to cooloff expiry timestamps.

    Expired sentences stay in the map until overwritten or until
    :meth:`purge_expired` is called explicitly.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._release: Dict[str, float] = {}
        self._lock = Lock()

    def is_sentenced(self, client_id: str) -> bool:
        with self._lock:
            release = self._release.get(client_id)
            return release is not None and release > self._clock()

    def impose(self, client_id: str, cooloff: float) -> float:
        """Set the client's release time to now + ``cooloff`` and return it."""

        with self._lock:
            release = self._clock() + cooloff
            self._release[client_id] = release
            return release

    def release_at(self, client_id: str) -> float | None:
        with self._lock:
            return self._release.get(client_id)

    def purge_expired(self) -> int:
        """Drop sentences that have run out; returns how many were removed."""

        with self._lock:
            now = self._clock()
            expired = [key for key, release in self._release.items() if release <= now]
            for key in expired:
                del self._release[key]
            return len(expired)
