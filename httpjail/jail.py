"""Admission decisions: sliding-window counting plus cooloff sentences."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .sentences import SentenceBoard
from .visits import VisitLedger, VisitorLog

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class JailConfig:
    """Jail limits. Durations are in seconds; values are not validated."""

    allowed_requests: int
    window: float
    cooloff: float = 0
    proxied: bool = False
    silent: bool = False


@dataclass(frozen=True)
class Decision:
    admitted: bool
    silent: bool = False

    @classmethod
    def admit(cls) -> "Decision":
        return cls(admitted=True)

    @classmethod
    def deny(cls, silent: bool = False) -> "Decision":
        return cls(admitted=False, silent=silent)


class Jail:
    """Tracks visits per client and sentences those that exceed the limit.

    Up to ``allowed_requests`` visits inside the trailing window are admitted.
    The next one sentences the client for ``cooloff`` seconds, and every visit
    made while sentenced restarts the cooloff from that visit.

    The sentence check and the window count are not performed atomically, so
    concurrent requests from one client may all be admitted at the threshold.
    """

    def __init__(
        self,
        config: JailConfig,
        visitors: Optional[VisitorLog] = None,
        sentences: Optional[SentenceBoard] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.config = config
        self._clock = clock
        self._visitors = visitors if visitors is not None else VisitLedger(clock)
        self._sentences = sentences if sentences is not None else SentenceBoard(clock)

    @classmethod
    def basic(
        cls,
        window_seconds: int,
        allowed_requests: int,
        silent: bool = False,
        clock: Callable[[], float] = time.time,
    ) -> "Jail":
        """Build a jail without cooloff backed by the default visit ledger."""

        config = JailConfig(allowed_requests=allowed_requests, window=window_seconds, silent=silent)
        return cls(config, clock=clock)

    def release_at(self, client_id: str) -> float | None:
        """Return the stored release time for ``client_id``, expired or not."""

        return self._sentences.release_at(client_id)

    def retry_after(self, client_id: str) -> float:
        """Seconds until ``client_id`` is released, 0 when not sentenced."""

        release = self._sentences.release_at(client_id)
        if release is None:
            return 0
        return max(0.0, release - self._clock())

    def decide(self, client_id: str) -> Decision:
        """Record a visit from ``client_id`` and decide whether to let it through."""

        self._visitors.record(client_id)

        if self._sentences.is_sentenced(client_id):
            release = self._sentences.impose(client_id, self.config.cooloff)
            LOGGER.debug(
                "sentence extended", extra={"client_id": client_id, "release_at": release}
            )
            return Decision.deny(self.config.silent)

        cutoff = self._clock() - self.config.window
        count = self._visitors.count_since(client_id, cutoff)
        if count <= self.config.allowed_requests:
            return Decision.admit()

        release = self._sentences.impose(client_id, self.config.cooloff)
        LOGGER.info(
            "client sentenced",
            extra={"client_id": client_id, "release_at": release, "visits": count},
        )
        return Decision.deny(self.config.silent)
