# timeconductor/sources/local_clock.py
from __future__ import annotations

import time
from typing import Callable, Optional

from timeconductor.core.types import REALTIME_MODE, TickSourceMetadata
from timeconductor.sources.base import BaseTickSource


def wall_clock_ms() -> float:
    return time.time() * 1000


class LocalClockTickSource(BaseTickSource):
    """
    Realtime tick source backed by the local wall clock (epoch ms).

    The caller owns the cadence: every tick() reads the clock once and
    delivers that value to all listeners.
    """

    def __init__(
        self,
        clock: Callable[[], float] = wall_clock_ms,
        metadata: Optional[TickSourceMetadata] = None,
    ):
        super().__init__(
            metadata
            or TickSourceMetadata(key="local", mode=REALTIME_MODE, name="Local clock")
        )
        self._clock = clock

    def tick(self) -> float:
        now = self._clock()
        self.emit(now)
        return now
