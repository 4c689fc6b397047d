# timeconductor/systems/utc.py
from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from timeconductor.core.interfaces import TickSource, TimeSystem
from timeconductor.core.time import MS_PER_MINUTE
from timeconductor.core.types import (
    Bounds,
    Deltas,
    TimeSystemDefaults,
    TimeSystemMetadata,
)
from timeconductor.sources.local_clock import wall_clock_ms

DEFAULT_WINDOW_MS = 15 * MS_PER_MINUTE


class UTCTimeSystem(TimeSystem):
    """
    UTC time system, values in epoch milliseconds.

    defaults():
      deltas = {start: window_ms, end: 0}
      bounds = {now - window_ms, now}   (now read from `clock` on every call)
    with_defaults=False makes defaults() return None.
    """

    def __init__(
        self,
        tick_sources: Optional[Sequence[TickSource]] = None,
        window_ms: float = DEFAULT_WINDOW_MS,
        clock: Callable[[], float] = wall_clock_ms,
        with_defaults: bool = True,
        metadata: Optional[TimeSystemMetadata] = None,
    ):
        self.metadata = metadata or TimeSystemMetadata(key="utc", name="UTC")
        self._tick_sources: List[TickSource] = list(tick_sources or [])
        self.window_ms = window_ms
        self._clock = clock
        self._with_defaults = with_defaults

    def tick_sources(self) -> List[TickSource]:
        return list(self._tick_sources)

    def defaults(self) -> Optional[TimeSystemDefaults]:
        if not self._with_defaults:
            return None

        now = self._clock()
        return TimeSystemDefaults(
            bounds=Bounds(start=now - self.window_ms, end=now),
            deltas=Deltas(start=self.window_ms, end=0),
        )

    def __repr__(self) -> str:
        return f"UTCTimeSystem(key={self.metadata.key!r}, sources={len(self._tick_sources)})"
