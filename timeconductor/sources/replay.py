# timeconductor/sources/replay.py
from __future__ import annotations

from typing import Optional

from timeconductor.core.time import ReplayClock
from timeconductor.core.types import REPLAY_MODE, TickSourceMetadata
from timeconductor.sources.base import BaseTickSource
from timeconductor.utils.logger import logs


class ReplayTickSource(BaseTickSource):
    """
    Replays historical time from a ReplayClock.

    Contract:
    - play() emits clock timestamps in order, synchronously
    - play(limit=n) stops after n ticks
    - every play() starts again from clock.start_ms
    """

    def __init__(
        self,
        clock: ReplayClock,
        metadata: Optional[TickSourceMetadata] = None,
    ):
        super().__init__(
            metadata
            or TickSourceMetadata(key="replay", mode=REPLAY_MODE, name="Replay")
        )
        self.clock = clock

    def play(self, limit: Optional[int] = None) -> int:
        delivered = 0
        for ts in self.clock:
            if limit is not None and delivered >= limit:
                break
            self.emit(ts)
            delivered += 1

        logs.debug(f"[ReplayTickSource] delivered {delivered} ticks")
        return delivered
