# timeconductor/sources/base.py
from __future__ import annotations

from timeconductor.core.events import EventEmitter, Subscription
from timeconductor.core.interfaces import TickCallback, TickSource
from timeconductor.core.types import TickSourceMetadata

TICK_EVENT = "tick"


class BaseTickSource(TickSource):
    """
    Push-based tick source.

    Subclasses decide WHEN to emit; delivery is synchronous, in listen() order.
    """

    def __init__(self, metadata: TickSourceMetadata):
        self.metadata = metadata
        self._events = EventEmitter()

    def listen(self, callback: TickCallback) -> Subscription:
        return self._events.on(TICK_EVENT, callback)

    def listener_count(self) -> int:
        return len(self._events.listeners(TICK_EVENT))

    def emit(self, time: float) -> None:
        self._events.emit(TICK_EVENT, time)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.metadata.key!r}, mode={self.metadata.mode!r})"
