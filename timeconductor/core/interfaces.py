from __future__ import annotations

from typing import Callable, Optional, Sequence

from timeconductor.core.events import Subscription
from timeconductor.core.types import (
    Bounds,
    TickSourceMetadata,
    TimeSystemDefaults,
    TimeSystemMetadata,
)

# timeconductor/core/interfaces.py

TIME_SYSTEM_EVENT = "timeSystem"
BOUNDS_EVENT = "bounds"
FOLLOW_EVENT = "follow"

TickCallback = Callable[[float], None]


class TickSource:
    """
    Live feed of time values, tagged with the mode it supports.

    listen() returns a Subscription; calling it unsubscribes.
    """
    metadata: TickSourceMetadata

    def listen(self, callback: TickCallback) -> Subscription:
        raise NotImplementedError


class TimeSystem:
    """
    Unit / epoch definition for time values.

    tick_sources() may return None or an empty sequence.
    defaults() may return None.
    """
    metadata: TimeSystemMetadata

    def tick_sources(self) -> Optional[Sequence[TickSource]]:
        raise NotImplementedError

    def defaults(self) -> Optional[TimeSystemDefaults]:
        raise NotImplementedError


class Conductor:
    """
    Holder of the visible bounds, the current time system and the follow flag.
    Emits "timeSystem" with the new TimeSystem as payload.
    """

    def get_bounds(self) -> Bounds:
        raise NotImplementedError

    def set_bounds(self, bounds: Bounds) -> None:
        raise NotImplementedError

    def get_time_system(self) -> Optional[TimeSystem]:
        raise NotImplementedError

    def set_follow(self, follow: bool) -> None:
        raise NotImplementedError

    def on(self, event: str, handler: Callable) -> Subscription:
        raise NotImplementedError

    def off(self, event: str, handler: Callable) -> None:
        raise NotImplementedError
