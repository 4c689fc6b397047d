#!filepath: timeconductor/conductor/time_conductor.py
from __future__ import annotations

import math
from typing import Callable, Optional

from timeconductor.core.events import EventEmitter, Subscription
from timeconductor.core.interfaces import (
    BOUNDS_EVENT,
    FOLLOW_EVENT,
    TIME_SYSTEM_EVENT,
    Conductor,
    TimeSystem,
)
from timeconductor.core.types import Bounds
from timeconductor.utils.errors import InvalidBoundsError
from timeconductor.utils.logger import logs


def validate_bounds(bounds: Bounds) -> Optional[str]:
    """
    Returns an error message for bounds a user should not be allowed to
    apply, or None when they are valid.
    """
    if not (math.isfinite(bounds.start) and math.isfinite(bounds.end)):
        return "Start and end must be finite numbers"
    if bounds.start >= bounds.end:
        return "Start must be before end"
    return None


class TimeConductor(Conductor):
    """
    In-memory conductor.

    Contract:
    - set_bounds emits "bounds" with the new Bounds
    - set_time_system emits "timeSystem" with the new TimeSystem
    - set_follow emits "follow" only when the flag actually changes
    - ordering of start/end is not enforced here; use validate_bounds()
      before applying user-edited bounds
    """

    def __init__(
        self,
        bounds: Optional[Bounds] = None,
        time_system: Optional[TimeSystem] = None,
    ):
        self._bounds = bounds if bounds is not None else Bounds(start=0, end=0)
        self._time_system = time_system
        self._follow = False
        self._events = EventEmitter()

    # ---------------------------------------------------------
    # Bounds
    # ---------------------------------------------------------
    def get_bounds(self) -> Bounds:
        return self._bounds

    def set_bounds(self, bounds: Bounds) -> None:
        if not (math.isfinite(bounds.start) and math.isfinite(bounds.end)):
            raise InvalidBoundsError(f"Non-finite bounds: {bounds}")
        self._bounds = bounds
        self._events.emit(BOUNDS_EVENT, bounds)

    # ---------------------------------------------------------
    # Time system
    # ---------------------------------------------------------
    def get_time_system(self) -> Optional[TimeSystem]:
        return self._time_system

    def set_time_system(self, time_system: TimeSystem) -> None:
        self._time_system = time_system
        logs.debug(f"[TimeConductor] time system -> {time_system.metadata.key}")
        self._events.emit(TIME_SYSTEM_EVENT, time_system)

    # ---------------------------------------------------------
    # Follow
    # ---------------------------------------------------------
    def is_following(self) -> bool:
        return self._follow

    def set_follow(self, follow: bool) -> None:
        if follow == self._follow:
            return
        self._follow = follow
        self._events.emit(FOLLOW_EVENT, follow)

    # ---------------------------------------------------------
    # Events
    # ---------------------------------------------------------
    def on(self, event: str, handler: Callable) -> Subscription:
        return self._events.on(event, handler)

    def off(self, event: str, handler: Callable) -> None:
        self._events.off(event, handler)

    def listener_count(self, event: str) -> int:
        return len(self._events.listeners(event))
