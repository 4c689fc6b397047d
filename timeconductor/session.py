#!filepath: timeconductor/session.py
from __future__ import annotations

from typing import Callable, List, Optional

from timeconductor.conductor.time_conductor import TimeConductor, validate_bounds
from timeconductor.config.app_config import AppConfig
from timeconductor.core.interfaces import TimeSystem
from timeconductor.core.time import ReplayClock
from timeconductor.core.types import Bounds, Zoom
from timeconductor.mode.controller import ModeController
from timeconductor.mode.registry import get_mode
from timeconductor.sources.local_clock import LocalClockTickSource, wall_clock_ms
from timeconductor.sources.replay import ReplayTickSource
from timeconductor.systems.utc import UTCTimeSystem
from timeconductor.utils.errors import InvalidBoundsError, UnknownTimeSystemError
from timeconductor.utils.logger import logs


class ConductorSession:
    """
    ConductorSession = one conductor + its catalog + the active mode

    Design principles:
    - built once from AppConfig
    - exactly one ModeController listens to the conductor at a time;
      select_mode() destroys the old one before creating the next
    - window changes from the outside go through zoom() / apply_bounds()
    """

    def __init__(self, cfg: AppConfig, clock: Callable[[], float] = wall_clock_ms):
        self.cfg = cfg

        self.local_clock = LocalClockTickSource(clock=clock)
        self.replay = ReplayTickSource(
            ReplayClock(
                start_ms=cfg.replay.start_ms,
                end_ms=cfg.replay.end_ms,
                step_ms=cfg.replay.step_ms,
            )
        )
        self.catalog: List[TimeSystem] = [
            UTCTimeSystem(
                tick_sources=[self.local_clock, self.replay],
                window_ms=cfg.conductor.window_ms,
                clock=clock,
            )
        ]

        self.conductor = TimeConductor()
        self.controller: Optional[ModeController] = None

        # no controller yet: the first one picks this up at construction
        self.conductor.set_time_system(self.find_time_system(cfg.conductor.time_system))
        self.select_mode(cfg.conductor.mode)

    # ---------------------------------------------------------
    # Catalog
    # ---------------------------------------------------------
    def find_time_system(self, key: str) -> TimeSystem:
        for ts in self.catalog:
            if ts.metadata.key == key:
                return ts
        raise UnknownTimeSystemError(
            f"Time system not found: {key!r} "
            f"(known: {', '.join(ts.metadata.key for ts in self.catalog)})"
        )

    # ---------------------------------------------------------
    # Mode
    # ---------------------------------------------------------
    def select_mode(self, key: str) -> ModeController:
        mode = get_mode(key)

        if self.controller is not None:
            self.controller.destroy()

        self.controller = ModeController(mode, self.conductor, self.catalog)
        logs.info(f"[ConductorSession] mode -> {mode.key}")

        available = self.controller.available_time_systems()
        if available and self.conductor.get_time_system() not in available:
            self.conductor.set_time_system(available[0])

        return self.controller

    # ---------------------------------------------------------
    # Window
    # ---------------------------------------------------------
    def zoom(self, time_span: float) -> Zoom:
        zoom = self.controller.calculate_zoom(time_span)
        if zoom.deltas is not None:
            self.controller.set_deltas(zoom.deltas)
        else:
            self.conductor.set_bounds(zoom.bounds)
        return zoom

    def apply_bounds(self, bounds: Bounds) -> None:
        """User-edited bounds (fixed windows)."""
        error = validate_bounds(bounds)
        if error:
            raise InvalidBoundsError(f"{error}: {bounds}")
        self.conductor.set_bounds(bounds)

    # ---------------------------------------------------------
    # Lifecycle
    # ---------------------------------------------------------
    def close(self) -> None:
        if self.controller is not None:
            self.controller.destroy()
            self.controller = None
