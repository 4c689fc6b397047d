#!filepath: timeconductor/mode/controller.py
from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from timeconductor.core.bounds import (
    bounds_around_center,
    bounds_from_deltas,
    bounds_from_tick,
)
from timeconductor.core.interfaces import (
    TIME_SYSTEM_EVENT,
    Conductor,
    TickSource,
    TimeSystem,
)
from timeconductor.core.types import (
    ZERO_DEFAULTS,
    Bounds,
    Deltas,
    ModeDescriptor,
    Zoom,
)
from timeconductor.utils.logger import logs


def _tick_sources_of(time_system: TimeSystem) -> Sequence[TickSource]:
    return time_system.tick_sources() or ()


def supports_mode(time_system: TimeSystem, mode_key: str) -> bool:
    """True if at least one tick source of `time_system` runs in `mode_key`."""
    return any(
        source.metadata.mode == mode_key
        for source in _tick_sources_of(time_system)
    )


class ModeController:
    """
    ModeController (mode-specific time conductor behavior)

    Contract:
    - available time systems are computed once, at construction;
      fixed mode accepts the whole catalog
    - available tick sources always belong to the conductor's current
      time system, filtered to this mode
    - at most one live tick-source subscription; a new one always
      releases the previous one first
    - exactly one "timeSystem" registration on the conductor between
      construction and destroy()
    - never raises: missing defaults / tick sources / deltas degrade to
      zero values or None
    """

    def __init__(
        self,
        mode: ModeDescriptor,
        conductor: Conductor,
        time_systems: Sequence[TimeSystem],
    ):
        self.conductor = conductor
        self._mode = mode

        self._deltas: Optional[Deltas] = None
        self._tick_source: Optional[TickSource] = None
        self._tick_unsubscribe: Optional[Callable[[], object]] = None
        self._available_sources: List[TickSource] = []

        if mode.is_fixed:
            # fixed mode supports every time system
            self._available_systems: List[TimeSystem] = list(time_systems)
        else:
            self._available_systems = [
                ts for ts in time_systems if supports_mode(ts, mode.key)
            ]

        # stored once; register and unregister see the same handler objects
        self._on_time_system = self.change_time_system
        self._on_tick = self.tick

        current = conductor.get_time_system()
        if current is not None:
            self.change_time_system(current)

        self._time_system_subscription = conductor.on(
            TIME_SYSTEM_EVENT, self._on_time_system
        )

        logs.debug(
            f"[ModeController] mode={mode.key} "
            f"time_systems={len(self._available_systems)}/{len(time_systems)}"
        )

    # ---------------------------------------------------------
    # Mode / catalog
    # ---------------------------------------------------------
    def metadata(self) -> ModeDescriptor:
        return self._mode

    def available_time_systems(self) -> List[TimeSystem]:
        return self._available_systems

    def available_tick_sources(self, time_system: Optional[TimeSystem] = None) -> List[TickSource]:
        """
        Tick sources of the current time system usable in this mode.

        `time_system` is ignored: the list is only refreshed by
        change_time_system().
        """
        return self._available_sources

    # ---------------------------------------------------------
    # Time system
    # ---------------------------------------------------------
    def change_time_system(self, time_system: TimeSystem) -> None:
        """
        Reset the window and the live wiring for `time_system`.

        Deltas and tick sources do not carry across time systems
        (different units / epochs).
        """
        defaults = time_system.defaults() or ZERO_DEFAULTS

        self.conductor.set_bounds(defaults.bounds)
        self.set_deltas(defaults.deltas)

        key = self._mode.key
        self._available_sources = [
            source
            for source in _tick_sources_of(time_system)
            if source.metadata.mode == key
        ]

        logs.info(
            f"[ModeController] {key}: time system -> {time_system.metadata.key}, "
            f"{len(self._available_sources)} tick source(s)"
        )

        sources = self.available_tick_sources(time_system)
        self.set_tick_source(sources[0] if sources else None)

    # ---------------------------------------------------------
    # Tick source
    # ---------------------------------------------------------
    def get_tick_source(self) -> Optional[TickSource]:
        return self._tick_source

    def set_tick_source(self, tick_source: Optional[TickSource]) -> Optional[TickSource]:
        """
        Switch the live subscription to `tick_source` (None stops following).
        """
        if self._tick_unsubscribe is not None:
            self._tick_unsubscribe()
            self._tick_unsubscribe = None

        self._tick_source = tick_source

        if tick_source is not None:
            self._tick_unsubscribe = tick_source.listen(self._on_tick)
            self.conductor.set_follow(True)
            logs.debug(f"[ModeController] following {tick_source.metadata.key}")
        else:
            self.conductor.set_follow(False)

        return self._tick_source

    def tick(self, time: float) -> None:
        self.conductor.set_bounds(bounds_from_tick(time, self._deltas))

    # ---------------------------------------------------------
    # Deltas
    # ---------------------------------------------------------
    def get_deltas(self) -> Optional[Deltas]:
        return self._deltas

    def set_deltas(self, deltas: Deltas) -> Deltas:
        """
        Store new deltas and, outside fixed mode, push the matching bounds.

        Bounds are computed BEFORE the store: the pivot is recovered with the
        old deltas.
        """
        bounds = self.calculate_bounds_from_deltas(deltas)
        self._deltas = deltas

        if not self._mode.is_fixed:
            self.conductor.set_bounds(bounds)

        return self._deltas

    def calculate_bounds_from_deltas(self, deltas: Deltas) -> Bounds:
        return bounds_from_deltas(self.conductor.get_bounds(), self._deltas, deltas)

    # ---------------------------------------------------------
    # Zoom
    # ---------------------------------------------------------
    def calculate_zoom(self, time_span: float) -> Zoom:
        """
        Bounds (and deltas, when following a tick source) for a window of
        `time_span`. Nothing is applied.

        - following: only the backward delta changes; "now" stays the pivot
        - not following: the current window is resized around its center
        """
        if self._tick_source is not None:
            end = self._deltas.end if self._deltas is not None else 0
            deltas = Deltas(start=time_span, end=end)
            return Zoom(bounds=self.calculate_bounds_from_deltas(deltas), deltas=deltas)

        return Zoom(bounds=bounds_around_center(self.conductor.get_bounds(), time_span))

    # ---------------------------------------------------------
    # Lifecycle
    # ---------------------------------------------------------
    def destroy(self) -> None:
        released = self._time_system_subscription.cancel()

        if self._tick_unsubscribe is not None:
            self._tick_unsubscribe()
            self._tick_unsubscribe = None

        if released:
            logs.debug(f"[ModeController] {self._mode.key} destroyed")

    def __repr__(self) -> str:
        return (
            f"ModeController(mode={self._mode.key!r}, "
            f"tick_source={self._tick_source!r}, deltas={self._deltas!r})"
        )
