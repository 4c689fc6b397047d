# tests/conftest.py
from __future__ import annotations

from typing import Callable, List, Optional, Sequence

import pytest
from loguru import logger

from timeconductor.conductor.time_conductor import TimeConductor
from timeconductor.config.app_config import MODE_ENV_VAR
from timeconductor.core.interfaces import TickSource, TimeSystem
from timeconductor.core.types import (
    Bounds,
    TickSourceMetadata,
    TimeSystemDefaults,
    TimeSystemMetadata,
)


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture(autouse=True)
def _clear_mode_env(monkeypatch):
    monkeypatch.delenv(MODE_ENV_VAR, raising=False)


# =============================================================================
# Recording collaborators
# =============================================================================

class RecordingTickSource(TickSource):
    """
    Tick source whose listen() returns a plain unsubscribe function.

    Records every listen / unsubscribe so tests can count live subscriptions.
    """

    def __init__(self, key: str, mode: str):
        self.metadata = TickSourceMetadata(key=key, mode=mode)
        self.callbacks: List[Callable[[float], None]] = []
        self.listen_calls = 0
        self.unsubscribe_calls = 0

    def listen(self, callback):
        self.callbacks.append(callback)
        self.listen_calls += 1

        def _unsubscribe():
            self.unsubscribe_calls += 1
            self.callbacks.remove(callback)

        return _unsubscribe

    def emit(self, time: float) -> None:
        for cb in list(self.callbacks):
            cb(time)

    def __repr__(self) -> str:
        return f"RecordingTickSource({self.metadata.key!r})"


class StubTimeSystem(TimeSystem):
    def __init__(
        self,
        key: str,
        tick_sources: Optional[Sequence[TickSource]] = (),
        defaults: Optional[TimeSystemDefaults] = None,
    ):
        self.metadata = TimeSystemMetadata(key=key)
        self._tick_sources = tick_sources
        self._defaults = defaults

    def tick_sources(self):
        return self._tick_sources

    def defaults(self):
        return self._defaults

    def __repr__(self) -> str:
        return f"StubTimeSystem({self.metadata.key!r})"


class RecordingConductor(TimeConductor):
    def __init__(self, bounds: Optional[Bounds] = None, time_system: Optional[TimeSystem] = None):
        super().__init__(bounds=bounds, time_system=time_system)
        self.bounds_history: List[Bounds] = []
        self.follow_calls: List[bool] = []

    def set_bounds(self, bounds: Bounds) -> None:
        self.bounds_history.append(bounds)
        super().set_bounds(bounds)

    def set_follow(self, follow: bool) -> None:
        self.follow_calls.append(follow)
        super().set_follow(follow)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def make_tick_source():
    """
    Usage:
        src = make_tick_source("local", "realtime")
    """

    def _make(key: str, mode: str) -> RecordingTickSource:
        return RecordingTickSource(key, mode)

    return _make


@pytest.fixture
def make_time_system():
    """
    Usage:
        ts = make_time_system("utc", [src], defaults=TimeSystemDefaults(...))
        ts = make_time_system("sclk", None)    # tick_sources() -> None
    """

    def _make(key: str, tick_sources=(), defaults: Optional[TimeSystemDefaults] = None) -> StubTimeSystem:
        return StubTimeSystem(key, tick_sources, defaults)

    return _make


@pytest.fixture
def make_conductor():
    def _make(bounds: Optional[Bounds] = None, time_system: Optional[TimeSystem] = None) -> RecordingConductor:
        return RecordingConductor(bounds=bounds, time_system=time_system)

    return _make


@pytest.fixture
def conductor(make_conductor) -> RecordingConductor:
    return make_conductor()
