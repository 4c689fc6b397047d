from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# timeconductor/core/types.py

FIXED_MODE = "fixed"
REALTIME_MODE = "realtime"
REPLAY_MODE = "replay"


# -------------------------
# Mode
# -------------------------
@dataclass(frozen=True)
class ModeDescriptor:
    key: str
    name: str = ""
    description: str = ""

    @property
    def is_fixed(self) -> bool:
        return self.key == FIXED_MODE


# -------------------------
# Window
# -------------------------
@dataclass(frozen=True)
class Bounds:
    """
    Concrete visible window, in the unit of the active time system.

    start <= end is expected but not enforced.
    """
    start: float
    end: float

    @property
    def duration(self) -> float:
        return self.end - self.start

    @property
    def center(self) -> float:
        return self.start + self.duration / 2


@dataclass(frozen=True)
class Deltas:
    """
    Backward (start) / forward (end) extent around a pivot time.
    Both >= 0 by convention.
    """
    start: float
    end: float = 0.0


@dataclass(frozen=True)
class TimeSystemDefaults:
    bounds: Bounds
    deltas: Deltas


ZERO_DEFAULTS = TimeSystemDefaults(
    bounds=Bounds(start=0, end=0),
    deltas=Deltas(start=0, end=0),
)


@dataclass(frozen=True)
class Zoom:
    """
    Result of a zoom calculation.

    deltas is None when no tick source drives the window.
    """
    bounds: Bounds
    deltas: Optional[Deltas] = None


# -------------------------
# Catalog metadata
# -------------------------
@dataclass(frozen=True)
class TimeSystemMetadata:
    key: str
    name: str = ""


@dataclass(frozen=True)
class TickSourceMetadata:
    key: str
    mode: str
    name: str = ""
