#!filepath: timeconductor/mode/registry.py
from __future__ import annotations

from typing import Dict, List

from timeconductor.core.types import (
    FIXED_MODE,
    REALTIME_MODE,
    REPLAY_MODE,
    ModeDescriptor,
)
from timeconductor.utils.errors import UnknownModeError

FIXED = ModeDescriptor(
    key=FIXED_MODE,
    name="Fixed Timespan",
    description="Query and explore data that falls between two fixed datetimes.",
)
REALTIME = ModeDescriptor(
    key=REALTIME_MODE,
    name="Real-time",
    description="Monitor real-time streaming data as it comes in. The window follows the local clock.",
)
REPLAY = ModeDescriptor(
    key=REPLAY_MODE,
    name="Replay",
    description="Step through historical data at a fixed cadence.",
)

# ------------------------------------------------------------------
# Global registry (insertion ordered)
# ------------------------------------------------------------------
_MODE_REGISTRY: Dict[str, ModeDescriptor] = {}


def register_mode(mode: ModeDescriptor) -> ModeDescriptor:
    _MODE_REGISTRY[mode.key] = mode
    return mode


def get_mode(key: str) -> ModeDescriptor:
    if key not in _MODE_REGISTRY:
        raise UnknownModeError(
            f"Mode not registered: {key!r} (known: {', '.join(_MODE_REGISTRY)})"
        )
    return _MODE_REGISTRY[key]


def available_modes() -> List[ModeDescriptor]:
    return list(_MODE_REGISTRY.values())


for _mode in (FIXED, REALTIME, REPLAY):
    register_mode(_mode)
