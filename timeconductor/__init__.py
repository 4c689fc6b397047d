#!filepath: timeconductor/__init__.py

__version__ = "0.1.0"

from .utils.logger import Logging, logs, init_logging
from .config.app_config import AppConfig
from .core.types import (
    Bounds,
    Deltas,
    ModeDescriptor,
    TimeSystemDefaults,
    Zoom,
)
from .conductor.time_conductor import TimeConductor
from .mode.controller import ModeController
from .session import ConductorSession

__all__ = [
    "logs", "Logging", "init_logging",
    "AppConfig",
    "Bounds", "Deltas", "ModeDescriptor", "TimeSystemDefaults", "Zoom",
    "TimeConductor",
    "ModeController",
    "ConductorSession",
]
