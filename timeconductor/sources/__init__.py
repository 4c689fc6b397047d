from .base import BaseTickSource
from .local_clock import LocalClockTickSource
from .replay import ReplayTickSource

__all__ = ["BaseTickSource", "LocalClockTickSource", "ReplayTickSource"]
