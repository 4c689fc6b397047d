from .utc import UTCTimeSystem

__all__ = ["UTCTimeSystem"]
