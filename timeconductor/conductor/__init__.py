from .time_conductor import TimeConductor, validate_bounds

__all__ = ["TimeConductor", "validate_bounds"]
