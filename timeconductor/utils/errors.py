# timeconductor/utils/errors.py
class TimeConductorError(RuntimeError):
    """
    Base class for errors raised at the edges of the time conductor
    (configuration, registries, conductor validation).

    ModeController itself never raises.
    """


class UserInputError(TimeConductorError):
    """
    Raised for invalid user-provided config (modes, time systems, windows).
    Should NOT print traceback.
    """


class UnknownModeError(UserInputError):
    """No mode registered under the requested key."""


class UnknownTimeSystemError(UserInputError):
    """No time system in the catalog under the requested key."""


class InvalidBoundsError(TimeConductorError, ValueError):
    """Bounds rejected by the conductor (non-finite) or by validate_bounds()."""
