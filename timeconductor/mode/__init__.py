from .controller import ModeController, supports_mode
from .registry import available_modes, get_mode, register_mode

__all__ = [
    "ModeController",
    "supports_mode",
    "available_modes",
    "get_mode",
    "register_mode",
]
