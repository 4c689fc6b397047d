#!filepath: tests/mode/test_mode_registry.py
import pytest

from timeconductor.core.types import ModeDescriptor
from timeconductor.mode import registry
from timeconductor.mode.registry import available_modes, get_mode, register_mode
from timeconductor.utils.errors import UnknownModeError, UserInputError


def test_builtin_modes_registered_in_order():
    keys = [m.key for m in available_modes()]

    assert keys[:3] == ["fixed", "realtime", "replay"]
    assert get_mode("fixed").is_fixed is True
    assert get_mode("realtime").is_fixed is False


def test_unknown_mode():
    with pytest.raises(UnknownModeError) as exc:
        get_mode("warp")

    assert isinstance(exc.value, UserInputError)
    assert "warp" in str(exc.value)


def test_register_mode(monkeypatch):
    monkeypatch.setattr(registry, "_MODE_REGISTRY", dict(registry._MODE_REGISTRY))
    latest = ModeDescriptor(key="latest", name="Latest available")

    assert register_mode(latest) is latest
    assert get_mode("latest") is latest
