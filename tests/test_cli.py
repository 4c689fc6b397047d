#!filepath: tests/test_cli.py
import pytest
import yaml
from typer.testing import CliRunner

from timeconductor import __version__
from timeconductor.cli import app

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path):
    def _write(mode: str = "fixed"):
        data = {
            "log": {"dir": None, "level": "WARNING"},
            "conductor": {"mode": mode, "time_system": "utc", "window_ms": 1000},
            "replay": {"start_ms": 0, "end_ms": 5000, "step_ms": 1000},
        }
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return str(path)

    return _write


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_modes_lists_every_mode(config_file):
    result = runner.invoke(app, ["modes", "--config", config_file()])

    assert result.exit_code == 0
    for key in ("fixed", "realtime", "replay"):
        assert key in result.output


def test_replay_prints_bounds_per_tick(config_file):
    result = runner.invoke(app, ["replay", "--limit", "3", "--config", config_file()])

    assert result.exit_code == 0
    assert "-1000 -> 0" in result.output
    assert "1000 -> 2000" in result.output
    assert "3 ticks replayed" in result.output


def test_replay_whole_range(config_file):
    result = runner.invoke(app, ["replay", "--config", config_file("realtime")])

    assert result.exit_code == 0
    assert "6 ticks replayed" in result.output


def test_missing_config_exits_cleanly():
    result = runner.invoke(app, ["replay", "--config", "/nonexistent/config.yaml"])

    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_unknown_mode_exits_cleanly(config_file):
    result = runner.invoke(app, ["modes", "--config", config_file("warp")])

    assert result.exit_code == 1
    assert "warp" in result.output
