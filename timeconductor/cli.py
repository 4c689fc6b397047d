#!filepath: timeconductor/cli.py
from typing import Optional

import typer
from rich import print
from rich.console import Console
from rich.table import Table

from timeconductor import __version__
from timeconductor.config.app_config import AppConfig
from timeconductor.core.interfaces import BOUNDS_EVENT
from timeconductor.core.types import REPLAY_MODE
from timeconductor.mode.registry import available_modes
from timeconductor.session import ConductorSession
from timeconductor.utils.errors import UserInputError
from timeconductor.utils.logger import init_logging

app = typer.Typer(help="Time Conductor CLI")


def _open_session(config: Optional[str]) -> ConductorSession:
    try:
        cfg = AppConfig.load(path=config)
        init_logging(cfg.log)
        return ConductorSession(cfg)
    except (UserInputError, FileNotFoundError) as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def modes(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config path"),
):
    """
    List modes with the time systems and tick sources each one allows
    """
    session = _open_session(config)

    table = Table(title="Time conductor modes")
    table.add_column("key")
    table.add_column("name")
    table.add_column("time systems")
    table.add_column("tick sources")

    for mode in available_modes():
        controller = session.select_mode(mode.key)
        table.add_row(
            mode.key,
            mode.name,
            ", ".join(ts.metadata.key for ts in controller.available_time_systems()) or "-",
            ", ".join(s.metadata.key for s in controller.available_tick_sources()) or "-",
        )

    session.close()
    Console().print(table)


@app.command()
def replay(
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Stop after N ticks"),
    zoom: Optional[float] = typer.Option(None, "--zoom", "-z", help="Window width (ms)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config path"),
):
    """
    Replay the configured range and print the window after every tick
    """
    session = _open_session(config)
    session.select_mode(REPLAY_MODE)

    if zoom is not None:
        session.zoom(zoom)

    subscription = session.conductor.on(
        BOUNDS_EVENT,
        lambda b: print(f"[cyan]{b.start:.0f}[/cyan] -> [cyan]{b.end:.0f}[/cyan]"),
    )
    delivered = session.replay.play(limit=limit)

    subscription.cancel()
    session.close()
    print(f"[green]{delivered} ticks replayed[/green]")


if __name__ == "__main__":
    app()

# python -m timeconductor.cli replay --limit 5
