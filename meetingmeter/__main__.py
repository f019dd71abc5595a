"""CLI for meetingmeter.

Usage:
    python -m meetingmeter --rate 150 --duration 1h          # Cost of the whole meeting
    python -m meetingmeter --rate 150 --duration 1h --ticks 5s
    python -m meetingmeter --rate 150                         # Tick until Q
    python -m meetingmeter                                    # Ask for each participant's rate

Go-style single-dash flags (-rate=150 -duration=1h) are accepted too.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from meetingmeter.config import build_config
from meetingmeter.runner import run_meeting

app = typer.Typer(
    name="meetingmeter",
    help="Show what a meeting costs, once or as a running total",
    add_completion=False,
)
console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    """Route meetingmeter's loggers to stderr through Rich."""
    log = logging.getLogger("meetingmeter")
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not log.handlers:
        log.addHandler(RichHandler(console=console, show_path=False))


@app.command()
def cmd_meter(
    rate: float = typer.Option(
        0.0, "--rate", "-rate", envvar="MEETINGMETER_RATE",
        help="Optional: the hourly charge out rate. Examples: --rate 100 OR -rate=9.95",
    ),
    duration: Optional[str] = typer.Option(
        None, "--duration", "-duration", envvar="MEETINGMETER_DURATION",
        help="The expected meeting duration; omit to tick until Q. Examples: --duration 1h OR -duration=150m",
    ),
    ticks: Optional[str] = typer.Option(
        None, "--ticks", "-ticks", envvar="MEETINGMETER_TICKS",
        help="Optional: display a running cost every interval. Examples: --ticks 2s OR -ticks=5m",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr"),
) -> None:
    """Calculate the cost of a meeting."""
    _configure_logging(verbose)
    try:
        config = build_config(rate=rate, duration=duration, ticks=ticks)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    code = asyncio.run(run_meeting(config))
    raise typer.Exit(code)


if __name__ == "__main__":
    app()
