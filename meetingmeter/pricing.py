"""Cost arithmetic and display for meetingmeter.

A meeting is billed per whole second at the hourly rate of everyone in it.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TextIO

_SECONDS_PER_HOUR = 3600

COST_LINE = "\rThe total current cost of this meeting is ${:.2f}"


def cost(hourly_rate: float, duration: timedelta) -> float:
    """Cost of a meeting at ``hourly_rate`` that has run for ``duration``.

    Only whole seconds are billed; anything under a second costs nothing.
    Negative inputs are passed through unchecked.

    Args:
        hourly_rate: Combined hourly rate of all participants.
        duration: Elapsed meeting time.

    Returns:
        Cost in the rate's currency.
    """
    whole_seconds = int(duration.total_seconds())
    return hourly_rate / _SECONDS_PER_HOUR * whole_seconds


def format_cost(amount: float) -> str:
    """Render the running-cost line (leading carriage return, no newline)."""
    return COST_LINE.format(amount)


def display_cost(amount: float, stdout: TextIO) -> None:
    """Overwrite the current terminal line with the running cost."""
    stdout.write(format_cost(amount))
    stdout.flush()
