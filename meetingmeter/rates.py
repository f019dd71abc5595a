"""Interactive collection of participant hourly rates."""

from __future__ import annotations

import logging
from typing import TextIO

from meetingmeter.models import SENTINELS

logger = logging.getLogger(__name__)

_INTRO = "Please enter the hourly rates of all participants, one at a time. ie. 150 OR 1000.50\n"
_NEXT = "Please enter the hourly rates of the next participant\n"
_DONE_HINT = "If all meeting participants accounted for, type Q and enter to move on.\n"
_RETRY = "Sorry, didn't understand {}. Please try again.\n"


def _parse_rate(line: str) -> float:
    """float() minus its leniency: no surrounding whitespace, no digit underscores."""
    if line != line.strip() or "_" in line:
        raise ValueError(f"not a rate: {line!r}")
    return float(line)


def collect_rate(stdin: TextIO, stdout: TextIO) -> float:
    """Sum hourly rates read one per line until a Q line.

    Lines that are not numbers get a retry prompt and are otherwise ignored.
    End of input finishes collection the same way Q does.

    Returns:
        The combined hourly rate (0.0 if nothing was entered).
    """
    rate = 0.0
    stdout.write(_INTRO)
    while True:
        stdout.write(_NEXT)
        stdout.write(_DONE_HINT)
        stdout.flush()

        raw = stdin.readline()
        if not raw:
            logger.debug("Input closed while collecting rates; using %.2f", rate)
            break
        line = raw.rstrip("\r\n")
        if line in SENTINELS:
            break
        try:
            value = _parse_rate(line)
        except ValueError:
            stdout.write(_RETRY.format(line))
            continue
        rate += value
        logger.debug("Added rate %s (running total %s)", value, rate)

    return rate
