"""Meetingmeter runner — turns a MeetingConfig into one run.

Decision flow:
1. No hourly rate? Ask the participants for theirs (rates.py)
2. No duration? Tick until someone types Q, then exit 0
3. Tick interval over a second? Start a ticking session and exit 0 at once
4. Otherwise print the cost of the whole meeting once
"""

from __future__ import annotations

import asyncio
import logging
import sys
from dataclasses import replace
from typing import Optional, TextIO

from meetingmeter.models import MeetingConfig
from meetingmeter.pricing import cost, display_cost
from meetingmeter.rates import collect_rate
from meetingmeter.session import MeetingSession

logger = logging.getLogger(__name__)

BANNER = "Starting an interactive ticker, press Q and enter to end the meeting"


async def run_meeting(
    config: MeetingConfig,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Run one meeting and return the process exit code.

    Args:
        config: Validated meeting configuration.
        stdin: Where rates and the Q sentinel are read from (default sys.stdin).
        stdout: Where prompts and costs are written (default sys.stdout).

    Returns:
        0 on every path; bad configuration is rejected before we get here.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    if config.needs_rate:
        rate = await asyncio.to_thread(collect_rate, stdin, stdout)
        config = replace(config, hourly_rate=rate)
        logger.debug("Collected combined hourly rate %.2f", rate)

    if config.open_ended:
        stdout.write(BANNER + "\n")
        stdout.flush()
        session = MeetingSession(config, stdin, stdout)
        session.start()
        await session.wait()
        stdout.write("\n")
        stdout.flush()
        return 0

    if config.ticking:
        session = MeetingSession(config, stdin, stdout)
        session.start()
        # Not awaited: the run ends, and the event loop with it, before the
        # first tick is due. Kept as the tool has always behaved.
        logger.debug("Ticking session started without waiting for it")
        return 0

    display_cost(cost(config.hourly_rate, config.meeting_duration), stdout)
    stdout.write("\n")
    stdout.flush()
    return 0
