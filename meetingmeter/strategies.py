"""Termination strategies: when does the meeting end?

Each strategy is a coroutine that waits for its condition and then calls
``session.stop()``. Exactly one runs per session, alongside the tick loop.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Awaitable, Callable

from meetingmeter.models import SENTINELS, MeetingConfig

if TYPE_CHECKING:
    from meetingmeter.session import MeetingSession

logger = logging.getLogger(__name__)


async def wait_for_sentinel(session: MeetingSession) -> None:
    """Read whitespace-separated tokens until a ``q`` or ``Q``, then stop.

    Anything else typed is ignored. Reads happen in a worker thread so the
    tick loop keeps running. End of input also ends the meeting.
    """
    while True:
        line = await asyncio.to_thread(session.stdin.readline)
        if not line:
            logger.debug("Input closed; ending the meeting")
            break
        if any(token in SENTINELS for token in line.split()):
            break
    session.stop()


async def wait_for_duration(session: MeetingSession) -> None:
    """Sleep for the configured meeting duration, then stop."""
    await asyncio.sleep(session.config.meeting_duration.total_seconds())
    session.stop()


def select_strategy(config: MeetingConfig) -> Callable[[MeetingSession], Awaitable[None]]:
    """Open-ended meetings wait for Q; fixed ones wait out the clock."""
    if config.open_ended:
        return wait_for_sentinel
    return wait_for_duration
