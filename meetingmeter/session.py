"""The running meeting: a tick loop plus the two events that end it.

A session owns two asyncio tasks started together:

- the tick loop, which rewrites the running cost every ``tick_interval``
- one termination strategy (see strategies.py), which decides when to stop

They share exactly two primitives. ``done`` is the one-shot termination
signal; ``finished`` tells the runner the meeting is over. ``stop()`` fires
them in that order, cancelling the tick task in between.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from datetime import timedelta
from typing import Awaitable, Callable, Optional, TextIO

from meetingmeter.models import MeetingConfig
from meetingmeter.pricing import cost, display_cost
from meetingmeter.strategies import select_strategy

logger = logging.getLogger(__name__)

Strategy = Callable[["MeetingSession"], Awaitable[None]]


class MeetingSession:
    """One meeting, from first tick to stop."""

    def __init__(
        self,
        config: MeetingConfig,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.config = config
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.done = asyncio.Event()
        self.finished = asyncio.Event()
        self.started_at: Optional[float] = None
        self.ticks = 0
        self._ticker: Optional[asyncio.Task] = None
        self._strategy: Optional[asyncio.Task] = None

    def start(self, strategy: Optional[Strategy] = None) -> None:
        """Start the tick loop and the termination strategy.

        Must be called from inside a running event loop. The strategy
        defaults to the one the config selects.
        """
        if self._ticker is not None:
            raise RuntimeError("session already started")
        strategy = strategy or select_strategy(self.config)
        logger.debug(
            "Starting session: rate=%.2f/h tick=%s strategy=%s",
            self.config.hourly_rate, self.config.tick_interval, strategy.__name__,
        )
        self._ticker = asyncio.create_task(tick_cost(self), name="meetingmeter-ticker")
        self._strategy = asyncio.create_task(strategy(self), name="meetingmeter-strategy")

    def stop(self) -> None:
        """Signal termination, stop the ticker, mark the session finished.

        Safe to call more than once; only the first call does anything.
        """
        if self.done.is_set():
            return
        self.done.set()
        if self._ticker is not None:
            self._ticker.cancel()
        self.finished.set()
        logger.debug("Session stopped after %d ticks", self.ticks)

    async def wait(self) -> None:
        """Block until the session is finished."""
        await self.finished.wait()


async def tick_cost(session: MeetingSession) -> None:
    """Rewrite the running cost every tick until the session is told to stop.

    Ticks that fall behind are dropped rather than queued, so a slow
    terminal never sees a burst of catch-up lines.
    """
    loop = asyncio.get_running_loop()
    session.started_at = loop.time()
    interval = session.config.tick_interval.total_seconds()
    next_tick = session.started_at + interval

    while not session.done.is_set():
        try:
            await asyncio.wait_for(
                session.done.wait(), timeout=max(0.0, next_tick - loop.time())
            )
        except asyncio.TimeoutError:
            now = loop.time()
            elapsed = timedelta(seconds=now - session.started_at)
            display_cost(cost(session.config.hourly_rate, elapsed), session.stdout)
            session.ticks += 1
            next_tick = _next_tick(next_tick, now, interval)


def _next_tick(scheduled: float, now: float, interval: float) -> float:
    """First tick time after ``now``, skipping any that were missed.

    The loop may wake a hair before ``scheduled``; that still counts as the
    scheduled tick.
    """
    missed = max(0, int((now - scheduled) // interval))
    return scheduled + (missed + 1) * interval
