"""Data models for meetingmeter.

MeetingConfig and the defaults that flow from the CLI into the runner.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

# Effectively immediate; the smallest step timedelta can represent.
DEFAULT_TICK_INTERVAL = timedelta(microseconds=1)

# Tick intervals at or below this show the cost once instead of ticking.
TICKING_THRESHOLD = timedelta(seconds=1)

SENTINELS = ("q", "Q")


@dataclass(frozen=True)
class MeetingConfig:
    """Everything one run needs to know.

    A zero hourly_rate means "ask the participants"; a zero meeting_duration
    means the meeting runs until someone types Q.
    """

    hourly_rate: float = 0.0
    meeting_duration: timedelta = field(default_factory=timedelta)
    tick_interval: timedelta = DEFAULT_TICK_INTERVAL

    @property
    def needs_rate(self) -> bool:
        return self.hourly_rate == 0

    @property
    def open_ended(self) -> bool:
        return self.meeting_duration == timedelta(0)

    @property
    def ticking(self) -> bool:
        return self.tick_interval > TICKING_THRESHOLD
