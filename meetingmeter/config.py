"""Flag values to MeetingConfig.

Durations use Go's time.ParseDuration syntax: ``1h``,
``150m``, ``1h30m``, ``2.5s``, ``500ms``. Everything here raises ValueError
on bad input; the CLI turns that into a usage error.
"""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal
from typing import Optional

from meetingmeter.models import DEFAULT_TICK_INTERVAL, MeetingConfig

# Unit -> microseconds
_UNITS: dict[str, Decimal] = {
    "ns": Decimal("0.001"),
    "us": Decimal(1),
    "µs": Decimal(1),  # micro sign
    "μs": Decimal(1),  # Greek mu
    "ms": Decimal(1000),
    "s": Decimal(1_000_000),
    "m": Decimal(60_000_000),
    "h": Decimal(3_600_000_000),
}

_COMPONENT_RE = re.compile(r"(\d+\.?\d*|\.\d+)([^\d.]+)")


def parse_duration(text: str) -> timedelta:
    """Parse a Go-style duration string.

    A possibly signed sequence of decimal numbers, each with a unit suffix
    (ns, us/µs, ms, s, m, h). The bare string "0" is also accepted.
    Non-zero amounts below a microsecond round up to one microsecond.

    Raises:
        ValueError: If the string is not a valid duration.
    """
    s = text.strip()
    if not s:
        raise ValueError("invalid duration: empty string")

    sign = 1
    if s[0] in "+-":
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    if s == "0":
        return timedelta(0)

    total = Decimal(0)
    pos = 0
    while pos < len(s):
        m = _COMPONENT_RE.match(s, pos)
        if not m:
            raise ValueError(f"invalid duration: {text!r}")
        number, unit = m.groups()
        if unit not in _UNITS:
            raise ValueError(f"unknown unit {unit!r} in duration {text!r}")
        total += Decimal(number) * _UNITS[unit]
        pos = m.end()
    if pos == 0:
        raise ValueError(f"invalid duration: {text!r}")

    micros = int(total)
    if total and not micros:
        micros = 1
    try:
        return timedelta(microseconds=sign * micros)
    except OverflowError:
        raise ValueError(f"duration out of range: {text!r}") from None


def build_config(
    rate: float = 0.0,
    duration: Optional[str] = None,
    ticks: Optional[str] = None,
) -> MeetingConfig:
    """Validate raw flag values and assemble a MeetingConfig.

    Args:
        rate: Combined hourly rate; 0 means ask the participants.
        duration: Meeting length; None or 0 means run until Q.
        ticks: Interval between running-cost updates; None keeps the
            near-immediate default, which shows the cost once.

    Raises:
        ValueError: On negative rates or durations, or a non-positive tick.
    """
    if rate < 0:
        raise ValueError(f"rate must not be negative, got {rate}")

    meeting_duration = parse_duration(duration) if duration else timedelta(0)
    if meeting_duration < timedelta(0):
        raise ValueError(f"duration must not be negative, got {duration}")

    tick_interval = parse_duration(ticks) if ticks else DEFAULT_TICK_INTERVAL
    if tick_interval <= timedelta(0):
        raise ValueError(f"ticks must be positive, got {ticks}")

    return MeetingConfig(
        hourly_rate=rate,
        meeting_duration=meeting_duration,
        tick_interval=tick_interval,
    )
