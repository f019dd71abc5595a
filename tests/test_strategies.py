"""Tests for the interactive and fixed-duration termination strategies."""

import asyncio
import io
from datetime import timedelta

from meetingmeter.models import MeetingConfig
from meetingmeter.session import MeetingSession
from meetingmeter.strategies import select_strategy, wait_for_duration, wait_for_sentinel


def _run(session: MeetingSession, strategy) -> float:
    """Run a session to completion, returning how long it took."""
    async def scenario():
        loop = asyncio.get_running_loop()
        began = loop.time()
        session.start(strategy)
        await asyncio.wait_for(session.wait(), timeout=5)
        return loop.time() - began

    return asyncio.run(scenario())


def _session(stdin, duration=timedelta(0)):
    config = MeetingConfig(
        hourly_rate=100,
        meeting_duration=duration,
        tick_interval=timedelta(milliseconds=10),
    )
    return MeetingSession(config, stdin, io.StringIO())


# --- Interactive (5 tests) ---

def test_sentinel_ignores_other_tokens():
    stdin = io.StringIO("hello\nquit\nQQ\nqq q\nafter\n")
    session = _session(stdin)
    _run(session, wait_for_sentinel)
    assert session.finished.is_set()
    # Stopped at the line with the lone q; the rest is left unread
    assert stdin.read() == "after\n"


def test_uppercase_sentinel():
    stdin = io.StringIO("Q\nafter\n")
    _run(_session(stdin), wait_for_sentinel)
    assert stdin.read() == "after\n"


def test_sentinel_token_mid_line():
    stdin = io.StringIO("we are done   Q  now\nafter\n")
    _run(_session(stdin), wait_for_sentinel)
    assert stdin.read() == "after\n"


def test_sentinel_waits_for_input(slow_input):
    session = _session(slow_input("chatter\nq\n", 0.05))
    elapsed = _run(session, wait_for_sentinel)
    assert elapsed >= 0.09
    assert session.ticks > 0


def test_end_of_input_ends_meeting():
    session = _session(io.StringIO("chatter\n"))
    _run(session, wait_for_sentinel)
    assert session.done.is_set()
    assert session.finished.is_set()


# --- Fixed duration (2 tests) ---

def test_duration_sleeps_at_least_configured_time():
    session = _session(io.StringIO(), duration=timedelta(milliseconds=150))
    elapsed = _run(session, wait_for_duration)
    assert elapsed >= 0.14
    assert session.done.is_set()
    assert session.finished.is_set()


def test_duration_does_not_read_input():
    stdin = io.StringIO("q\n")
    _run(_session(stdin, duration=timedelta(milliseconds=20)), wait_for_duration)
    assert stdin.read() == "q\n"


# --- Selection (2 tests) ---

def test_open_ended_selects_sentinel():
    assert select_strategy(MeetingConfig(hourly_rate=1)) is wait_for_sentinel


def test_fixed_duration_selects_sleep():
    config = MeetingConfig(hourly_rate=1, meeting_duration=timedelta(minutes=5))
    assert select_strategy(config) is wait_for_duration
