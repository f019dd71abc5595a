"""Shared fixtures for the meetingmeter test suite."""

import io
import time

import pytest


class SlowInput(io.StringIO):
    """StringIO whose readline pauses first, like a person thinking."""

    def __init__(self, text: str, delay_s: float):
        super().__init__(text)
        self.delay_s = delay_s

    def readline(self, *args):
        time.sleep(self.delay_s)
        return super().readline(*args)


@pytest.fixture
def stdout():
    return io.StringIO()


@pytest.fixture
def slow_input():
    """Factory for stdin streams that answer after a delay."""
    return SlowInput
