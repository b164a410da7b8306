"""Monotonic time points, durations and sleeping."""

from __future__ import annotations

import time

PROGRAM_START_TIME = time.monotonic()


def time_point() -> float:
    """Current point of the monotonic clock, in seconds."""
    return time.monotonic()


def elapsed() -> float:
    """Seconds since the module was first loaded."""
    return time.monotonic() - PROGRAM_START_TIME


def duration(start: float, end: float) -> float:
    """Seconds from ``start`` to ``end``."""
    return end - start


def wait(seconds: float) -> None:
    """Sleep for ``seconds``, rounded down to whole milliseconds.

    Negative values do not sleep.
    """
    millis = int(seconds * 1000)
    if millis > 0:
        time.sleep(millis / 1000)