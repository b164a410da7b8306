"""Uniform random numbers in a range."""

from __future__ import annotations

import random


def rand_num(start: float, end: float) -> float:
    """Return a random number between ``start`` and ``end``, both included."""
    return random.uniform(start, end)