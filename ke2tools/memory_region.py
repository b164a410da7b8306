"""Overlap of two address ranges."""

from __future__ import annotations

from typing import Optional


def overlapping_region(start1: Optional[int], len1: int,
                       start2: Optional[int], len2: int) -> Optional[tuple[int, int]]:
    """Return ``(start, length)`` of the part two ranges share.

    Each range starts at an address and spans a number of bytes. Ranges that
    start at the same address overlap by the shorter length, even when that is
    zero. Ranges that do not overlap, or a missing start (``None``), give
    ``None``.
    """
    if start1 is None or start2 is None:
        return None
    if len1 < 0 or len2 < 0:
        raise ValueError("region lengths must not be negative")
    if start1 == start2:
        return start1, min(len1, len2)
    if start2 < start1 < start2 + len2:
        return start1, min(start2 + len2 - start1, len1)
    if start1 < start2 < start1 + len1:
        return start2, min(start1 + len1 - start2, len2)
    return None