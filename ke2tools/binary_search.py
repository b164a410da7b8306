"""Binary search over a sorted sequence with a caller-supplied ordering."""

from __future__ import annotations

import operator
from collections.abc import Sequence
from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")
V = TypeVar("V")


def binary_search(seq: Sequence[T], value: V,
                  less: Optional[Callable[[V, T], bool]] = None,
                  equal: Optional[Callable[[V, T], bool]] = None) -> int:
    """Return where ``value`` belongs in the sorted ``seq``.

    ``less(value, item)`` tells whether ``value`` comes before ``item``
    (default ``<``). The result is the index of the first item that ``value``
    comes before, or ``len(seq)``. When ``equal`` is given and the item just
    before that position equals ``value``, its index is returned instead.
    An empty sequence raises ``ValueError``.
    """
    if not seq:
        raise ValueError("cannot search an empty sequence")
    before: Callable[[Any, Any], bool] = less or operator.lt
    lo, hi = 0, len(seq)
    while lo < hi:
        mid = (lo + hi) // 2
        if before(value, seq[mid]):
            hi = mid
        else:
            lo = mid + 1
    if equal is not None and lo > 0 and equal(value, seq[lo - 1]):
        return lo - 1
    return lo