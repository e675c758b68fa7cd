"""A set of disjoint half-open integer ranges."""

from __future__ import annotations

import math
from typing import Iterator

from sortedcontainers import SortedList


class RangeSet:
    """Keeps half-open ranges ``[left, right)`` merged and sorted."""

    def __init__(self) -> None:
        self._ranges: SortedList = SortedList()

    def _upper(self, x) -> int:
        """Position of the first range whose start is greater than ``x``."""
        return self._ranges.bisect_right((x, math.inf))

    def insert(self, left, right) -> None:
        """Add ``[left, right)``, merging overlapping and touching ranges."""
        ranges = self._ranges
        lo = self._upper(left)
        hi = self._upper(right)
        if lo > 0 and ranges[lo - 1][1] >= left:
            lo -= 1
        if lo != hi:
            left = min(left, ranges[lo][0])
            right = max(right, ranges[hi - 1][1])
            del ranges[lo:hi]
        ranges.add((left, right))

    def erase(self, left, right) -> None:
        """Remove ``[left, right)``, splitting ranges that stick out of it."""
        ranges = self._ranges
        lo = self._upper(left)
        hi = self._upper(right)
        if lo > 0 and ranges[lo - 1][1] > left:
            lo -= 1
        remainder = []
        if lo != hi:
            first_start = ranges[lo][0]
            last_end = ranges[hi - 1][1]
            if first_start < left:
                remainder.append((first_start, left))
            if last_end > right:
                remainder.append((right, last_end))
            del ranges[lo:hi]
        for piece in remainder:
            ranges.add(piece)

    def has_overlap(self, left, right) -> bool:
        """Whether ``[left, right)`` shares a point with a stored range.

        Ranges that only touch, such as ``[1, 2)`` and ``[2, 3)``, do not overlap.
        """
        pos = self._ranges.bisect_left((right, -math.inf))
        if pos == 0:
            return False
        return self._ranges[pos - 1][1] > left

    def __len__(self) -> int:
        return len(self._ranges)

    def __iter__(self) -> Iterator[tuple]:
        return iter(self._ranges)

    def __repr__(self) -> str:
        return f"RangeSet({list(self._ranges)!r})"