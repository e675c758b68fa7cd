"""Multi-dimensional prefix sums over a fixed-size grid."""

from __future__ import annotations

from itertools import product
from math import prod
from typing import Iterable, Sequence


class CumsumND:
    """Prefix sums over an N-dimensional grid.

    Values are added at 0-indexed cells with :meth:`add`, then :meth:`build`
    turns the grid into cumulative sums, after which :meth:`query` returns the
    sum over the half-open box ``[starts, ends)``.
    """

    def __init__(self, sizes: Iterable[int]) -> None:
        self.sizes = tuple(sizes)
        if not self.sizes:
            raise ValueError("at least one dimension is required")
        if any(size < 0 for size in self.sizes):
            raise ValueError(f"sizes must be non-negative: {self.sizes}")
        self._shape = tuple(size + 1 for size in self.sizes)
        strides = []
        stride = 1
        for extent in reversed(self._shape):
            strides.append(stride)
            stride *= extent
        self._strides = tuple(reversed(strides))
        self._offset = sum(self._strides)
        self._data = [0] * prod(self._shape)

    @property
    def dim(self) -> int:
        """Number of dimensions."""
        return len(self.sizes)

    def _index(self, coords: Sequence[int]) -> int:
        return sum(c * s for c, s in zip(coords, self._strides))

    def _checked(self, coords: Iterable[int], limits: Sequence[int]) -> tuple[int, ...]:
        coords = tuple(coords)
        if len(coords) != self.dim:
            raise ValueError(f"expected {self.dim} coordinates, got {len(coords)}")
        for c, limit in zip(coords, limits):
            if not 0 <= c < limit:
                raise IndexError(f"coordinates {coords} out of range")
        return coords

    def add(self, coords: Iterable[int], val) -> None:
        """Add ``val`` at the 0-indexed cell ``coords``."""
        coords = self._checked(coords, self.sizes)
        self._data[self._index(coords) + self._offset] += val

    def build(self) -> None:
        """Accumulate the added values into prefix sums."""
        ranges = [range(extent) for extent in self._shape]
        data = self._data
        for d, stride in enumerate(self._strides):
            for coords in product(*ranges):
                if coords[d]:
                    idx = self._index(coords)
                    data[idx] += data[idx - stride]

    def query(self, starts: Iterable[int], ends: Iterable[int]):
        """Return the sum over the half-open box ``[starts, ends)``."""
        starts = self._checked(starts, self._shape)
        ends = self._checked(ends, self._shape)
        total = 0
        for choice in product((False, True), repeat=self.dim):
            coords = [s if use_start else e for use_start, s, e in zip(choice, starts, ends)]
            term = self._data[self._index(coords)]
            if sum(choice) % 2:
                total -= term
            else:
                total += term
        return total