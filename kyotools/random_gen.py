"""Random test-case generation: numbers, sequences, strings and trees."""

from __future__ import annotations

import argparse
import heapq
import random
import string
import time
from typing import Sequence


class Random:
    """A seeded random generator with helpers for building test inputs."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = time.monotonic_ns()
        self._rng = random.Random(seed)

    def get_int(self, min_val: int, max_val: int) -> int:
        """Return a uniform integer in ``[min_val, max_val]``."""
        if min_val > max_val:
            raise ValueError(f"empty range [{min_val}, {max_val}]")
        return self._rng.randint(min_val, max_val)

    def get_double(self, min_val: float, max_val: float) -> float:
        """Return a uniform float in ``[min_val, max_val)``."""
        if min_val > max_val:
            raise ValueError(f"empty range [{min_val}, {max_val})")
        return min_val + (max_val - min_val) * self._rng.random()

    def get_vec(self, length: int, min_val: int, max_val: int) -> list[int]:
        """Return ``length`` integers, each uniform in ``[min_val, max_val]``."""
        return [self.get_int(min_val, max_val) for _ in range(length)]

    def get_str(self, length: int, chars: str = string.ascii_lowercase) -> str:
        """Return a string of ``length`` characters drawn from ``chars``."""
        if length > 0 and not chars:
            raise ValueError("chars must not be empty")
        return "".join(chars[self.get_int(0, len(chars) - 1)] for _ in range(length))

    def get_tree(self, vertices: int) -> list[tuple[int, int]]:
        """Return the edges of a random tree on vertices ``1..vertices``.

        The tree is decoded from a random Prüfer sequence.
        """
        if vertices <= 1:
            return []
        prufer = [self.get_int(1, vertices) for _ in range(vertices - 2)]
        degree = [1] * (vertices + 1)
        for node in prufer:
            degree[node] += 1
        leaves = [v for v in range(1, vertices + 1) if degree[v] == 1]
        heapq.heapify(leaves)
        edges = []
        for node in prufer:
            leaf = heapq.heappop(leaves)
            edges.append((leaf, node))
            degree[leaf] -= 1
            degree[node] -= 1
            if degree[node] == 1:
                heapq.heappush(leaves, node)
        edges.append((min(leaves), max(leaves)))
        return edges

    def yes(self, p: float = 0.5) -> bool:
        """Return ``True`` with probability ``p``."""
        return self.get_double(0.0, 1.0) < p


def main(argv: Sequence[str] | None = None) -> int:
    """Print a random length ``n`` and a string of ``n`` letters from ``abc``."""
    parser = argparse.ArgumentParser(description="Generate a random test case.")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible output")
    args = parser.parse_args(argv)
    rnd = Random(args.seed)
    n = rnd.get_int(1, 100)
    t = rnd.get_str(n, "abc")
    print(n)
    print(t)
    return 0