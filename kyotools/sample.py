"""A tiny program used to exercise a local test runner."""

from __future__ import annotations

import sys
from typing import Sequence


def solve(n: int) -> int:
    """Echo ``n``, except that ``100`` becomes ``1``."""
    return 1 if n == 100 else n


def main(argv: Sequence[str] | None = None) -> int:
    """Read one integer from standard input and print the answer."""
    tokens = sys.stdin.read().split()
    if not tokens:
        raise ValueError("expected an integer on standard input")
    print(solve(int(tokens[0])))
    return 0