"""Small numeric helpers and output formatting for contest-style programs."""

from __future__ import annotations

import argparse
from itertools import accumulate
from typing import Iterable, Sequence

_MASK64 = (1 << 64) - 1


def div_floor(a: int, b: int) -> int:
    """Return ``a / b`` rounded towards negative infinity."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    return a // b


def div_ceil(a: int, b: int) -> int:
    """Return ``a / b`` rounded towards positive infinity."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    return -(-a // b)


def cumsum(values: Iterable, off: int = 1) -> list:
    """Return prefix sums of ``values``.

    With ``off=1`` the result starts with a leading zero and has one more
    element than ``values``; with ``off=0`` the leading zero is dropped.
    """
    sums = list(accumulate(values, initial=0))
    if off == 0:
        del sums[0]
    return sums


def ipow(a, b: int):
    """Raise ``a`` to the non-negative integer power ``b`` by repeated squaring.

    A non-positive exponent yields ``1``.
    """
    result = 1
    while b > 0:
        if b & 1:
            result *= a
        a *= a
        b >>= 1
    return result


def popcount(x: int) -> int:
    """Count set bits of ``x`` viewed as an unsigned 64-bit integer."""
    return bin(x & _MASK64).count("1")


def _format(value) -> str:
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, list):
        if value and all(isinstance(row, list) for row in value):
            return "".join(_format(row) + "\n" for row in value)
        return " ".join(_format(item) for item in value)
    if isinstance(value, tuple):
        return " ".join(_format(item) for item in value)
    return str(value)


def format_values(*args) -> str:
    """Render values space-separated.

    Lists print their items separated by spaces, tuples print as their
    members separated by spaces, and a list of lists prints one row per line,
    each followed by a newline. Booleans print as ``0`` or ``1``.
    """
    return " ".join(_format(arg) for arg in args)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the bare solution template; accepts no arguments."""
    parser = argparse.ArgumentParser(description="Empty solution template.")
    parser.parse_args(argv)
    return 0