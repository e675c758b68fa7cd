"""Coloured debug printing that is active only when ``LOCAL`` is set."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Mapping
from typing import TextIO

DEBUG_COLOR = "\033[36m"
RESET_COLOR = "\033[0m"


def format_value(value) -> str:
    """Render a value for debug output.

    Strings print as themselves, tuples as ``(a, b)``, other iterables as
    ``[a b c]`` (mappings as their items) and anything else via ``str``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, tuple):
        return "(" + ", ".join(format_value(item) for item in value) + ")"
    if isinstance(value, Mapping):
        return "[" + " ".join(format_value(item) for item in value.items()) + "]"
    if isinstance(value, Iterable):
        return "[" + " ".join(format_value(item) for item in value) + "]"
    return str(value)


def _enabled() -> bool:
    return os.environ.get("LOCAL", "") not in ("", "0")


def de(*args, stream: TextIO | None = None) -> None:
    """Print ``args`` in colour on one line when the ``LOCAL`` variable is set."""
    if not _enabled():
        return
    out = sys.stdout if stream is None else stream
    body = "".join(format_value(arg) + " " for arg in args)
    out.write(f"{DEBUG_COLOR}{body}{RESET_COLOR}\n")