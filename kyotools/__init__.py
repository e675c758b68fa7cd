"""Competitive programming helpers: prefix sums, interval sets, shortest paths, debug output and test generators."""

__version__ = "0.1.0"