"""Competitive programming problems solved as plain Python functions."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "text",
    "twopointers",
    "arrays",
    "combinatorics",
    "prefixsums",
    "structures",
]