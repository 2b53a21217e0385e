"""Iterator adaptors, zips, tuple grouping, combinatorics, collecting helpers and size hints."""

__version__ = "0.14.0"

__all__ = [
    "adaptors",
    "collect",
    "combinatorics",
    "size_hint",
    "tuples",
    "zips",
]