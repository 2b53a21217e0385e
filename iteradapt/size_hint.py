"""Arithmetic on size hints: ``(lower, upper)`` pairs bounded by a machine word.

A size hint is a tuple ``(low, high)`` where ``low`` is a lower bound on the
number of remaining items and ``high`` is an upper bound or ``None`` when the
bound is unknown or would overflow.  Lower bounds saturate at ``USIZE_MAX``;
upper bounds become ``None`` on overflow.
"""

from __future__ import annotations

from typing import Optional, Tuple

USIZE_MAX = 2**64 - 1

SizeHint = Tuple[int, Optional[int]]


def _saturating_add(a: int, b: int) -> int:
    return min(a + b, USIZE_MAX)


def _saturating_mul(a: int, b: int) -> int:
    return min(a * b, USIZE_MAX)


def _checked(value: int) -> Optional[int]:
    return value if value <= USIZE_MAX else None


def add(a: SizeHint, b: SizeHint) -> SizeHint:
    """Add two size hints."""
    low = _saturating_add(a[0], b[0])
    high = _checked(a[1] + b[1]) if a[1] is not None and b[1] is not None else None
    return low, high


def add_scalar(sh: SizeHint, x: int) -> SizeHint:
    """Add ``x`` to both bounds of a size hint."""
    low, high = sh
    return _saturating_add(low, x), (_checked(high + x) if high is not None else None)


def sub_scalar(sh: SizeHint, x: int) -> SizeHint:
    """Subtract ``x`` from both bounds of a size hint, stopping at zero."""
    low, high = sh
    return max(low - x, 0), (max(high - x, 0) if high is not None else None)


def mul(a: SizeHint, b: SizeHint) -> SizeHint:
    """Multiply two size hints."""
    low = _saturating_mul(a[0], b[0])
    a_high, b_high = a[1], b[1]
    if a_high is not None and b_high is not None:
        high = _checked(a_high * b_high)
    elif a_high == 0 or b_high == 0:
        high = 0
    else:
        high = None
    return low, high


def mul_scalar(sh: SizeHint, x: int) -> SizeHint:
    """Multiply both bounds of a size hint by ``x``."""
    low, high = sh
    return _saturating_mul(low, x), (_checked(high * x) if high is not None else None)


def maximum(a: SizeHint, b: SizeHint) -> SizeHint:
    """Size hint of whichever of two sequences is longer."""
    low = max(a[0], b[0])
    high = max(a[1], b[1]) if a[1] is not None and b[1] is not None else None
    return low, high


def minimum(a: SizeHint, b: SizeHint) -> SizeHint:
    """Size hint of whichever of two sequences is shorter."""
    low = min(a[0], b[0])
    if a[1] is not None and b[1] is not None:
        high: Optional[int] = min(a[1], b[1])
    else:
        high = a[1] if a[1] is not None else b[1]
    return low, high