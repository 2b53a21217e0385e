"""Lazy adaptors: padding, inclusive take-while, de-duplication and position tags."""

from __future__ import annotations

import enum
from typing import Any, Callable, Hashable, Iterable, Iterator, Set, Tuple, TypeVar

T = TypeVar("T")

_MISSING: Any = object()


class Position(enum.Enum):
    """Where an element sits in the sequence yielded by ``with_position``."""

    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"
    ONLY = "only"


def pad_using(
    iterable: Iterable[T], min_len: int, filler: Callable[[int], T]
) -> Iterator[T]:
    """Yield every element, then ``filler(i)`` for each missing index below ``min_len``.

    ``filler`` is only called when the iterable is shorter than ``min_len``.
    """
    pos = 0
    for item in iterable:
        pos += 1
        yield item
    for index in range(pos, min_len):
        yield filler(index)


def take_while_inclusive(
    iterable: Iterable[T], predicate: Callable[[T], bool]
) -> Iterator[T]:
    """Yield elements while ``predicate`` holds, including the first that fails it.

    Nothing is taken from the iterable after that element.
    """
    for item in iterable:
        yield item
        if not predicate(item):
            return


def unique_by(iterable: Iterable[T], key: Callable[[T], Hashable]) -> Iterator[T]:
    """Yield the first element seen for each distinct value of ``key``."""
    seen: Set[Hashable] = set()
    for item in iterable:
        k = key(item)
        if k not in seen:
            seen.add(k)
            yield item


def unique(iterable: Iterable[T]) -> Iterator[T]:
    """Yield each distinct element once, in order of first appearance."""
    seen: Set[Any] = set()
    for item in iterable:
        if item not in seen:
            seen.add(item)
            yield item


def with_position(iterable: Iterable[T]) -> Iterator[Tuple[Position, T]]:
    """Pair each element with its ``Position`` in the sequence."""
    it = iter(iterable)
    current = next(it, _MISSING)
    if current is _MISSING:
        return
    following = next(it, _MISSING)
    if following is _MISSING:
        yield Position.ONLY, current
        return
    yield Position.FIRST, current
    current = following
    for following in it:
        yield Position.MIDDLE, current
        current = following
    yield Position.LAST, current