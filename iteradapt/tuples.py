"""Grouping elements into fixed-size tuples, chunks and sliding windows."""

from __future__ import annotations

import itertools
import operator
from collections import deque
from typing import Any, Generic, Iterable, Iterator, List, Tuple, TypeVar

T = TypeVar("T")


def _check_size(n: int) -> None:
    if n < 1:
        raise ValueError(f"tuple size must be at least 1, got {n}")


class Tuples(Generic[T]):
    """Yields consecutive non-overlapping tuples of ``n`` elements.

    Elements left over at the end, too few to fill a tuple, are kept and can
    be retrieved with ``into_buffer``.
    """

    __slots__ = ("_iterator", "_exhausted", "_n", "_buf")

    def __init__(self, iterable: Iterable[T], n: int) -> None:
        _check_size(n)
        self._iterator: Iterator[T] = iter(iterable)
        self._exhausted = False
        self._n = n
        self._buf: List[T] = []

    def __iter__(self) -> "Tuples[T]":
        return self

    def __next__(self) -> Tuple[T, ...]:
        chunk = [] if self._exhausted else list(itertools.islice(self._iterator, self._n))
        if len(chunk) == self._n:
            return tuple(chunk)
        self._exhausted = True
        self._buf = chunk
        raise StopIteration

    def __length_hint__(self) -> int:
        remaining = 0 if self._exhausted else operator.length_hint(self._iterator)
        return (remaining + len(self._buf)) // self._n

    def into_buffer(self) -> Iterator[T]:
        """Return an iterator over the leftover elements that did not fill a tuple."""
        return iter(list(self._buf))


def tuples(iterable: Iterable[T], n: int) -> Tuples[T]:
    """Group the elements of ``iterable`` into tuples of ``n``."""
    return Tuples(iterable, n)


def tuple_windows(iterable: Iterable[T], n: int) -> Iterator[Tuple[T, ...]]:
    """Yield every window of ``n`` consecutive elements as a tuple."""
    _check_size(n)
    it = iter(iterable)

    def generate() -> Iterator[Tuple[T, ...]]:
        window: deque = deque(itertools.islice(it, n), maxlen=n)
        if len(window) < n:
            return
        yield tuple(window)
        for item in it:
            window.append(item)
            yield tuple(window)

    return generate()


def circular_tuple_windows(iterable: Iterable[T], n: int) -> Iterator[Tuple[Any, ...]]:
    """Yield one window of ``n`` elements starting at each element, wrapping around.

    The iterable is read in full first; there are as many windows as elements.
    """
    _check_size(n)
    items = list(iterable)
    if not items:
        return iter(())
    return itertools.islice(tuple_windows(itertools.cycle(items), n), len(items))