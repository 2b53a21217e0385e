"""Collecting from iterators: fixed-size takes, error-aware processing, unzipping."""

from __future__ import annotations

import itertools
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)

T = TypeVar("T")
R = TypeVar("R")


def next_array(iterator: Iterator[T], n: int) -> Optional[Tuple[T, ...]]:
    """Take the next ``n`` elements of ``iterator`` as a tuple.

    Returns ``None`` if the iterator ends first. The elements taken before
    the end are consumed all the same.
    """
    if n < 0:
        raise ValueError(f"array length must be non-negative, got {n}")
    taken = tuple(itertools.islice(iterator, n))
    if len(taken) < n:
        return None
    return taken


class ProcessResults(Generic[T]):
    """Yields the values of an iterable up to its first error.

    An element is an error when it is an exception instance. The first such
    element ends the iteration and is kept in ``error``.
    """

    __slots__ = ("_iterator", "error")

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iterator: Optional[Iterator[Any]] = iter(iterable)
        self.error: Optional[BaseException] = None

    def __iter__(self) -> "ProcessResults[T]":
        return self

    def __next__(self) -> T:
        if self._iterator is None:
            raise StopIteration
        try:
            item = next(self._iterator)
        except StopIteration:
            self._iterator = None
            raise
        if isinstance(item, BaseException):
            self.error = item
            self._iterator = None
            raise StopIteration
        return item

    def __repr__(self) -> str:
        return f"ProcessResults(error={self.error!r})"


def process_results(
    iterable: Iterable[Any], processor: Callable[[ProcessResults[Any]], R]
) -> R:
    """Run ``processor`` over the values of ``iterable`` up to its first error.

    Elements that are exception instances count as errors. If one was met,
    it is raised and the processor's result is discarded; otherwise the
    processor's result is returned.
    """
    results: ProcessResults[Any] = ProcessResults(iterable)
    outcome = processor(results)
    if results.error is not None:
        raise results.error
    return outcome


def multiunzip(iterable: Iterable[Tuple[Any, ...]]) -> Tuple[List[Any], ...]:
    """Turn an iterable of equal-length tuples into a tuple of lists, one per column.

    An empty iterable gives ``()``. Raises ``ValueError`` if the tuples differ
    in length.
    """
    columns: Optional[Tuple[List[Any], ...]] = None
    for row in iterable:
        row = tuple(row)
        if columns is None:
            columns = tuple([] for _ in row)
        elif len(row) != len(columns):
            raise ValueError(
                f"expected tuples of length {len(columns)}, got one of length {len(row)}"
            )
        for column, value in zip(columns, row):
            column.append(value)
    return columns if columns is not None else ()