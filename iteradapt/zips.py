"""Zipping iterables: strict-length, longest-wins and n-ary lock-step zips."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Tuple, TypeVar, Union

A = TypeVar("A")
B = TypeVar("B")

_MISSING: Any = object()


@dataclass(frozen=True)
class Left(Generic[A]):
    """Only the first iterable still had an element."""

    value: A


@dataclass(frozen=True)
class Right(Generic[B]):
    """Only the second iterable still had an element."""

    value: B


@dataclass(frozen=True)
class Both(Generic[A, B]):
    """Both iterables had an element."""

    left: A
    right: B


def zip_eq(a: Iterable[A], b: Iterable[B]) -> Iterator[Tuple[A, B]]:
    """Yield pairs from ``a`` and ``b``; raise ``ValueError`` if their lengths differ.

    The error is raised when one iterable ends before the other, after the
    pairs taken so far have been yielded.
    """
    it_a = iter(a)
    it_b = iter(b)

    def generate() -> Iterator[Tuple[A, B]]:
        while True:
            x = next(it_a, _MISSING)
            y = next(it_b, _MISSING)
            if x is _MISSING and y is _MISSING:
                return
            if x is _MISSING or y is _MISSING:
                raise ValueError("zip_eq() reached end of one iterator before the other")
            yield x, y

    return generate()


def zip_longest(
    a: Iterable[A], b: Iterable[B]
) -> Iterator[Union[Left[A], Right[B], Both[A, B]]]:
    """Yield ``Both`` while both iterables have elements, then ``Left`` or ``Right``.

    Each iterable is not advanced again once it has ended.
    """
    it_a = iter(a)
    it_b = iter(b)

    def generate() -> Iterator[Union[Left[A], Right[B], Both[A, B]]]:
        a_done = False
        b_done = False
        while True:
            x = _MISSING if a_done else next(it_a, _MISSING)
            y = _MISSING if b_done else next(it_b, _MISSING)
            a_done = x is _MISSING
            b_done = y is _MISSING
            if a_done and b_done:
                return
            if b_done:
                yield Left(x)
            elif a_done:
                yield Right(y)
            else:
                yield Both(x, y)

    return generate()


def multizip(iterables: Iterable[Iterable[Any]]) -> Iterator[Tuple[Any, ...]]:
    """Run several iterables in lock step, yielding tuples until any one ends.

    The iterables are advanced in order, so those before the shortest one may
    give up one element more than was yielded.
    """
    return zip(*iterables)