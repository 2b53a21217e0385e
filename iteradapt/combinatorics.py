"""Lazy permutations and powersets that pull from their source only as needed."""

from __future__ import annotations

import itertools
import math
import operator
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, List, Union, TypeVar

T = TypeVar("T")


class _LazyBuffer(Generic[T]):
    """Remembers every element pulled from an iterator so far."""

    __slots__ = ("_iterator", "_exhausted", "items")

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iterator: Iterator[T] = iter(iterable)
        self._exhausted = False
        self.items: List[T] = []

    def get_next(self) -> bool:
        if self._exhausted:
            return False
        try:
            self.items.append(next(self._iterator))
        except StopIteration:
            self._exhausted = True
            return False
        return True

    def prefill(self, length: int) -> None:
        while len(self.items) < length and self.get_next():
            pass

    def load_all(self) -> int:
        while self.get_next():
            pass
        return len(self.items)

    def length_hint(self) -> int:
        remaining = 0 if self._exhausted else operator.length_hint(self._iterator)
        return len(self.items) + remaining

    def get_at(self, indices: Iterable[int]) -> List[T]:
        return [self.items[i] for i in indices]


@dataclass
class _Start:
    k: int


@dataclass
class _Buffered:
    k: int
    min_n: int


@dataclass
class _Loaded:
    indices: List[int]
    cycles: List[int]


class _End:
    pass


_State = Union[_Start, _Buffered, _Loaded, _End]


def _advance(indices: List[int], cycles: List[int]) -> bool:
    """Step to the next permutation; return ``True`` when there is none left."""
    n = len(indices)
    for i in reversed(range(len(cycles))):
        if cycles[i] == 0:
            cycles[i] = n - i - 1
            indices[i:] = indices[i + 1:] + indices[i:i + 1]
        else:
            swap_index = n - cycles[i]
            indices[i], indices[swap_index] = indices[swap_index], indices[i]
            cycles[i] -= 1
            return False
    return True


def _remaining_for(state: _State, n: int) -> int:
    if isinstance(state, _Start):
        return 0 if n < state.k else math.perm(n, state.k)
    if isinstance(state, _Buffered):
        return max(math.perm(n, state.k) - (state.min_n - state.k + 1), 0)
    if isinstance(state, _Loaded):
        count = 0
        size = len(state.indices)
        for i, c in enumerate(state.cycles):
            count = count * (size - i) + c
        return count
    return 0


class Permutations(Generic[T]):
    """Yields every ordering of ``k`` elements drawn from an iterable, as lists.

    The order is that of increasing index tuples. Elements are read from the
    source only when a permutation needs them.
    """

    __slots__ = ("_vals", "_state")

    def __init__(self, iterable: Iterable[T], k: int) -> None:
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")
        self._vals: _LazyBuffer[T] = _LazyBuffer(iterable)
        self._state: _State = _Start(k)

    def __iter__(self) -> "Permutations[T]":
        return self

    def __next__(self) -> List[T]:
        vals = self._vals
        state = self._state
        if isinstance(state, _Start):
            k = state.k
            if k == 0:
                self._state = _End()
                return []
            vals.prefill(k)
            if len(vals.items) != k:
                self._state = _End()
                raise StopIteration
            self._state = _Buffered(k, k)
            return vals.items[:k]
        if isinstance(state, _Buffered):
            k = state.k
            if vals.get_next():
                item = vals.items[:k - 1] + [vals.items[state.min_n]]
                state.min_n += 1
                return item
            n = state.min_n
            indices = list(range(n))
            cycles = list(range(n - 1, n - k - 1, -1))
            # Skip the permutations already produced while buffering.
            for _ in range(n - k + 1):
                if _advance(indices, cycles):
                    self._state = _End()
                    raise StopIteration
            self._state = _Loaded(indices, cycles)
            return vals.get_at(indices[:k])
        if isinstance(state, _Loaded):
            if _advance(state.indices, state.cycles):
                self._state = _End()
                raise StopIteration
            return vals.get_at(state.indices[:len(state.cycles)])
        raise StopIteration

    def __length_hint__(self) -> int:
        return _remaining_for(self._state, self._vals.length_hint())

    def count(self) -> int:
        """Consume the remaining permutations and return how many there were."""
        n = self._vals.load_all()
        remaining = _remaining_for(self._state, n)
        self._state = _End()
        return remaining


def permutations(iterable: Iterable[T], k: int) -> Permutations[T]:
    """Return the ``k``-permutations of the elements of ``iterable`` as lists."""
    return Permutations(iterable, k)


def powerset(iterable: Iterable[T]) -> Iterator[List[Any]]:
    """Yield every subset of the elements as a list, by increasing size.

    Subsets of equal size come in order of their element positions.
    """
    it = iter(iterable)

    def generate() -> Iterator[List[Any]]:
        yield []
        pool: List[T] = []
        for item in it:
            pool.append(item)
            yield [item]
        for size in range(2, len(pool) + 1):
            for combo in itertools.combinations(pool, size):
                yield list(combo)

    return generate()