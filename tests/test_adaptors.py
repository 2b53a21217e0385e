import pytest
from hypothesis import given
from hypothesis import strategies as st

from iteradapt.adaptors import (
    Position,
    pad_using,
    take_while_inclusive,
    unique,
    unique_by,
    with_position,
)


def test_unique_by_prefix():
    xs = ["aaa", "bbbbb", "aa", "ccc", "bbbb", "aaaaa", "cccc"]
    assert list(unique_by(xs, lambda x: x[:2])) == ["aaa", "bbbbb", "ccc"]


def test_unique_by_reversed_input():
    xs = ["aaa", "bbbbb", "aa", "ccc", "bbbb", "aaaaa", "cccc"]
    assert list(unique_by(reversed(xs), lambda x: x[:2])) == ["cccc", "aaaaa", "bbbb"]


def test_unique():
    assert list(unique([0, 1, 2, 3, 2, 1, 3])) == [0, 1, 2, 3]
    assert list(unique(reversed([0, 1, 2, 3, 2, 1, 3]))) == [3, 1, 2, 0]
    assert list(unique([0, 1])) == [0, 1]
    assert list(unique([])) == []


@given(st.lists(st.integers(0, 255)))
def test_unique_invariants(values):
    result = list(unique(values))
    assert len(result) == len(set(result))
    assert set(result) == set(values)
    indices = [values.index(x) for x in result]
    assert indices == sorted(indices)


@given(st.lists(st.integers(0, 255)))
def test_unique_by_keys_distinct(values):
    result = list(unique_by(values, lambda x: x % 50))
    keys = [x % 50 for x in result]
    assert len(keys) == len(set(keys))
    assert set(keys) == {x % 50 for x in values}


def test_pad_using_empty():
    assert list(pad_using([], 1, lambda _: 1)) == [1]


def test_pad_using_fills_with_index():
    assert list(pad_using([0, 1, 2], 5, lambda n: n)) == [0, 1, 2, 3, 4]


def test_pad_using_filler_not_called_when_long_enough():
    def boom(_):
        raise AssertionError("filler must not be called")

    assert list(pad_using([0, 1, 2], 1, boom)) == [0, 1, 2]


@given(st.lists(st.integers(0, 255)))
def test_pad_using_length(values):
    result = list(pad_using(values, 10, lambda i: min(5 * i, 255)))
    assert len(result) == max(len(values), 10)
    assert result[: len(values)] == values


def test_take_while_inclusive_includes_first_failure():
    assert list(take_while_inclusive([1, 2, 150, 3], lambda x: x < 100)) == [1, 2, 150]


def test_take_while_inclusive_all_pass():
    assert list(take_while_inclusive([1, 2, 3], lambda x: x < 100)) == [1, 2, 3]


def test_take_while_inclusive_leaves_rest():
    source = iter([1, 200, 3, 4])
    assert list(take_while_inclusive(source, lambda x: x < 100)) == [1, 200]
    assert list(source) == [3, 4]


def test_with_position_empty():
    assert list(with_position([])) == []


def test_with_position_single():
    assert list(with_position(["a"])) == [(Position.ONLY, "a")]


def test_with_position_two():
    assert list(with_position([1, 2])) == [(Position.FIRST, 1), (Position.LAST, 2)]


def test_with_position_many():
    assert list(with_position([1, 2, 3, 4])) == [
        (Position.FIRST, 1),
        (Position.MIDDLE, 2),
        (Position.MIDDLE, 3),
        (Position.LAST, 4),
    ]


@given(st.lists(st.integers(), min_size=2))
def test_with_position_invariants(values):
    result = list(with_position(values))
    assert [item for _, item in result] == values
    assert result[0][0] is Position.FIRST
    assert result[-1][0] is Position.LAST
    assert all(pos is Position.MIDDLE for pos, _ in result[1:-1])


@pytest.mark.parametrize("n", [0, 1, 5])
def test_pad_using_generator_source(n):
    result = list(pad_using((i for i in range(n)), 3, lambda i: -i))
    assert result == list(range(n)) + [-i for i in range(n, 3)]