# iteradapt

Extra iterator adaptors and helper functions that add to what `itertools`
offers. It has no dependencies outside the standard library.

## Installation

```
pip install iteradapt
```

For the test suite:

```
pip install "iteradapt[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `iteradapt.adaptors` | `pad_using`, `take_while_inclusive`, `unique`, `unique_by`, `with_position`, `Position` |
| `iteradapt.zips` | `zip_eq`, `zip_longest` (yielding `Left`, `Right`, `Both`), `multizip` |
| `iteradapt.tuples` | `tuples` (a `Tuples` iterator), `tuple_windows`, `circular_tuple_windows` |
| `iteradapt.combinatorics` | `permutations` (a `Permutations` iterator), `powerset` |
| `iteradapt.collect` | `next_array`, `process_results` (with `ProcessResults`), `multiunzip` |
| `iteradapt.size_hint` | `add`, `add_scalar`, `sub_scalar`, `mul`, `mul_scalar`, `maximum`, `minimum` on `(lower, upper)` length estimates |

## Examples

Pad a short sequence and mark where each element sits:

```python
from iteradapt.adaptors import Position, pad_using, unique, with_position

assert list(pad_using([0, 1, 2], 5, lambda i: i)) == [0, 1, 2, 3, 4]
assert list(unique([0, 1, 2, 3, 2, 1, 3])) == [0, 1, 2, 3]
assert list(with_position("ab")) == [(Position.FIRST, "a"), (Position.LAST, "b")]
```

Zip to the longest input, or insist on equal lengths:

```python
from iteradapt.zips import Both, Left, zip_eq, zip_longest

assert list(zip_longest([1, 2], ["x"])) == [Both(1, "x"), Left(2)]
assert list(zip_eq([1, 2], "ab")) == [(1, "a"), (2, "b")]
# zip_eq raises ValueError once one input ends before the other.
```

Group into fixed-size tuples and keep the leftovers:

```python
from iteradapt.tuples import tuple_windows, tuples

groups = tuples(range(5), 3)
assert list(groups) == [(0, 1, 2)]
assert list(groups.into_buffer()) == [3, 4]
assert list(tuple_windows(range(4), 2)) == [(0, 1), (1, 2), (2, 3)]
```

Combinatorics:

```python
from iteradapt.combinatorics import permutations, powerset

assert list(powerset(range(2))) == [[], [0], [1], [0, 1]]
assert permutations(range(4), 2).count() == 12
```

Collecting:

```python
from iteradapt.collect import multiunzip, next_array, process_results

assert multiunzip([(1, 2, 3), (4, 5, 6)]) == ([1, 4], [2, 5], [3, 6])
assert next_array(iter([1, 2, 3]), 2) == (1, 2)
assert process_results([1, 2, 3], sum) == 6
# An exception instance in the input ends the values and is raised.
```

Size hints:

```python
from iteradapt import size_hint

assert size_hint.add((1, 2), (3, None)) == (4, None)
assert size_hint.minimum((1, 5), (2, None)) == (1, 5)
```

## What it does not do

The package has no lookahead wrappers (peeking several items ahead, putting
items back in front of an iterator), no iterator sources such as repeating an
element a fixed number of times or sharing one iterator between several
handles, and no one-pass minimum-and-maximum helper. It is a library only and
installs no command.