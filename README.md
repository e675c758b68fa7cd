# kyotools

A small toolbox for competitive programming in Python.

## Installation

```
pip install .
```

To run the tests, install the test extra with `pip install .[test]` and then run `pytest`.

## What's inside

- `kyotools.cumsum_nd.CumsumND` builds N-dimensional prefix sums. You add values at 0-indexed cells with `add`, call `build()` once, and then `query()` any half-open box `[starts, ends)`. Coordinates outside the grid raise `IndexError`. A wrong number of coordinates raises `ValueError`.
- `kyotools.rangeset.RangeSet` holds a set of disjoint half-open intervals, kept sorted. `insert` merges intervals that overlap or touch. `erase` removes an interval and splits any stored interval that sticks out of it. `has_overlap` tells whether an interval shares a point with a stored one. Intervals that only touch, such as `[1, 2)` and `[2, 3)`, do not count as overlapping. `len()` gives the number of stored intervals, and iterating yields them as `(left, right)` tuples.
- `kyotools.dijkstra.dijkstra(graph, start)` returns the shortest distances from `start`. The graph is an adjacency list of `(to, cost)` pairs with non-negative costs. Unreachable vertices get `kyotools.dijkstra.INF`, which is `2**60`.
- `kyotools.debug.format_value` renders a value as text:
  - strings print as they are;
  - tuples print as `(a, b)`;
  - other iterables print as `[a b c]`.
- `kyotools.debug.de(*args, stream=None)` prints its arguments on one line in cyan. It prints only when the `LOCAL` environment variable is set to something other than empty or `0`.
- `kyotools.utils` holds small helpers:
  - `div_floor` and `div_ceil` divide integers with rounding down or up;
  - `cumsum` computes prefix sums, with a leading zero unless you pass `off=0`;
  - `ipow` raises a value to a power by squaring;
  - `popcount` counts the set bits of a value taken as unsigned 64-bit;
  - `format_values` renders values separated by spaces. Lists of lists print one row per line, and booleans print as `0`/`1`.
- `kyotools.random_gen.Random(seed=None)` generates random test data:
  - `get_int` and `get_double` draw single numbers;
  - `get_vec` draws a list of integers;
  - `get_str` draws a string, lowercase letters by default;
  - `get_tree` draws a random tree on vertices `1..n` from a Prüfer sequence;
  - `yes(p)` returns `True` with probability `p`.

  Without a seed, it seeds from the monotonic clock.

## Examples

```python
from kyotools.cumsum_nd import CumsumND

cs = CumsumND([3, 4])          # a 3 x 4 grid
cs.add([1, 2], 5)
cs.add([0, 0], 1)
cs.build()
cs.query([0, 0], [2, 3])       # 6
```

```python
from kyotools.rangeset import RangeSet

rs = RangeSet()
rs.insert(1, 5)
rs.insert(5, 8)                # merged into [1, 8)
rs.erase(3, 4)                 # now [1, 3) and [4, 8)
list(rs)                       # [(1, 3), (4, 8)]
rs.has_overlap(3, 4)           # False
```

```python
from kyotools.dijkstra import dijkstra

graph = [[(1, 2), (2, 5)], [(2, 1)], []]
dijkstra(graph, 0)             # [0, 2, 3]
```

```python
from kyotools.random_gen import Random

rnd = Random(12345)
rnd.get_str(10, "abc")
rnd.get_tree(5)                # 4 edges, vertices numbered 1..5
```

## Commands

- `kyotools-template` is the empty solution skeleton. It takes no arguments, reads nothing and prints nothing.
- `kyotools-sample` reads an integer `n` from standard input and prints it. If `n` is 100, it prints 1 instead.
- `kyotools-gen [--seed SEED]` prints a random length `n` between 1 and 100. On the next line it prints a random string of `n` letters from `abc`.

## What it does not do

The package has no helpers for reading input. Parse standard input yourself, for example with `sys.stdin.read().split()`.