# disjointsets

Disjoint-set (union-find) data structures with union by rank and path
compression, and the classic offline algorithms built on them:

- `disjointsets.dsu` – a plain union-find, `Dsu`, and a query runner.
- `disjointsets.weighted` – a weighted union-find, `WeightedDsu`, which keeps
  the difference of weights between elements of the same set, a solver for
  the depth-determination problem, and a query runner.
- `disjointsets.offline_minimum` – the offline minimum problem: given a fixed
  sequence of inserts and extract-min operations, report every extracted key.
- `disjointsets.lca` – Tarjan's offline lowest-common-ancestor algorithm.
- `disjointsets.debug_print` – helpers that render named values and
  containers in a compact form for diagnostic output.

The package has no runtime dependencies.

## Installation

```
pip install disjointsets
```

To run the test suite:

```
pip install "disjointsets[test]"
pytest
```

## Library use

### Union-find

Elements are the integers `0 .. n-1`. An element outside that range raises
`IndexError`; a negative size raises `ValueError`.

```python
from disjointsets.dsu import Dsu

dsu = Dsu(5)
dsu.unite(0, 1)     # True: two sets were merged
dsu.unite(1, 0)     # False: already in one set
dsu.unite(3, 4)
dsu.is_same(0, 1)   # True
dsu.is_same(1, 3)   # False
dsu.leader(1) == dsu.leader(0)  # True
len(dsu)            # 5
```

`answer_queries(n, queries)` runs `(command, x, y)` triples on a fresh `Dsu(n)`:
command `0` unites `x` and `y`, any other command appends
`is_same(x, y)` to the returned list of booleans.

### Weighted union-find

`unite(x, y, w)` merges the sets of `x` and `y` so that
`weight(y) - weight(x) == w`; it raises `ValueError` if the two are already in
one set. `weight(x)` is the weight of `x` relative to its leader, and
`diff(x, y)` returns `weight(y) - weight(x)`, raising `ValueError` when they
are in different sets.

```python
from disjointsets.weighted import WeightedDsu

wdsu = WeightedDsu(4)
wdsu.unite(0, 1, 5)
wdsu.unite(1, 2, 3)
wdsu.diff(0, 2)     # 8
wdsu.is_same(0, 3)  # False
```

`answer_queries(n, queries)` runs `(0, x, y, z)` queries, which record
`weight(y) - weight(x) = z` unless `x` and `y` are already related, and
`(1, x, y)` queries, whose answers are the difference or `None` when it is
unknown.

`depth_determination(n, queries)` starts from `n` single-node trees and
answers depth queries while the forest grows:

- `(1, v)` asks for the depth of `v` in its tree;
- `(2, r, v)` makes the root `r` a child of `v`, which must be in another tree.

It raises `ValueError` when `r` is not a root, when `r` and `v` share a tree,
or for an unknown command.

```python
from disjointsets.weighted import depth_determination

depth_determination(10, [(2, 0, 1), (1, 0), (1, 1), (2, 3, 2), (2, 2, 0), (1, 2), (1, 3)])
# [1, 0, 2, 3]
```

### Offline minimum

The operation sequence holds the inserted keys, with `-1`
(`disjointsets.offline_minimum.EXTRACT`) standing for an extract-min. The keys
extracted are returned in order. A key inserted twice, or an extract-min on an
empty set, raises `ValueError`.

```python
from disjointsets.offline_minimum import offline_minimum

offline_minimum([3, 7, -1, 2, -1, 8, 1, 5, -1, -1, -1, 0, 6, -1, 4])
# [3, 2, 1, 5, 7, 0]
```

### Offline lowest common ancestor

`offline_lca(children, queries)` takes a tree rooted at node `0`, given as the
list of children of each node, and the `(u, v)` pairs to query, and answers
every query in one depth-first pass. A node outside the tree raises
`IndexError`; a node not reachable from the root raises `ValueError`.

```python
from disjointsets.lca import offline_lca

offline_lca([[1, 2], [3], [], []], [(3, 2), (3, 1)])
# [0, 1]
```

### Debug formatting

- `format_value(value)` – strings in double quotes, tuples as `(a, b)`, other
  iterables as `[ a b c ]` (mappings by their items), an empty one as
  `<empty container>`, anything else with `str`.
- `format_named(name, value)` – `name: value`; containers end with a newline,
  and a container of containers puts each inner one on its own line, indented
  under the first.
- `split_names(names)` – splits a comma-separated list of expressions at its
  top-level commas, leaving commas inside parentheses or double quotes alone.
- `multi_print(names, *args)` – pairs the names with the values, writes them
  to standard error separated by ` | ` (or newlines around containers), and
  returns the text written. It raises `ValueError` if no value is given or the
  counts differ.

```python
from disjointsets.debug_print import multi_print

multi_print("i, f(a, b)", 3, [1, 2])
# writes and returns "i: 3\nf(a, b): [ 1 2 ]\n"
```

## Command-line tools

Each tool reads whitespace-separated integers from standard input and writes
one answer per line.

### `disjointsets-union-find`

Input: `N Q`, then `Q` lines `com x y`. With `com = 0` the sets of `x` and `y`
are merged; otherwise `1` is printed if `x` and `y` are in the same set and
`0` if not.

```
printf '5 3\n0 1 2\n1 1 2\n1 0 2\n' | disjointsets-union-find
1
0
```

### `disjointsets-weighted`

Input: `n q`, then `q` queries. `0 x y z` records `weight(y) - weight(x) = z`
(ignored when `x` and `y` are already related); `1 x y` prints
`weight(y) - weight(x)`, or `?` when the difference is unknown.

```
printf '3 3\n0 0 1 5\n1 0 1\n1 0 2\n' | disjointsets-weighted
5
?
```

### `disjointsets-lca`

Input: `n`, then for each node `i` from `0` to `n - 1` a line `k c1 ... ck`
listing its children, then `q` and `q` lines `u v`. The tree is rooted at
node `0`; the lowest common ancestor of each pair is printed.

```
printf '3\n2 1 2\n0\n0\n2\n1 2\n0 1\n' | disjointsets-lca
0
0
```