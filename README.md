# cpsolve

Algorithmic building blocks and solvers for classic programming-contest
problems, usable as a plain Python library or from the command line. It has
no dependencies beyond the standard library.

## Modules

- `cpsolve.structures`: Fenwick trees and a segment tree.
  - `FenwickTree`: zero-indexed point updates (`add`, `set`) and inclusive
    sums (`prefix_sum`, `range_sum`).
  - `RangeFenwick`: one-indexed tree with `rsq`, `range_rsq`, `update`, and
    a linear-time `from_values` constructor.
  - `RangeUpdatePointQuery`: add to a range, read one position.
  - `RangeUpdateRangeQuery`: add to a range, sum over a range
    (`prefix_sum`, `range_sum`).
  - `PrefixFenwick`: half-open prefix sums (`query`) and `lower_bound`
    prefix search.
  - `MinSegmentTree`: point assignment and minimum over `[b, e)`; empty
    ranges give `math.inf`.
- `cpsolve.graphs`: `euler_tour`, `mst_prim` (minimum or, with
  `maximum=True`, maximum spanning tree), `dijkstra`, `toposort`,
  `kahn_toposort`, and binary lifting with `tree_jump`, `jump` and `lca`.
  `mst_prim` raises `ValueError` for a disconnected graph and
  `kahn_toposort` for a graph with a cycle.
- `cpsolve.trees`: `walk_towards`, `subtree_queries`, `planet_queries`,
  `mootube`.
- `cpsolve.paths`: `flight_discount`, `superbull`, `count_routes`,
  `quantum_superposition`.
- `cpsolve.queries`: `range_update_queries`, `pizzeria_queries`,
  `concert_tickets`, `traffic_lights`, `advertisement`.
- `cpsolve.dp`: `reachable_subset_sums`, `book_shop`, `coin_combinations`,
  `removing_digits`, `array_description`, `hoof_paper_scissors`,
  `increasing_subsequence`.
- `cpsolve.number_theory`: `primes_below`, `common_divisors`, `mod_pow`,
  `exponentiation`, `inner_count`.
- `cpsolve.grids`: `labyrinth` (returns the `LRUD` path or `None`),
  `cross_country_skiing`, `perimeter`.
- `cpsolve.contests`: `split_max`, `apple_game_winner`, `crossing`,
  `haybale_median`.

## Installation

```
pip install .
```

## Example

```python
from cpsolve.structures import FenwickTree
from cpsolve.graphs import dijkstra

tree = FenwickTree(5)
tree.add(2, 7)
tree.add(4, 3)
print(tree.range_sum(1, 4))   # 10

graph = [[(1, 4), (2, 1)], [], [(1, 2)]]
print(dijkstra(graph, 0))     # [0, 3, 1]
```

## Command line

The package installs a `cpsolve` command that reads a problem's
whitespace-separated input, solves it and prints the answer lines:

```
cpsolve cses-1073 < input.txt
cpsolve --io ccski usaco-380
cpsolve --help
```

The positional argument names the problem, for example `cses-1193`,
`cf-687C`, `kattis-quantumsuperposition` or `usaco-895`; `cpsolve --help`
lists every accepted name. With `--io NAME` the input is read from
`NAME.in` and the answer written to `NAME.out` instead of the standard
streams. Input that a solver rejects is reported on standard error and the
command exits with status 1.

## Running the tests

```
pip install .[test]
pytest
```