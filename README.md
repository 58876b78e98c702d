# dsakit

A small collection of classic algorithms and data structures in plain Python,
with no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `dsakit.arrays`: `three_sum_triplets`, `find_duplicates`,
  `count_perfect_squares`, `next_smaller_or_equal`, `sort_colors`,
  `max_subarray_sum` (Kadane), `merge_sort`
- `dsakit.matrix`: `from_row_major`, `from_column_major`, `transpose`, `add`,
  `multiply`, `format_matrix`
- `dsakit.strings`: `build_lps`, `kmp_search`, `z_array`, `find_substring`
  (returns `None` when absent), `is_palindrome`
- `dsakit.search`: `lower_bound` (returns `-1` when every element is smaller),
  `median_of_sorted`
- `dsakit.dp`: `has_subarray_sum`, `rob`
- `dsakit.recursion`: `binary_strings_without_consecutive_ones`,
  `combination_sum`, `fibonacci`, `reverse_in_place`, `subsequences`,
  `sum_accumulated`, `sum_recursive`
- `dsakit.greedy`: `min_platforms`
- `dsakit.stack`: a bounded `Stack` (`push`, `pop`, `peek`, `len()`, iteration
  from bottom to top) raising `StackOverflow` when full and `StackUnderflow`
  when empty
- `dsakit.disjoint_set`: `DisjointSet` over nodes `0..n` with `find`,
  `union_by_rank` and `union_by_size`; the unions return `False` when both
  nodes were already in one set
- `dsakit.graph`: `bfs`, `dfs` (adjacency matrices), `build_ratio_graph`,
  `bellman_ford` (unreachable vertices are `inf`; raises `NegativeCycleError`),
  `dijkstra`, `floyd_warshall` (`-1` marks a missing edge), `topo_sort_kahn`,
  `topo_sort_dfs`, `add_undirected_edge`, `has_undirected_cycle`

## Examples

```python
from dsakit.strings import kmp_search
from dsakit.graph import bfs
from dsakit.recursion import combination_sum

kmp_search("abababab", "abab")         # [0, 2, 4]
combination_sum([2, 3, 6, 7], 7)       # [[2, 2, 3], [7]]

adjacency = [
    [0, 1, 1, 1, 0, 0, 0],
    [1, 0, 1, 0, 0, 0, 0],
    [1, 1, 0, 1, 1, 0, 0],
    [1, 0, 1, 0, 1, 0, 0],
    [0, 0, 1, 1, 0, 1, 1],
    [0, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 1, 0, 0],
]
bfs(adjacency, 2)                      # [2, 0, 1, 3, 4, 5, 6]
```

## Interactive tools

Two menu-driven programs read their input from standard input:

```
dsakit-matrix [--size N]       # square matrix entry, transpose, addition and multiplication (default 3x3)
dsakit-stack [--capacity N]    # push, pop, peek and display on a bounded stack (default capacity 100)
```

Both stop when their exit choice is given or the input runs out.

## What it does not do

- `build_ratio_graph` only builds the graph of ratios; there is no function
  that answers division queries over it.
- Cycle detection covers undirected graphs only (`has_undirected_cycle`);
  there is no directed-graph cycle check.
- There is no linked-list or heap-sort implementation.