# dsakit

Classic data structures and algorithms as plain Python functions and small
classes. It has no dependencies beyond the standard library.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `rotate_left`, `max_subarray_sum`, `two_sum`, `sort_colors`, `merge_intervals`, `max_profit`, `trapped_water`, `subarray_with_sum`, `leaders`, `product_except_self`, `next_permutation`, `longest_consecutive` |
| `dsakit.matrix` | `spiral_order`, `set_zeroes`, `rotate_clockwise` |
| `dsakit.stacks` | `Stack`, `CircularQueue`, `MinStack`, `TwoStackQueue`, `QueueStack`, `is_valid_parentheses`, `next_greater_elements`, `largest_rectangle_area`, `sliding_window_max`, `evaluate_postfix` |
| `dsakit.linked_lists` | `ListNode`, `MultiNode`, `from_values`, `to_values`, `reverse`, `has_cycle`, `merge_sorted`, `middle`, `remove_nth_from_end`, `is_palindrome`, `add_numbers`, `intersection`, `rotate_right`, `flatten` |
| `dsakit.sorting` | `merge_sort`, `quick_sort`, `heap_sort`, `counting_sort`, `radix_sort` |
| `dsakit.searching` | `binary_search`, `search_rotated`, `find_peak`, `search_matrix`, `kth_largest` |
| `dsakit.trees` | `TreeNode`, `inorder`, `preorder`, `postorder`, `level_order`, `zigzag_level_order`, `vertical_order`, `height`, `diameter`, `is_balanced`, `lowest_common_ancestor`, `tree_paths`, `is_symmetric`, `invert`, `max_path_sum`, `serialize`, `deserialize` |
| `dsakit.union_find` | `UnionFind` |
| `dsakit.graphs` | `bfs`, `dfs`, `has_cycle_undirected`, `has_cycle_directed`, `topological_sort`, `is_bipartite`, `find_bridges`, `articulation_points`, `strongly_connected_components`, `can_color` |
| `dsakit.weighted` | `Edge`, `NegativeCycleError`, `dijkstra`, `bellman_ford`, `prim_mst_cost`, `kruskal_mst_cost`, `floyd_warshall` |
| `dsakit.dynamic` | `fibonacci`, `knapsack`, `unbounded_knapsack`, `lcs_length`, `edit_distance`, `coin_change`, `lis_length`, `matrix_chain_cost`, `rod_cutting`, `egg_drop`, `min_palindrome_cuts`, `word_break`, `subset_sum`, `min_path_sum`, `unique_paths` |
| `dsakit.backtracking` | `solve_n_queens`, `solve_sudoku`, `solve_maze` |
| `dsakit.trie` | `Trie` |
| `dsakit.lru` | `LRUCache` |
| `dsakit.range_queries` | `SegmentTree`, `FenwickTree` |
| `dsakit.strings` | `longest_palindrome`, `prefix_function`, `kmp_search` |

## Examples

```python
from dsakit.arrays import max_subarray_sum, merge_intervals, two_sum
from dsakit.dynamic import coin_change, edit_distance
from dsakit.graphs import bfs
from dsakit.lru import LRUCache
from dsakit.strings import kmp_search, longest_palindrome
from dsakit.weighted import dijkstra

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])       # 6
two_sum([2, 7, 11, 15], 9)                               # (0, 1)
merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]])     # [[1, 6], [8, 10], [15, 18]]

adjacency = [[1, 2], [0, 3, 4], [0], [1], [1]]
bfs(adjacency, 0)                                        # [0, 1, 2, 3, 4]

weighted = [[(1, 4), (2, 1)], [(3, 1)], [(1, 2), (3, 5)], [(4, 3)], []]
dijkstra(weighted, 0)                                    # [0, 3, 1, 4, 7]

edit_distance("sunday", "saturday")                      # 3
coin_change([1, 2, 5], 11)                               # 3
kmp_search("ABABDABACDABABCABAB", "ABABCABAB")           # [10]
longest_palindrome("babad")                              # 'bab'

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                                             # 1
cache.put(3, 3)
cache.get(2)                                             # None
```

## Conventions

- **Absent results are `None`.** `two_sum`, `subarray_with_sum`,
  `binary_search`, `search_rotated`, `coin_change`, `solve_n_queens`,
  `solve_sudoku`, `solve_maze` and `LRUCache.get` return `None` when there is
  nothing to return.
- **Bad input raises.** Empty input where a value is needed, negative sizes or
  capacities, and out-of-range indices raise `ValueError` or `IndexError`.
  Popping an empty container raises `IndexError`; filling a full
  `CircularQueue` raises `OverflowError`.
- **In place or new.** `sort_colors`, `next_permutation`, `set_zeroes`,
  `rotate_clockwise`, `invert` and the linked-list functions change what they
  are given. The sorting functions, `rotate_left`, `floyd_warshall` and
  `solve_sudoku` return new lists and leave their input alone.
- **Graphs** are sequences of adjacency lists: `adjacency[u]` lists the
  neighbours of node `u`, numbered from 0. Weighted graphs give
  `(neighbour, weight)` pairs, or `Edge(source, target, weight)` values for
  `bellman_ford` and `kruskal_mst_cost`. Unreachable distances are
  `math.inf`; `bellman_ford` raises `NegativeCycleError` when a negative cycle
  is reachable.
- **Linked lists** are built with `from_values` and read back with
  `to_values`; a `ListNode` is also iterable over its values.
- **Trees** use `TreeNode(value, left, right)`. `serialize` writes a
  comma-separated preorder listing with `null` for missing children, and
  `deserialize` reads it back for integer values.
- `counting_sort` and `radix_sort` take non-negative integers only; `Trie`
  takes words of the letters `a`–`z` only. `FenwickTree` positions are
  1-based; `SegmentTree.range_sum` bounds are 0-based and inclusive.

## What it does not do

dsakit is a library only: it has no command-line tool, and nothing in it reads
or writes files.