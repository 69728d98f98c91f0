# dsakit

Classic data structures and algorithms in plain Python, with no runtime
dependencies.

## Installation

```
pip install dsakit
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.searching` | `has_pair_with_sum`, `find_positions`, `ternary_search`, `is_subset_sum` |
| `dsakit.numbers` | `is_armstrong`, `binary_to_decimal`, `decimal_to_binary`, `is_prime`, `countdown`, `combination`, `josephus`, `count_digit_one`, `factorial`, `fibonacci`, `fibonacci_series`, `exp_taylor` |
| `dsakit.sorting` | `quick_sort`, `quick_sort_middle_pivot`, `radix_sort`, `heap_sort`, `insertion_sort`, `merge_sort`, `bubble_sort`, `selection_sort`, `merge_sorted_arrays` |
| `dsakit.hashing` | `ChainedHashTable` (separate chaining), `QuadraticProbingMap` (open addressing), `DELETED` marker |
| `dsakit.graphs` | `Graph`, `bfs_order`, `dfs_order`, `topological_sort`, `is_connected`, `has_eulerian_path`, `floyd_warshall`, `format_distances`, `INF`, `color_graph`, `DisjointSet`, `Edge`, `kruskal_mst`, `count_islands` |
| `dsakit.matching` | `BipartiteGraph`, whose `max_matching` uses Hopcroft–Karp |
| `dsakit.huffman` | `HuffmanNode`, `build_tree`, `huffman_codes` |
| `dsakit.dynamic` | `matrix_chain_order`, `minimal_badness` |
| `dsakit.backtracking` | `solve_n_queens`, `rat_in_maze`, `combinations_of`, `keypad_combinations`, `KEYPAD`, `solve_sudoku`, `tower_of_hanoi`, `Move` |
| `dsakit.linked_list` | `LinkedList` |
| `dsakit.doubly_linked` | `DoublyLinkedList` |
| `dsakit.linked_queue` | `LinkedQueue` |
| `dsakit.list_algorithms` | `ListNode`, `from_values`, `to_values`, `merge_sorted`, `is_palindrome`, `swap_nodes`, `k_reverse`, `reorder`, `swap_pairs`, `remove_nth_from_end`, `get_intersection`, `has_cycle` |
| `dsakit.circular_list` | `CircularLinkedList` |
| `dsakit.polynomial` | `Term`, `combine_terms`, `multiply`, `format_terms` |
| `dsakit.trees` | `TreeNode`, `AVLTree`, `build_level_order`, `search`, `insert`, `height`, `level_order`, `is_symmetric` |

## Examples

```python
from dsakit.sorting import radix_sort
from dsakit.graphs import Graph
from dsakit.backtracking import solve_n_queens
from dsakit.linked_list import LinkedList

radix_sort([170, 45, 75, 90, 802, 24, 2, 66])
# [2, 24, 45, 66, 75, 90, 170, 802]

g = Graph(4)
for u, v in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    g.add_edge(u, v)
g.bfs(2)
# [2, 0, 3, 1]

solve_n_queens(4)
# [['..Q.', 'Q...', '...Q', '.Q..'], ['.Q..', '...Q', 'Q...', '..Q.']]

items = LinkedList([10, 20, 30, 40, 50, 60])
items.rotate(4)
list(items)
# [50, 60, 10, 20, 30, 40]
```

Sorting functions return a new list and leave their input unchanged. Removing
from an empty `LinkedList` or `LinkedQueue`, or asking for a position outside
a list, raises an exception; lookups such as `QuadraticProbingMap.get`
return `None` for a missing key, and the hash tables' `delete` methods return
whether a key was removed.

## What it does not do

dsakit is a library only. It has no command-line program and does not read
input interactively; every routine takes its data as arguments and returns
its result.

## Running the tests

```
pip install -e ".[test]"
pytest
```