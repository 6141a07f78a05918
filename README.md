# algobox

algobox is a collection of classic algorithms in plain Python. It covers sorting, number-base conversion, graphs, trees, small containers, bit tricks and dynamic programming, plus three contest-problem solvers. It has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

## Modules

- `algobox.sorting`: the sorting functions return a new list and leave their input unchanged. They are:
  - `bubble_sort`
  - `selection_sort`
  - `shell_sort`
  - `heap_sort`
  - `merge_sort`
  - `quick_sort`
  - `counting_sort` and `radix_sort`, which take non-negative integers only
  - `dutch_flag_sort`, which takes the values 0, 1 and 2 only

  The module also has `sort_by_length_desc` for strings. For `(roll, name)` pairs it has `sort_by_name` and `sort_by_roll`.
- `algobox.numeral`: functions that convert between number bases:
  - `binary_to_decimal`, `octal_to_decimal`
  - `decimal_to_binary`, `decimal_to_octal`
  - `decimal_to_hexadecimal`, `hexadecimal_to_decimal`

  Binary and octal values are held as ints whose decimal digits are the digits in that base. For example, binary 101 is the int `101`. The module also has `int_to_roman`, which covers 0 to 3999.
- `algobox.graphs`: contains the following:
  - `Graph`, a directed graph with `add_edge`, `bfs` and `dfs`.
  - `prim_mst`, which finds a minimum spanning tree from an adjacency matrix and returns `(parent, vertex, weight)` edges.
  - `update_matrix`, which gives each cell's distance to the nearest zero.
- `algobox.trees`: defines the node types `TreeNode` and `NaryNode`. It has `inorder_traversal`, `level_order` and `vertical_traversal`.
- `algobox.containers`: has `BoundedQueue` and `LinkedStack`.
  - `BoundedQueue` has a fixed capacity, 5 by default. Its `reversed_items` method drains the queue and returns its items from last to first.
  - Errors are raised as `QueueFullError`, `QueueEmptyError` and `StackEmptyError`.
- `algobox.bits`: has `find_two_unique`, `find_unique_among_triplets` and `max_subset_with_nonzero_and`.
- `algobox.linalg`: has `determinant`, which computes an exact determinant by cofactor expansion.
- `algobox.arrays`: has these functions:
  - `max_profit_single` and `max_profit_multiple`, for stock prices
  - `three_sum`
  - `sliding_window_max`
  - `linear_search` and `binary_search`
  - `longest_palindromic_substring`
- `algobox.combinatorics`: has these functions:
  - `pascal_triangle`
  - `sorted_permutations`
  - `all_subsets`
  - `subsequences`
  - `all_substrings`
  - `subset_sum_exists`
  - `tower_of_hanoi`, which returns a list of `(disk, from_rod, to_rod)` moves
  - `can_partition_k_subsets`
- `algobox.dynamic`: has `knapsack` for the 0/1 knapsack problem. It also has `lcs_table` and `lcs_length` for the longest common subsequence.

## Example

```python
from algobox.sorting import merge_sort
from algobox.numeral import int_to_roman
from algobox.graphs import Graph

print(merge_sort([5, 2, 9, 1]))   # [1, 2, 5, 9]
print(int_to_roman(1994))         # MCMXCIV

g = Graph(4)
for v, w in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    g.add_edge(v, w)
print(g.bfs(2))                   # [2, 0, 3, 1]
```

## Contest solvers

Three commands read test cases from a file named on the command line, or from standard input if no file is named. They print one answer per test case.

| Command | Input for each test case |
| --- | --- |
| `algobox-darea` | A point count followed by the points. The answer is the least total area of two rectangles covering the points. |
| `algobox-shroute` | A station count and a query count, then the station codes and the 1-based destinations. All travel times for a test case go on one line. |
| `algobox-bittup` | An `n m` pair. The answer is `(2**n - 1) ** m` modulo 1000000007. |

Each command expects the number of test cases first. Malformed input produces an error message and exit status 1.

```
algobox-darea < input.txt
algobox-shroute input.txt
algobox-bittup < input.txt
```

The same logic is available as functions:
- `algobox.darea.min_total_area`
- `algobox.shroute.shortest_routes`
- `algobox.bittup.count_bit_tuples`

## What it does not include

The queue and the stack are library classes only. There is no interactive menu for driving them. The sorting, search and conversion functions have no commands of their own. Call them from Python.

## Running the tests

```
pip install .[test]
pytest
```