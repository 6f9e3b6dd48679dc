# algokit

Small, dependency-free implementations of classic algorithms, grouped by topic.
Every function takes ordinary Python values (ints, strings, lists, tuples) and
returns new values; errors in the input raise `ValueError` (or
`ZeroDivisionError` for `lcm(0, 0)`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.numbers`

- `gcd(a, b)`: greatest common divisor of two non-negative integers.
- `lcm(a, b)`: least common multiple; raises `ZeroDivisionError` for `0, 0`.
- `catalan(n)`: the n-th Catalan number.
- `find_digits(n)`: how many digits of `n` (counting repeats, skipping zeros) divide `n`.
- `sieve_of_eratosthenes(n)`: all primes up to and including `n`.
- `taylor_exp(x, n)`: approximation of e**x using `n` Taylor terms (Horner's rule).
- `power(base, exponent)`: integer power by repeated squaring.
- `positive_mod(a, b)`: remainder shifted to be non-negative for positive `b`.
- `lowest_set_bit(a)`: value of the lowest set bit of a non-zero integer.
- `xor_hash(bits, key)`: XORs the first eight characters of two strings and joins the resulting codes as decimal text.

### `algokit.arrays`

- `merge_sort`, `quick_sort`, `bubble_sort`: return a new ascending list.
- `median(items)`: middle element after sorting; the lower middle for even lengths.
- `pair_sums(items, target)`: pairs summing to `target`, found with two pointers over the sorted items.
- `target_sum_pairs(items, target)`: pairs summing to `target`, skipping pairs whose values were already used as a first value.
- `leaders(items)`: the last element, then every element larger than all to its right, scanning leftwards.
- `most_frequent_letter(text)`: most frequent lowercase letter; ties go to the later letter.
- `matrix_multiply(a, b)`: product of two matrices given as lists of rows.
- `knapsack(weights, values, capacity)`: best total value for the 0/1 knapsack.

### `algokit.structures`

- `TreeNode` and `ListNode` dataclasses (`value`, `left`/`right` or `next`).
- `insert_level_order(root, data)`: insert at the first free position in level order.
- `inorder`, `preorder`, `postorder`: traversals returning lists of values.
- `add_one_row(root, value, depth)`: insert a row of nodes at a given depth (1 is the root level).
- `build_linked_list(values, loop_position=0)`: build a list, optionally linking the tail back to a 1-based node.
- `detect_loop(head)`: tortoise-and-hare cycle check.
- `reverse_list(head)`: reverse in place and return the new head.
- `list_values(head)`: values in order; raises `ValueError` if the list loops.

### `algokit.graphs`

Graphs are iterables of `(u, v)` undirected edges; traversals start from vertices `1` to `vertex_count`.

- `build_adjacency(edges)`: adjacency lists as a dict.
- `dfs_order(edges, vertex_count)`: depth-first visiting order.
- `count_components(vertex_count, edges)`: number of connected components.
- `has_cycle_bfs(edges, vertex_count)` and `has_cycle_dfs(edges, vertex_count)`: cycle detection.
- `two_color_bfs(edges, vertex_count)` and `two_color_dfs(edges, vertex_count)`: a 0/1 colouring per vertex, or `None` if the graph is not bipartite.

### `algokit.recursion`

- `subsequences(text)`: every subsequence including the empty one.
- `sorted_subsequences(text)`: the same, in lexicographic order.

### `algokit.puzzles`

- `assign_bikes(workers, bikes)`: greedy worker-to-bike assignment by Manhattan distance.
- `most_visited_pattern(username, timestamp, website)`: the three-site sequence visited by the most users.
- `number_of_patterns(m, n)` and `number_of_patterns_backtracking(m, n)`: count 3x3 unlock patterns of `m` to `n` keys.
- `discount_prices(sentence, discount)`: apply a percentage discount to every `$<digits>` word.
- `combination_sum(candidates, target)`: all combinations of reusable positive candidates that sum to `target`.

## Examples

```python
from algokit.numbers import gcd, catalan, sieve_of_eratosthenes
from algokit.arrays import knapsack, merge_sort
from algokit.graphs import count_components

gcd(98, 56)                                   # 14
[catalan(i) for i in range(6)]                # [1, 1, 2, 5, 14, 42]
sieve_of_eratosthenes(20)                     # [2, 3, 5, 7, 11, 13, 17, 19]
knapsack([10, 20, 30], [60, 100, 120], 50)    # 220
merge_sort([3, 1, 2])                         # [1, 2, 3]
count_components(4, [(1, 2), (3, 4)])         # 2
```

## What it does not do

algokit is a library only. It has no command-line program and does not read
input from the terminal or files; call the functions from your own code.