# algoshelf

A shelf of classic algorithms and data structures, written in plain Python
with no third-party dependencies. Each module covers one family of problems
and can be imported and tested on its own.

## Installation

```
pip install algoshelf
```

For running the test suite:

```
pip install "algoshelf[test]"
pytest
```

## What is on the shelf

| Module | Contents |
| --- | --- |
| `algoshelf.traversal` | `Graph` (`add_edge`, `neighbours`, `bfs`, `dfs`), `topological_sort` by depth-first finishing order, `kahn_topological_sort` (raises `CycleError` on cyclic input) |
| `algoshelf.paths` | `dijkstra` shortest distances on undirected edges (`math.inf` for unreachable vertices), `has_negative_cycle` by Bellman–Ford from vertex 0 |
| `algoshelf.spanning` | `Edge`, `UnionFind` (`find`, `connected`, `merge`), `kruskal` minimum spanning tree |
| `algoshelf.heap` | `Heap`, smallest-first or largest-first (`min_heap=False`), with `push`, `top`, `pop` |
| `algoshelf.sorting` | `heap_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort`, `shell_sort`, `tim_sort`, `tree_sort`; each returns a new list |
| `algoshelf.linked_list` | `Node`, `LinkedList` (`insert_at_head`, `insert_at_tail`, `insert_at`), `has_cycle` by tortoise and hare |
| `algoshelf.stack_queue` | `Stack` (`push`, `pop`, `top`) and `TwoStackQueue` (`push`, `pop`, `front`) |
| `algoshelf.trie` | `Trie` with `add_word` and whole-word `search` |
| `algoshelf.number_theory` | `sieve`, `is_prime`, `factorial`, `fibonacci`, `fibonacci_top_down`, `fibonacci_bottom_up`, `gcd`, `modular_exponentiation` |
| `algoshelf.dynamic` | `knapsack_top_down`, `knapsack_bottom_up`, `longest_common_subsequence`, `longest_palindromic_subsequence`, `min_deletions_to_palindrome`, `max_subarray_sum`, `longest_subarray_with_sum` |
| `algoshelf.text` | `is_matching`, `is_balanced`, `reverse_string`, `poly_hash`, `rabin_karp`, `permutations`, `subsets` |
| `algoshelf.postfix` | `evaluate_postfix`, `format_postfix` and the `algoshelf-postfix` command |
| `algoshelf.arrays` | `insert_at_start`, `find_repeating_and_missing`, `spiral_order`, `wave_order` |
| `algoshelf.backtracking` | `n_queens` (a generator of placements), `format_board`, `is_valid_placement`, `solve_sudoku`, `tower_of_hanoi` (a generator of moves) |

A few behaviours worth knowing:

- `tree_sort` stores equal values once, so duplicates are dropped.
- `Stack.pop` on an empty stack returns `None`; `Stack.top`, `Heap.top`,
  `Heap.pop` and the `TwoStackQueue` methods raise `IndexError` when empty.
- `solve_sudoku` checks rows and columns only, not 3 by 3 boxes, and
  returns `None` when the grid cannot be filled.
- `rabin_karp` reports every window whose hash equals the pattern's hash.

## Examples

Graph traversal:

```python
from algoshelf.traversal import Graph

g = Graph()
for u, v in [(0, 1), (0, 4), (1, 2), (2, 3), (2, 4), (3, 4), (3, 5)]:
    g.add_edge(u, v, True)

g.bfs(0)   # [0, 1, 4, 2, 3, 5]
g.dfs(0)   # [0, 1, 2, 3, 4, 5]
```

Sorting:

```python
from algoshelf.sorting import merge_sort, tim_sort

merge_sort([4, 3, 5, 6, 1, 2])   # [1, 2, 3, 4, 5, 6]
tim_sort([1, 3, 5, 2, 4])        # [1, 2, 3, 4, 5]
```

Numbers and strings:

```python
from algoshelf.number_theory import gcd, modular_exponentiation
from algoshelf.text import is_balanced

gcd(6, 9)                            # 3
modular_exponentiation(2, 10, 8000)  # 1024
is_balanced("({[]})")                # True
is_balanced("(()))")                 # False
```

Dynamic programming:

```python
from algoshelf.dynamic import longest_common_subsequence, min_deletions_to_palindrome

longest_common_subsequence("aggtab", "gxtxayb")  # 4
min_deletions_to_palindrome("aebcbda")           # 2
```

Postfix expressions:

```python
from algoshelf.postfix import evaluate_postfix, format_postfix

evaluate_postfix("abc*+", {"a": 1, "b": 2, "c": 3})  # 7.0
format_postfix("abc*+", [1, 2, 3])                   # "1 2 3 * +"
```

## Command line

The postfix evaluator can be run as a command:

```
algoshelf-postfix
```

It reads a postfix expression whose operands are single letters (from the
first argument, or from a prompt when none is given), asks for the value of
each letter, then prints the expression with the values filled in and its
result. The operators are `+`, `-`, `*`, `/` and `^`. On a malformed
expression or a bad value it prints an error and exits with status 1.

## What is not included

The package has no binary search tree and no rebuilding of a binary tree
from its preorder and inorder traversals. Apart from `algoshelf-postfix`,
everything is used as a library; there are no other commands.