# algoritma

A collection of classic algorithms and small data structures in plain Python,
with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `algoritma.arithmetic` | `is_factorial`, `is_prime`, `power_recursive`, `power_linear`, `fibonacci`, `parity` (returns a `Parity` enum: `EVEN` or `ODD`) |
| `algoritma.primality` | Miller–Rabin test: `reverse_binary`, `modular_exponent`, `is_probable_prime` |
| `algoritma.metrics` | `mean_squared_error` |
| `algoritma.bits` | `count_set_bits`, `count_bits_flip`, `bit_count`, `hamming_distance` (integers or equal-length strings) |
| `algoritma.kadane` | `max_subarray_sum` |
| `algoritma.knight_tour` | `knight_tour`, `format_board` |
| `algoritma.minimax` | `minimax`, `optimal_value` |
| `algoritma.n_queens` | `is_safe`, `solve_n_queens` (a generator of every placement), `format_board` |
| `algoritma.rat_maze` | `solve_maze` (moves right or down only) |
| `algoritma.subarray_sum` | `subarray_sum` |
| `algoritma.sudoku` | `is_possible`, `solve_sudoku`, `format_grid` (highlights filled-in cells with terminal colour codes) |
| `algoritma.wildcard` | `wildcard_match` (`?` and `*` patterns) |
| `algoritma.huffman` | `HuffmanNode`, `build_huffman_tree`, `huffman_codes` |
| `algoritma.knapsack` | `Item`, `fractional_knapsack` |
| `algoritma.sorting` | `bead_sort`, `bubble_sort`, `bucket_sort` (values in `[0, 1)`), `snail_sort` (spiral read-out of a square matrix) |
| `algoritma.doubly_linked_list` | `DoublyLinkedList` with `push_front` and an in-place `bubble_sort` |
| `algoritma.bst` | `BinarySearchTree` with `insert`, `remove`, membership and four traversals |
| `algoritma.hash_table` | `HashTable` with separate chaining and `format_table` |

## Examples

```python
from algoritma.arithmetic import fibonacci, is_factorial, parity
from algoritma.bits import count_bits_flip, hamming_distance
from algoritma.subarray_sum import subarray_sum
from algoritma.wildcard import wildcard_match
from algoritma.sorting import snail_sort

fibonacci(10)                       # 55
is_factorial(479001600)             # True (12!)
parity("42")                        # Parity.EVEN
count_bits_flip(10, 20)             # 4
hamming_distance(11, 2)             # 2
subarray_sum(0, [-7, -3, -2, 5, 8]) # 1
wildcard_match("baaabab", "ba*ab")  # True

snail_sort([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
# [1, 2, 3, 6, 9, 8, 7, 4, 5]
```

Solving puzzles:

```python
from algoritma.n_queens import solve_n_queens, format_board
from algoritma.sudoku import solve_sudoku, format_grid

for board in solve_n_queens(4):
    print(format_board(board))

# solve_sudoku takes a 9x9 grid with 0 for empty cells and returns a
# solved copy, or None when there is no solution.
```

Greedy methods:

```python
from algoritma.knapsack import Item, fractional_knapsack

total, picks = fractional_knapsack(50, [Item(10, 60), Item(20, 100), Item(30, 120)])
# total == 240.0
# picks == [(10, 60), (20, 100), (20, 80.0)]
```

Containers:

```python
from algoritma.hash_table import HashTable
from algoritma.bst import BinarySearchTree

table = HashTable(5)
table.insert(21)
table.insert(37)
37 in table          # True
table.remove(37)
print(table.format_table())

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.inorder()       # [20, 30, 40, 50, 70]
tree.remove(30)      # raises KeyError for a value that is not in the tree
```

## Errors

Invalid input raises an exception rather than returning a sentinel: for
example `mean_squared_error` raises `ValueError` for sequences of different
lengths, `parity` for text that is not all digits, `fibonacci` for a negative
argument, and `max_subarray_sum` for an empty input.

## What it does not do

The package is a library only. It has no command-line interface and no
interactive prompts; every function is called from Python code.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.