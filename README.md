# algocollection

A small library of classic algorithms and data structures, written as plain,
readable Python with no third-party dependencies. It is meant for study and for
quick use in scripts.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algocollection.sorting`

Each sort takes an iterable and returns a new sorted list; the input is left
untouched.

- `insertion_sort`, `exchange_insertion_sort`, `cocktail_sort`, `cycle_sort`,
  `pancake_sort`, `merge_sort` (stable), `quick_sort` (last-element pivot),
  `heap_sort`
- `bubble_sort(values, before)`, where `before(a, b)` is true when `a` belongs
  ahead of `b`
- `merge_sorted(left, right)` merges two sorted sequences, taking from `left`
  on ties
- `bin_sort(values)` and `radix_sort(values)` for non-negative integers
  (negative values raise `ValueError`)
- `radix_passes(values)` yields the list after each base-10 digit pass
- `counting_sort(values, limit=100001)`: a stable counting sort of integers in
  `range(limit)`; values outside it raise `ValueError`
- `sort_characters(text)` returns the characters of a string in code-point
  order; only code points up to 255 are accepted

```python
from algocollection.sorting import merge_sort, bubble_sort, radix_passes

merge_sort([12, 11, 13, 5, 6, 7])              # [5, 6, 7, 11, 12, 13]
bubble_sort([3, 1, 2], lambda a, b: a > b)     # [3, 2, 1]
list(radix_passes([170, 45, 75]))              # one list per digit pass
```

### `algocollection.text_search`

- `kmp_search(text, pattern)` returns the start index of every occurrence,
  overlapping ones included; an empty pattern raises `ValueError`
- `build_lps(pattern)` returns the prefix-function (longest proper prefix that
  is also a suffix) table
- `edit_distance(word1, word2)` returns the Levenshtein distance

```python
from algocollection.text_search import kmp_search, edit_distance

kmp_search("aaaa", "aa")                 # [0, 1, 2]
edit_distance("horse", "ros")            # 3
```

### `algocollection.graphs`

- `RootedTree(size, edges, root=0)`: a tree on nodes `0..size-1`, built from
  exactly `size - 1` connecting edges. It answers `depth(node)`, `lca(u, v)`,
  `distance(u, v)` and `meeting_point(r, u, v)` (the pairwise lowest common
  ancestor with the smallest total distance to `r`, `u` and `v`) by binary
  lifting. Bad node numbers or edge sets raise `ValueError`.
- `Digraph(vertices)` with `add_edge(v, w)` and `topological_sort()`, which
  returns vertices in reverse depth-first finishing order. Cycles are not
  detected; for a graph with a cycle the result is still that order.

### `algocollection.dynamic`

- `minimum_initial_health(dungeon)`: least starting health to cross a grid
  from top-left to bottom-right moving right or down, keeping health at least 1
- `matrix_chain_cost(dims)`: fewest scalar multiplications for a matrix chain
  where matrix `k` is `dims[k - 1] x dims[k]`
- `digit_removal_steps(n)`: steps to reach zero by subtracting the largest
  digit each time
- `digit_sum(n, base=10)`: sum of the digits of `n` in `base`

### `algocollection.structures`

- `running_medians(values)`: the median of every prefix
- `ListNode` (with `ListNode.from_iterable` and iteration over values) and
  `merge_sorted_lists(a, b)`, which relinks the nodes of two sorted lists
- `MaxHeap` with `insert`, `delete` (raises `ValueError` when the value is
  absent), `len()` and iteration in storage order
- `LinkedQueue` with `enqueue`, `dequeue` (returns the front value, raises
  `IndexError` when empty), `len()`, iteration and a printable `str()`
- `stock_span(prices)`
- `evaluate_postfix(expression)`: single-digit operands, `+ - * /` and `^`;
  `/` truncates toward zero and `^` is bitwise exclusive or
- `linear_search(values, key)`: index of the first match, or `-1`

```python
from algocollection.structures import evaluate_postfix, stock_span

evaluate_postfix("23*5+")                        # 11
stock_span([100, 80, 70, 60, 75, 85])            # [1, 1, 1, 1, 4, 6]
```

### `algocollection.puzzles`

- `parity(n)` returns `Parity.EVEN` or `Parity.ODD` (equal to `"even"` and
  `"odd"`)
- `boxes_needed(a, b, c, d)`: how many bags of capacity `d` hold the three
  boxes packed in order
- `classify_mixture(a, b)` returns `Mixture.SOLUTION`, `Mixture.LIQUID`,
  `Mixture.SOLID`, or `None` when both amounts are zero

## What it does not do

This is a library only. It installs no command-line program and does not read
problem input from standard input or write answers to standard output; call the
functions from your own code.