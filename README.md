# daalab

A small collection of classic algorithms, usable as a library and from the
command line.

- `daalab.arrays`: second smallest and second largest element
  (`second_extremes`), running totals (`prefix_sums`) and a summary of
  repeated values (`duplicate_stats`, returning a `DuplicateStats`).
- `daalab.sorting`: `insertion_sort`, `merge_sort`, `quick_sort`
  (first-element pivot, using `partition`) and `heap_sort` (using
  `build_max_heap` and `max_heapify`). The sort functions return a new sorted
  list and leave their input alone.
- `daalab.searching`: `binary_search` and `ternary_search` over sorted data;
  both return an index of the key or `None`.
- `daalab.knapsack`: greedy `fractional_knapsack` over `Item` objects and the
  dynamic-programming `zero_one_knapsack`, which returns a `KnapsackResult`
  with the best profit and the 1-based indices of the chosen items, listed
  from the last item towards the first.
- `daalab.graphs`: all-pairs shortest paths with `floyd_warshall`, where
  `INF` (99999) marks a missing edge, and `format_distances` to render the
  result as a table. `SAMPLE_GRAPH` is a small three-vertex example.
- `daalab.lcs`: `longest_common_subsequence`, returning an `LcsResult` with
  the length and one longest common subsequence.
- `daalab.benchmark`: time a sorting algorithm on sorted, reverse-sorted and
  random inputs.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from daalab.arrays import duplicate_stats, prefix_sums, second_extremes
from daalab.graphs import SAMPLE_GRAPH, floyd_warshall, format_distances
from daalab.knapsack import Item, fractional_knapsack, zero_one_knapsack
from daalab.lcs import longest_common_subsequence
from daalab.searching import binary_search
from daalab.sorting import merge_sort

prefix_sums([1, 2, 3, 4])            # [1, 3, 6, 10]
second_extremes([5, 1, 9, 3])        # (3, 5)
duplicate_stats([1, 2, 2, 3, 3, 3])  # 2 repeated values, 3 appears 3 times

binary_search(merge_sort([7, 2, 5]), 5)   # 1

fractional_knapsack([Item(weight=10, profit=60), Item(weight=20, profit=100)], 25)
zero_one_knapsack(50, [10, 20, 30], [60, 100, 120])

print(format_distances(floyd_warshall(SAMPLE_GRAPH)))

longest_common_subsequence("ABCBDAB", "BDCABA").length   # 4
```

`second_extremes` raises `ValueError` when given fewer than two values;
`Item` rejects a non-positive weight, and the knapsack functions reject a
negative capacity. `zero_one_knapsack` also rejects weight and profit lists
of different lengths. `floyd_warshall` raises `ValueError` for a matrix that
is not square.

## Command line

Two commands are installed.

`daalab` takes a subcommand and its values as arguments:

```
daalab extremes 5 1 9 3
daalab prefix 1 2 3 4
daalab duplicates 1 2 2 3 3 3
daalab search 5 7 2 5              # key first, then the values
daalab search --method ternary 5 7 2 5
daalab fractional --capacity 50 --item 60 10 --item 100 20 --item 120 30
daalab knapsack --capacity 50 --weights 10 20 30 --profits 60 100 120
daalab lcs ABCBDAB BDCABA
```

`search` sorts the values before looking up the key and reports the index in
the sorted order. Each `--item` of `fractional` is a profit followed by a
weight. Invalid input is reported on standard error with exit status 1.

`daalab-benchmark` prints the CPU time one sorting algorithm (`insertion`,
`merge`, `quick` or `heap`) takes on each kind of input:

```
daalab-benchmark quick --size 10000 --seed 1
```

The size defaults to 10000; without `--seed` the random input differs from
run to run.

## What it does not do

The shortest-path routines have no command of their own; use
`daalab.graphs` from Python. Nothing reads input from files or standard
input: values are passed as arguments or in Python.