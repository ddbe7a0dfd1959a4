# matrixsearch

Binary-search algorithms over sorted lists and row/column-sorted matrices.
Pure Python, no dependencies.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is in it

| Module | Functions |
| --- | --- |
| `matrixsearch.search` | `contains_sorted`, `search_rows`, `search_staircase`, `search_row_range`, `search_flattened` |
| `matrixsearch.order_stats` | `count_at_most`, `kth_smallest`, `find_median` |
| `matrixsearch.peak` | `column_max`, `find_peak_grid`, `find_peak_grid_by_comparison` |
| `matrixsearch.weakest` | `count_ones`, `row_strengths`, `k_weakest_rows` |
| `matrixsearch.occurrence` | `first_occurrence`, `last_occurrence`, `search_range` |
| `matrixsearch.journey` | `distance_after`, `days_by_cycle`, `days_needed`, `main` |

Matrices are sequences of rows, such as `[[1, 3], [5, 7]]`.

Notes on behaviour:

- `column_max`, `find_peak_grid`, `find_peak_grid_by_comparison`,
  `kth_smallest` and `find_median` raise `ValueError` for a matrix with no
  rows or no columns; the `search_*` functions return `False` for one.
- `find_peak_grid` and `find_peak_grid_by_comparison` return a `(row, col)`
  tuple, or `None` when the search finds no peak. `find_peak_grid` treats
  cells beyond the left and right edges as `-1`.
- `kth_smallest` counts `k` from 1 and returns the largest entry when `k` is
  at least the number of entries.
- `find_median` returns the upper of the two middle values when the number
  of entries is even.
- `k_weakest_rows` raises `ValueError` unless `0 <= k <= len(mat)`; rows with
  equal strength keep their original order.
- `first_occurrence` and `last_occurrence` return `None` for a missing key,
  so `search_range` returns `(None, None)` then.
- `days_by_cycle` and `days_needed` raise `ValueError` for a negative target
  or for daily distances that are negative or sum to zero; `days_needed`
  also raises it when more than `MAX_DAYS` (10**9) days would be needed.

## Examples

```python
from matrixsearch.search import search_staircase, search_flattened
from matrixsearch.order_stats import kth_smallest, find_median
from matrixsearch.peak import find_peak_grid
from matrixsearch.weakest import k_weakest_rows
from matrixsearch.occurrence import search_range
from matrixsearch.journey import days_needed

# A matrix whose rows and columns are each sorted
search_staircase([[1, 4, 7], [2, 5, 8], [3, 6, 9]], 5)    # True

# A matrix that is sorted when read row by row
search_flattened([[1, 3, 5, 7], [10, 11, 16, 20]], 13)    # False

kth_smallest([[1, 5, 9], [10, 11, 13], [12, 13, 15]], 8)  # 13
find_median([[1, 3, 5], [2, 6, 9], [3, 6, 9]])            # 5

find_peak_grid([[1, 4], [3, 2]])                          # (1, 0)

# Rows of soldiers (1) followed by civilians (0)
k_weakest_rows([[1, 1, 0], [1, 0, 0], [1, 1, 1]], 2)      # [1, 0]

search_range([5, 7, 7, 8, 8, 10], 8)                      # (3, 4)
search_range([5, 7, 7, 8, 8, 10], 6)                      # (None, None)

# Walk 1, 5, 7 units on successive days, repeating; 12 units take 3 days
days_needed(12, 1, 5, 7)                                  # 3
```

## Journey command

`matrixsearch-journey` works out the journey problem: a walker covers
`a`, `b` and `c` units on successive days, then repeats the cycle. For each
test case it prints the least number of days needed to cover at least `n`
units.

The input is a test count followed by `n a b c` for every test, all as
whitespace-separated integers. It is read from the file named on the
command line, or from standard input when no file is given:

```
printf '2\n12 1 5 7\n13 1 5 7\n' | matrixsearch-journey
```

prints `3` and `3`. Malformed input (non-integers, a missing count, or too
few numbers for the stated count) and unreachable targets end the command
with a usage error and exit status 2.