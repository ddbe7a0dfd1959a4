import pytest
from hypothesis import given, strategies as st

from matrixsearch.peak import column_max, find_peak_grid, find_peak_grid_by_comparison


@st.composite
def distinct_grids(draw):
    rows = draw(st.integers(min_value=1, max_value=6))
    cols = draw(st.integers(min_value=1, max_value=6))
    values = draw(st.permutations(list(range(rows * cols))))
    return [values[r * cols:(r + 1) * cols] for r in range(rows)]


def _neighbour_values(mat, row, col):
    values = []
    for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
        r, c = row + dr, col + dc
        if 0 <= r < len(mat) and 0 <= c < len(mat[0]):
            values.append(mat[r][c])
    return values


def test_column_max_picks_largest_value():
    mat = [[1, 9], [7, 2], [3, 4]]
    assert column_max(mat, 0) == (7, 1)
    assert column_max(mat, 1) == (9, 0)


def test_column_max_prefers_top_row_on_ties():
    mat = [[5, 1], [5, 2], [4, 2]]
    assert column_max(mat, 0) == (5, 0)
    assert column_max(mat, 1) == (2, 1)


@given(distinct_grids())
def test_find_peak_grid_returns_a_peak(mat):
    row, col = find_peak_grid(mat)
    value = mat[row][col]
    assert value == max(line[col] for line in mat)
    assert all(value > other for other in _neighbour_values(mat, row, col))


@given(distinct_grids())
def test_find_peak_grid_by_comparison_returns_a_peak(mat):
    row, col = find_peak_grid_by_comparison(mat)
    value = mat[row][col]
    assert value == max(line[col] for line in mat)
    assert all(value > other for other in _neighbour_values(mat, row, col))


def test_single_cell_is_its_own_peak():
    assert find_peak_grid([[7]]) == (0, 0)
    assert find_peak_grid_by_comparison([[7]]) == (0, 0)


def test_peak_is_global_maximum_in_monotone_grid():
    mat = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert find_peak_grid(mat) == (2, 2)
    assert find_peak_grid_by_comparison(mat) == (2, 2)


@pytest.mark.parametrize("func", [find_peak_grid, find_peak_grid_by_comparison, lambda m: column_max(m, 0)])
@pytest.mark.parametrize("mat", [[], [[]]])
def test_empty_matrix_rejected(func, mat):
    with pytest.raises(ValueError):
        func(mat)