import pytest
from hypothesis import given, strategies as st

from matrixsearch.weakest import count_ones, k_weakest_rows, row_strengths


@st.composite
def soldier_matrices(draw):
    width = draw(st.integers(min_value=1, max_value=8))
    counts = draw(st.lists(st.integers(min_value=0, max_value=width), min_size=1, max_size=10))
    return [[1] * c + [0] * (width - c) for c in counts]


@given(st.integers(min_value=0, max_value=20), st.integers(min_value=0, max_value=20))
def test_count_ones_matches_row_contents(ones, zeros):
    row = [1] * ones + [0] * zeros
    assert count_ones(row) == row.count(1)


@given(soldier_matrices())
def test_row_strengths_in_row_order(mat):
    strengths = row_strengths(mat)
    assert [index for index, _ in strengths] == list(range(len(mat)))
    assert [count for _, count in strengths] == [row.count(1) for row in mat]


def test_k_weakest_rows_worked_example():
    mat = [
        [1, 1, 0, 0, 0],
        [1, 1, 1, 1, 0],
        [1, 0, 0, 0, 0],
        [1, 1, 0, 0, 0],
        [1, 1, 1, 1, 1],
    ]
    assert k_weakest_rows(mat, 3) == [2, 0, 3]


@given(soldier_matrices(), st.data())
def test_k_weakest_rows_ordering(mat, data):
    k = data.draw(st.integers(min_value=0, max_value=len(mat)))
    result = k_weakest_rows(mat, k)
    assert len(result) == k
    assert len(set(result)) == k
    keys = [(mat[i].count(1), i) for i in result]
    assert keys == sorted(keys)
    chosen = set(result)
    if k:
        worst_chosen = keys[-1]
        for i, row in enumerate(mat):
            if i not in chosen:
                assert (row.count(1), i) > worst_chosen


@pytest.mark.parametrize("k", [-1, 3])
def test_k_out_of_range_rejected(k):
    with pytest.raises(ValueError):
        k_weakest_rows([[1, 0], [0, 0]], k)