import pytest

from algokit.arrays import (
    add_matrices,
    bubble_sort,
    find_triplets,
    intersection,
    is_sparse,
    min_max,
    rotate_left,
    second_smallest,
    selection_sort,
    sorted_union,
    swap_adjacent,
)

SOURCE_ARRAY = [7, 4, 9, 42, 31, 6, 20]
UNION_A = [1, 5, 3, 2, 8, 30, 4]
UNION_B = [4, 2, 1, 7, 3]


def test_min_max():
    assert min_max(SOURCE_ARRAY) == (min(SOURCE_ARRAY), max(SOURCE_ARRAY))


def test_min_max_single():
    assert min_max([5]) == (5, 5)


def test_min_max_empty_raises():
    with pytest.raises(ValueError):
        min_max([])


def test_sorted_union_source_example():
    assert sorted_union(UNION_A, UNION_B) == [1, 2, 3, 4, 5, 7, 8, 30]


def test_sorted_union_invariants():
    result = sorted_union([3, 3, 1], [2, 1])
    assert result == sorted(result)
    assert len(result) == len(set(result))
    assert set(result) == {1, 2, 3}


def test_intersection_source_example():
    assert intersection(UNION_A, UNION_B) == [4, 2, 1, 3]


def test_intersection_keeps_duplicates_from_second():
    assert intersection([1, 2], [2, 2, 5]) == [2, 2]


@pytest.mark.parametrize("sorter", [selection_sort, bubble_sort])
@pytest.mark.parametrize("values", [SOURCE_ARRAY, [], [1], [3, 1, 2, 1], [-5, 10, 0, -5]])
def test_sorters_order_values(sorter, values):
    original = list(values)
    assert sorter(values) == sorted(values)
    assert values == original


def test_rotate_left_first_element():
    values = [1, 2, 3, 4, 5, 6, 7]
    result = rotate_left(values, 2)
    assert result[0] == values[2]
    assert sorted(result) == values


def test_rotate_left_full_turn_is_identity():
    values = [1, 2, 3, 4, 5]
    assert rotate_left(values, len(values)) == values


def test_rotate_left_composes():
    values = [1, 2, 3, 4, 5, 6, 7]
    assert rotate_left(rotate_left(values, 2), 3) == rotate_left(values, 5)


@pytest.mark.parametrize("d", [0, -3])
def test_rotate_left_non_positive_is_identity(d):
    assert rotate_left([1, 2, 3], d) == [1, 2, 3]


def test_rotate_left_empty():
    assert rotate_left([], 4) == []


def test_second_smallest():
    assert second_smallest([5, 1, 4]) == 4


def test_second_smallest_with_duplicate_minimum():
    assert second_smallest([2, 2, 9]) == 2


def test_second_smallest_too_short():
    with pytest.raises(ValueError):
        second_smallest([1])


def test_add_matrices_with_zero_is_identity():
    a = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    zero = [[0] * 3 for _ in range(3)]
    assert add_matrices(a, zero) == a


def test_add_matrices_commutes_and_adds_cells():
    a = [[1, 2], [3, 4]]
    b = [[10, 20], [30, 40]]
    result = add_matrices(a, b)
    assert result == add_matrices(b, a)
    assert result[1][0] == a[1][0] + b[1][0]


def test_add_matrices_shape_mismatch():
    with pytest.raises(ValueError):
        add_matrices([[1, 2]], [[1, 2, 3]])


@pytest.mark.parametrize(
    "matrix, expected",
    [
        ([[0, 0, 0], [0, 0, 0], [0, 0, 0]], True),
        ([[1, 0, 0], [0, 1, 0], [0, 0, 1]], True),
        ([[0, 0, 1], [0, 0, 1], [1, 1, 1]], True),
        ([[0, 0, 1], [0, 1, 1], [1, 1, 1]], False),
        ([[1, 1, 1], [1, 1, 1], [1, 1, 1]], False),
    ],
)
def test_is_sparse(matrix, expected):
    assert is_sparse(matrix) is expected


def test_swap_adjacent():
    assert swap_adjacent([1, 2, 3, 4]) == [2, 1, 4, 3]


def test_swap_adjacent_twice_restores():
    values = [9, 8, 7, 6, 5, 4]
    assert swap_adjacent(swap_adjacent(values)) == values


def test_swap_adjacent_odd_length_raises():
    with pytest.raises(ValueError):
        swap_adjacent([1, 2, 3])


def test_find_triplets_single():
    assert find_triplets([1, 2, 3, 4], 6) == [(1, 2, 3)]


def test_find_triplets_all_sum_to_total():
    triplets = find_triplets([0, -1, 2, -3, 1, 4], 1)
    assert triplets
    assert all(sum(triple) == 1 for triple in triplets)


def test_find_triplets_none():
    assert find_triplets([1, 2, 3], 100) == []