import pytest

from algokit.arrays import (
    bubble_sort,
    knapsack,
    leaders,
    matrix_multiply,
    median,
    merge_sort,
    most_frequent_letter,
    pair_sums,
    quick_sort,
    target_sum_pairs,
)

SAMPLES = [
    [10, 14, 19, 26, 27, 31, 33, 35, 42, 44, 0],
    [],
    [5],
    [3, 3, 1, 2, 2, 1],
    [9, 8, 7, 6, 5, 4, 3, 2, 1],
    [-5, 12, 0, -5, 7, 100, -1],
]


@pytest.mark.parametrize("sorter", [merge_sort, quick_sort, bubble_sort])
@pytest.mark.parametrize("items", SAMPLES)
def test_sorters_agree_with_sorted(sorter, items):
    original = list(items)
    assert sorter(items) == sorted(original)
    assert items == original


def test_quick_sort_long_sorted_input():
    data = list(range(3000))
    assert quick_sort(reversed(data)) == data


def test_median_source_example():
    assert median([6, 3, 8, 5, 1]) == 5


@pytest.mark.parametrize("items", [[4, 1, 9, 2, 7], [10, 30, 20, 40], [2, 1]])
def test_median_splits_distinct_items(items):
    result = median(items)
    below = sum(1 for x in items if x < result)
    above = sum(1 for x in items if x > result)
    assert below == (len(items) - 1) // 2
    assert above == len(items) // 2


def test_median_empty_raises():
    with pytest.raises(ValueError):
        median([])


def test_pair_sums_example():
    assert pair_sums([5, 1, 4, 3, 2], 6) == [(1, 5), (2, 4)]


def test_pair_sums_all_sum_to_target():
    items = [8, -3, 4, 11, 0, 5, 7, 1, 6]
    for left, right in pair_sums(items, 8):
        assert left + right == 8
        assert left <= right


def test_pair_sums_none_found():
    assert pair_sums([1, 2, 3], 100) == []


def test_leaders_properties():
    items = [16, 17, 4, 3, 5, 2]
    result = leaders(items)
    assert result[0] == items[-1]
    assert result[-1] == max(items)
    assert all(a < b for a, b in zip(result, result[1:]))
    for value in result[1:]:
        position = max(i for i, x in enumerate(items) if x == value)
        assert all(value > x for x in items[position + 1 :])


def test_leaders_empty():
    assert leaders([]) == []


def test_target_sum_pairs_sum_and_uniqueness():
    items = [2, 7, 4, 5, 3, 6, 1, 8]
    pairs = target_sum_pairs(items, 9)
    assert pairs
    assert all(a + b == 9 for a, b in pairs)
    firsts = [a for a, _ in pairs]
    assert len(firsts) == len(set(firsts))
    assert all(b not in firsts[:k] for k, (_, b) in enumerate(pairs))


def test_target_sum_pairs_duplicates_reported_once():
    assert target_sum_pairs([3, 3, 3], 6) == [(3, 3)]


def test_most_frequent_letter_counts():
    assert most_frequent_letter("hello") == "l"


def test_most_frequent_letter_tie_prefers_later_letter():
    assert most_frequent_letter("ba") == "b"


def test_most_frequent_letter_rejects_other_characters():
    with pytest.raises(ValueError):
        most_frequent_letter("Hello world")


A = [[2, 4, 1], [2, 3, 9], [3, 1, 8]]
B = [[1, 2, 3], [3, 6, 1], [2, 4, 7]]
C = [[0, 1], [1, 0], [5, -2]]


def test_matrix_multiply_identity():
    identity = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert matrix_multiply(A, identity) == A
    assert matrix_multiply(identity, B) == B


def test_matrix_multiply_is_associative():
    assert matrix_multiply(matrix_multiply(A, B), C) == matrix_multiply(A, matrix_multiply(B, C))


def test_matrix_multiply_shape_mismatch():
    with pytest.raises(ValueError):
        matrix_multiply(C, C)


def test_knapsack_source_example():
    assert knapsack([10, 20, 30], [60, 100, 120], 50) == 220


def test_knapsack_everything_fits():
    values = [4, 9, 1, 6]
    assert knapsack([1, 2, 3, 4], values, 100) == sum(values)


def test_knapsack_zero_capacity():
    assert knapsack([1, 2], [5, 6], 0) == 0


def test_knapsack_length_mismatch():
    with pytest.raises(ValueError):
        knapsack([1, 2], [3], 10)