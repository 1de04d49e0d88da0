import pytest

from interview_riddles.lists import (
    add_digit_lists,
    is_partitioned,
    kth_to_last,
    partition,
    remove_dups,
    remove_dups_quadratic,
)


def test_remove_dups_source_case():
    assert remove_dups([3, 2, 3, 5, 7, 7, 9, 4, 3]) == [3, 2, 5, 7, 9, 4]


def test_remove_dups_quadratic_source_case():
    assert remove_dups_quadratic([3, 2, 3, 5, 7, 7, 9, 4, 3]) == [3, 2, 5, 7, 9, 4]


def test_remove_dups_without_duplicates():
    assert remove_dups([1, 2, 3, 4]) == [1, 2, 3, 4]


def test_remove_dups_quadratic_without_duplicates():
    assert remove_dups_quadratic([1, 2, 3, 4]) == [1, 2, 3, 4]


@pytest.mark.parametrize("values", [[], [1, 1, 1], [5, 4, 5, 4, 3], list(range(10)) * 2])
def test_dedup_variants_agree(values):
    assert remove_dups(values) == remove_dups_quadratic(values)
    assert len(set(remove_dups(values))) == len(remove_dups(values))


@pytest.mark.parametrize("k", range(10))
def test_kth_to_last_source_cases(k):
    assert kth_to_last(list(range(1, 11)), k) == 10 - k


@pytest.mark.parametrize("k", [10, 11])
def test_kth_to_last_past_start(k):
    with pytest.raises(IndexError):
        kth_to_last(list(range(1, 11)), k)


def test_kth_to_last_negative():
    with pytest.raises(ValueError):
        kth_to_last([1, 2, 3], -1)


def test_partition_source_case():
    result, pivot_index = partition([3, 5, 8, 5, 10, 2, 1], 5)
    assert result == [3, 2, 1, 5, 5, 8, 10]
    assert result[pivot_index] == 5
    assert is_partitioned(result, pivot_index)


@pytest.mark.parametrize(
    "values, pivot",
    [([8, 9, 5], 5), ([5], 5), ([1, 2, 3, 4], 1), ([4, 3, 2, 1], 4), ([7, 7, 2, 9, 7], 7)],
)
def test_partition_invariants(values, pivot):
    result, pivot_index = partition(values, pivot)
    assert sorted(result) == sorted(values)
    assert result[pivot_index] == pivot
    assert is_partitioned(result, pivot_index)


def test_partition_missing_pivot():
    with pytest.raises(ValueError):
        partition([1, 2, 3], 7)


def test_is_partitioned_detects_disorder():
    assert is_partitioned([3, 8, 5, 1], 2) is False


def test_add_digit_lists_source_case():
    assert add_digit_lists([7, 1, 6], [5, 9, 2]) == [2, 1, 9]


def _to_int(digits):
    return int("".join(str(d) for d in reversed(digits)) or "0")


@pytest.mark.parametrize(
    "first, second",
    [([9, 9, 9], [1]), ([0], [0]), ([5], [5]), ([1, 2, 3], [9, 8, 7, 6]), ([], [4, 2])],
)
def test_add_digit_lists_matches_integer_sum(first, second):
    result = add_digit_lists(first, second)
    assert _to_int(result) == _to_int(first) + _to_int(second)
    assert all(0 <= d <= 9 for d in result)


def test_add_digit_lists_empty():
    assert add_digit_lists([], []) == []