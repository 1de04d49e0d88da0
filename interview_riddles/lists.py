"""List riddles: duplicate removal, k-th to last, partitioning and digit-list sums."""

from collections import deque
from itertools import zip_longest


def remove_dups(values):
    """Return the values with later duplicates dropped, using a set of seen values."""
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def remove_dups_quadratic(values):
    """Return the values with later duplicates dropped, without any auxiliary set."""
    result = []
    for value in values:
        if value not in result:
            result.append(value)
    return result


def kth_to_last(values, k):
    """Return the k-th value counted from the end (k=0 is the last value).

    Raises IndexError when the sequence has k or fewer values.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    window = deque(values, maxlen=k + 1)
    if len(window) <= k:
        raise IndexError(f"sequence has fewer than {k + 1} values")
    return window[0]


def partition(values, pivot):
    """Partition values around a pivot value that must occur in them.

    Returns the rearranged list and the index of the first pivot value:
    smaller values first, then all pivot values, then larger values, each
    group keeping its original order.
    """
    values = list(values)
    if pivot not in values:
        raise ValueError(f"pivot {pivot!r} does not occur in the values")
    smaller = [v for v in values if v < pivot]
    equal = [v for v in values if v == pivot]
    larger = [v for v in values if v > pivot]
    return smaller + equal + larger, len(smaller)


def is_partitioned(values, pivot_index):
    """Return True if values are partitioned around the value at ``pivot_index``."""
    pivot = values[pivot_index]
    if any(v >= pivot for v in values[:pivot_index]):
        return False
    rest = iter(values[pivot_index:])
    for value in rest:
        if value != pivot:
            if value <= pivot:
                return False
            break
    return all(v > pivot for v in rest)


def add_digit_lists(first, second):
    """Add two numbers stored as digit lists with the least significant digit first."""
    result = []
    carry = 0
    for digit1, digit2 in zip_longest(first, second, fillvalue=0):
        carry, digit = divmod(carry + digit1 + digit2, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    return result