"""Checking whether strings are within one edit (insert, delete or replace) of each other."""

from itertools import combinations


def _first_mismatch(longer, shorter):
    """Return the first index where the strings differ, or the shorter length."""
    return next(
        (index for index, (a, b) in enumerate(zip(longer, shorter)) if a != b),
        len(shorter),
    )


def is_dist_1(s1, s2):
    """Return True if the strings differ by at most one insert, delete or replace.

    Identical strings count as being within one edit.
    """
    length_delta = abs(len(s1) - len(s2))
    if length_delta > 1:
        return False
    if len(s1) > len(s2):
        longer, shorter = s1, s2
    else:
        longer, shorter = s2, s1
    index = _first_mismatch(longer, shorter)
    if index == len(longer):
        return True
    rest_of_longer = longer[index + 1:]
    if length_delta == 0:
        rest_of_shorter = shorter[index + 1:]
    else:
        rest_of_shorter = shorter[index:]
    return rest_of_longer == rest_of_shorter


def has_pair_with_dist_1(strings):
    """Return True if any two of the strings are within one edit of each other."""
    return any(is_dist_1(a, b) for a, b in combinations(strings, 2))