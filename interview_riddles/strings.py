"""String riddles: uniqueness, one-edit-away and rotation checks."""

from itertools import pairwise

MAX_EDITS = 2
_CHARSET_SIZE = 256


def is_unique(s):
    """Return True if no character occurs twice in ``s``.

    Uses a lookup table over the 8-bit character set, so any string longer
    than the character set cannot be unique. Characters outside that set
    raise ValueError.
    """
    if len(s) > _CHARSET_SIZE:
        return False
    seen = [False] * _CHARSET_SIZE
    for char in s:
        code = ord(char)
        if code >= _CHARSET_SIZE:
            raise ValueError(f"character {char!r} is outside the 8-bit character set")
        if seen[code]:
            return False
        seen[code] = True
    return True


def is_unique_set(s):
    """Return True if no character occurs twice in ``s``, tracking seen characters in a set."""
    seen = set()
    for char in s:
        if char in seen:
            return False
        seen.add(char)
    return True


def is_unique_sorted(s):
    """Return True if no character occurs twice in ``s``, comparing neighbours after sorting."""
    return all(a != b for a, b in pairwise(sorted(s)))


def _remove(s, index):
    return s[:index] + s[index + 1:]


def _replace(s, index, char):
    return s[:index] + char + s[index + 1:]


def _one_away(target, candidate, index, edits):
    if edits > MAX_EDITS:
        return False
    while index < len(target) and index < len(candidate) and target[index] == candidate[index]:
        index += 1
    if index < len(target):
        if index >= len(candidate):
            return False
        edits += 1
        return _one_away(target, _remove(candidate, index), index, edits) or _one_away(
            target, _replace(candidate, index, target[index]), index, edits
        )
    if index < len(candidate):
        return _one_away(target, _remove(candidate, index), index, edits + 1)
    return True


def one_away(first, second):
    """Return True if the longer string can be edited into the shorter within MAX_EDITS edits.

    Allowed edits are removing or replacing a character. Strings whose
    lengths differ by MAX_EDITS or more are never considered close.
    """
    delta = len(first) - len(second)
    if abs(delta) >= MAX_EDITS:
        return False
    if delta < 0:
        shorter, longer = first, second
    else:
        shorter, longer = second, first
    return _one_away(shorter, longer, 0, 0)


def is_rotation(s1, s2):
    """Return True if ``s2`` occurs within ``s1`` doubled, i.e. is a rotation of ``s1``."""
    return s2 in s1 + s1