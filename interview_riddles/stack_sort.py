"""Sorting a stack (a list whose end is the top) using only other stacks."""

import operator


def sort_stack(stack):
    """Sort the stack in place with one extra stack so that the smallest value is on top."""
    temp = []
    for remaining in range(len(stack), 0, -1):
        current_max = stack.pop()
        for _ in range(remaining - 1):
            value = stack.pop()
            if value > current_max:
                value, current_max = current_max, value
            temp.append(value)
        stack.append(current_max)
        while temp:
            stack.append(temp.pop())


def merge_sort_stack(stack, ascending=True):
    """Merge-sort the stack in place.

    With ``ascending`` the smallest value ends on top, so popping yields
    values in ascending order; otherwise the largest value ends on top.
    """
    if len(stack) <= 1:
        return
    half = len(stack) // 2
    first = [stack.pop() for _ in range(half)]
    second = [stack.pop() for _ in range(len(stack))]
    merge_sort_stack(first, not ascending)
    merge_sort_stack(second, not ascending)
    prefer = operator.gt if ascending else operator.lt
    while first or second:
        if not second or (first and prefer(first[-1], second[-1])):
            stack.append(first.pop())
        else:
            stack.append(second.pop())