"""Reversing the values of a singly linked list in place, three ways, with a timing command."""

import sys
import time

from interview_riddles.linked import Node, make_list


def _nodes(head):
    node = head
    while node is not None:
        yield node
        node = node.next


def list_length(head):
    """Return the number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def make_range_list(length):
    """Build a list holding 0, 1, ..., length-1; None when ``length`` is not positive."""
    if length <= 0:
        return None
    return make_list(range(length))


def is_sequential(head, descending=False):
    """Return True if the values count up from 0, or down to 0 when ``descending``."""
    if descending:
        expected = range(list_length(head) - 1, -1, -1)
    else:
        expected = range(list_length(head))
    return all(node.value == value for node, value in zip(_nodes(head), expected))


def reverse_with_copy(head):
    """Reverse the values by copying them out first; uses memory linear in the length."""
    values = [node.value for node in _nodes(head)]
    for node, value in zip(_nodes(head), reversed(values)):
        node.value = value


def reverse_recursive(head):
    """Reverse the values by holding them on the call stack.

    The recursion is as deep as the list is long, so very long lists raise
    RecursionError and are left unchanged.
    """
    cursor = head

    def visit(node):
        nonlocal cursor
        if node is None:
            return
        value = node.value
        visit(node.next)
        cursor.value = value
        cursor = cursor.next

    visit(head)


def _hop_forward(node, steps):
    for _ in range(steps):
        if node is None:
            return None
        node = node.next
    return node


def reverse_by_swapping(head):
    """Reverse the values with constant extra memory by swapping outer pairs; quadratic time."""
    length = list_length(head)
    for i in range(length // 2):
        partner = _hop_forward(head, length - 2 * i - 1)
        head.value, partner.value = partner.value, head.value
        head = head.next


def _timed(function, *args):
    start = time.perf_counter_ns()
    result = function(*args)
    return result, (time.perf_counter_ns() - start) // 1000


def _run(length):
    head, init_time = _timed(make_range_list, length)
    if not is_sequential(head):
        print("Error in initializing array")

    _, time1 = _timed(reverse_with_copy, head)
    if not is_sequential(head, descending=True):
        print("Error in algo 1 ")

    try:
        _, time2 = _timed(reverse_recursive, head)
    except RecursionError:
        time2 = -1
    if not is_sequential(head):
        print("Error in algo 2 ")

    _, time3 = _timed(reverse_by_swapping, head)
    if not is_sequential(head, descending=True):
        print("Error in algo 3 ")

    ratios = [t / length if length else float("nan") for t in (init_time, time1, time2, time3)]
    print(
        f"{length:6d},\t {init_time:6d},\t {time1:6d},\t {time2:6d},\t {time3:8d},\t "
        + ",\t ".join(f"{ratio:f}" for ratio in ratios)
    )


def main(argv=None):
    """Time the three reversals for each list length given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        lengths = [int(arg) for arg in args]
    except ValueError as error:
        print(f"invalid list length: {error}", file=sys.stderr)
        return 2
    print("Output numbers are in micro seconds (us = 1/1,000,000 seconds)", file=sys.stderr)
    print("   len,\t   init,\t algo_1,\t algo_2,\t algo_3,\t tlr0,\t tlr1,\t tlr2,\t tlr3")
    for length in lengths:
        _run(length)
    return 0


__all__ = [
    "Node",
    "list_length",
    "make_range_list",
    "is_sequential",
    "reverse_with_copy",
    "reverse_recursive",
    "reverse_by_swapping",
    "main",
]