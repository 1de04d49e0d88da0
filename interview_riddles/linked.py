"""Singly linked node riddles: intersection of two lists and loop detection."""

from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """A node of a singly linked list; nodes compare by identity."""

    value: int = 0
    next: "Node | None" = None

    def __iter__(self):
        """Yield the values from this node to the end of the list."""
        for node in _walk(self):
            yield node.value

    def __repr__(self):
        return f"Node({self.value!r})"


def _walk(head):
    node = head
    while node is not None:
        yield node
        node = node.next


def make_list(values):
    """Build a linked list from the values and return its head, or None when empty."""
    head = None
    for value in reversed(list(values)):
        head = Node(value, head)
    return head


def find_tail(head):
    """Return the last node of the list starting at ``head``, or None for an empty list."""
    tail = None
    for tail in _walk(head):
        pass
    return tail


def connect(connection_point, head):
    """Make the tail of the list at ``head`` point to ``connection_point``."""
    tail = find_tail(head)
    if tail is None:
        raise ValueError("cannot connect an empty list")
    tail.next = connection_point


def find_intersection(head1, head2):
    """Return the first node shared by both lists, or None if they do not intersect."""
    nodes1 = list(_walk(head1))
    nodes2 = list(_walk(head2))
    intersection = None
    for a, b in zip(reversed(nodes1), reversed(nodes2)):
        if a is not b:
            break
        intersection = a
    return intersection


def find_loop_start(head):
    """Return the node where the loop of the list begins.

    Raises ValueError when the list has no loop.
    """
    if head is None:
        raise ValueError("list is empty")
    slow = head
    fast = head.next
    while slow is not fast:
        if fast is None or fast.next is None:
            raise ValueError("list has no loop")
        slow = slow.next
        fast = fast.next.next
    slow = head
    fast = fast.next
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    return slow