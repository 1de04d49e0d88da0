"""Stack riddles: three stacks in one array, a stack with min, and a stack of plates."""

from dataclasses import dataclass, field
from enum import Enum


class StackId(Enum):
    """Which of the three stacks sharing one array."""

    BOTTOM = "bottom"
    TOP = "top"
    MIDDLE = "middle"


class _Growth(Enum):
    UPWARDS = "upwards"
    DOWNWARDS = "downwards"
    ALTERNATING = "alternating"


@dataclass
class _SharedArray:
    size: int
    values: list = field(init=False)
    owners: list = field(init=False)

    def __post_init__(self):
        self.values = [0] * self.size
        self.owners = [None] * self.size


class SharedArrayStack:
    """One stack living in an array shared with other stacks.

    An upward stack grows from the bottom, a downward stack from the top and
    an alternating stack outwards from the middle, one slot below, then one
    above, and so on.
    """

    def __init__(self, storage, growth):
        self._storage = storage
        self._growth = growth
        self._height = 0
        if growth is _Growth.UPWARDS:
            self._start = 0
        elif growth is _Growth.DOWNWARDS:
            self._start = storage.size
        else:
            self._start = storage.size // 2

    def _index(self, height):
        if self._growth is _Growth.UPWARDS:
            return self._start + height
        if self._growth is _Growth.DOWNWARDS:
            return self._start - height
        offset = (height + 1) // 2
        return self._start + offset if height % 2 == 0 else self._start - offset

    def height(self):
        """Return the number of values on this stack."""
        return self._height

    def push(self, value):
        """Push a value; raise IndexError when the array has no room for it."""
        index = self._index(self._height + 1)
        if not 0 <= index < self._storage.size:
            raise IndexError("stack overflows the shared array")
        owner = self._storage.owners[index]
        if owner is not None and owner is not self:
            raise IndexError("stack collides with another stack")
        self._storage.values[index] = value
        self._storage.owners[index] = self
        self._height += 1

    def top(self):
        """Return the top value; raise IndexError when empty."""
        if self._height == 0:
            raise IndexError("top of empty stack")
        return self._storage.values[self._index(self._height)]

    def pop(self):
        """Remove and return the top value; raise IndexError when empty."""
        value = self.top()
        self._storage.owners[self._index(self._height)] = None
        self._height -= 1
        return value


class StackTriple:
    """Three stacks sharing a single array of ``array_size`` slots."""

    def __init__(self, array_size):
        if array_size < 0:
            raise ValueError("array size must not be negative")
        storage = _SharedArray(array_size)
        self._stacks = {
            StackId.BOTTOM: SharedArrayStack(storage, _Growth.UPWARDS),
            StackId.TOP: SharedArrayStack(storage, _Growth.DOWNWARDS),
            StackId.MIDDLE: SharedArrayStack(storage, _Growth.ALTERNATING),
        }

    def stack(self, stack_id):
        """Return the stack with the given id."""
        return self._stacks[StackId(stack_id)]


class MinStack:
    """A stack that also reports its minimum value in constant time."""

    def __init__(self):
        self._values = []
        self._mins = []

    def __len__(self):
        return len(self._values)

    def push(self, value):
        """Push a value."""
        self._mins.append(min(value, self._mins[-1]) if self._mins else value)
        self._values.append(value)

    def pop(self):
        """Remove and return the top value; raise IndexError when empty."""
        if not self._values:
            raise IndexError("pop from empty stack")
        self._mins.pop()
        return self._values.pop()

    def min(self):
        """Return the smallest value on the stack; raise IndexError when empty."""
        if not self._mins:
            raise IndexError("min of empty stack")
        return self._mins[-1]


class MultiStack:
    """A stack split into sub-stacks of at most ``max_height`` values each."""

    def __init__(self, max_height):
        if max_height < 1:
            raise ValueError("max height must be at least 1")
        self._max_height = max_height
        self._stacks = [[]]

    def push(self, value):
        """Push a value, starting a new sub-stack when the last one is full."""
        if len(self._stacks[-1]) >= self._max_height:
            self._stacks.append([])
        self._stacks[-1].append(value)

    def pop(self):
        """Remove and return the top value; raise IndexError when empty."""
        return self.pop_at(len(self._stacks) - 1)

    def top(self):
        """Return the top value; raise IndexError when empty."""
        return self.top_at(len(self._stacks) - 1)

    def pop_at(self, index):
        """Remove and return the top value of the sub-stack at ``index``.

        A sub-stack that becomes empty is dropped unless it is the only one.
        """
        substack = self._stacks[index]
        if not substack:
            raise IndexError("pop from empty stack")
        value = substack.pop()
        if len(self._stacks) > 1 and not substack:
            del self._stacks[index]
        return value

    def top_at(self, index):
        """Return the top value of the sub-stack at ``index``."""
        substack = self._stacks[index]
        if not substack:
            raise IndexError("top of empty stack")
        return substack[-1]

    def count_substacks(self):
        """Return the number of sub-stacks."""
        return len(self._stacks)