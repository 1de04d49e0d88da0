"""An animal shelter that hands out dogs and cats strictly in arrival order."""

from collections import deque
from dataclasses import dataclass
from itertools import count


@dataclass(frozen=True)
class Animal:
    """An animal identified by ``id``."""

    id: int

    def __str__(self):
        return f"{type(self).__name__.lower()}({self.id})"


class Dog(Animal):
    """A dog."""


class Cat(Animal):
    """A cat."""


class AnimalShelter:
    """Keeps dogs and cats in separate queues, tagged with their arrival order."""

    def __init__(self):
        self._arrivals = count()
        self._dogs = deque()
        self._cats = deque()

    def __len__(self):
        return len(self._dogs) + len(self._cats)

    def enqueue(self, animal):
        """Take in a dog or a cat."""
        if isinstance(animal, Dog):
            queue = self._dogs
        elif isinstance(animal, Cat):
            queue = self._cats
        else:
            raise TypeError(f"the shelter only takes dogs and cats, not {animal!r}")
        queue.append((next(self._arrivals), animal))

    def dequeue_dog(self):
        """Hand out the dog that has waited longest; raise IndexError when there is none."""
        if not self._dogs:
            raise IndexError("no dogs in the shelter")
        return self._dogs.popleft()[1]

    def dequeue_cat(self):
        """Hand out the cat that has waited longest; raise IndexError when there is none."""
        if not self._cats:
            raise IndexError("no cats in the shelter")
        return self._cats.popleft()[1]

    def dequeue_any(self):
        """Hand out whichever animal has waited longest; raise IndexError when empty."""
        if not self._dogs and not self._cats:
            raise IndexError("the shelter is empty")
        if not self._cats:
            return self.dequeue_dog()
        if not self._dogs:
            return self.dequeue_cat()
        if self._dogs[0][0] < self._cats[0][0]:
            return self.dequeue_dog()
        return self.dequeue_cat()