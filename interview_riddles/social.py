"""A small in-memory social network that suggests new friends by common friends."""

import heapq
import json
from dataclasses import dataclass, field, replace

_JSON_FIELDS = ("id", "lastname", "firstname", "email", "friends")


@dataclass
class Person:
    """A member of the network and the ids of their friends."""

    id: str = ""
    lastname: str = ""
    firstname: str = ""
    email: str = ""
    friends: set = field(default_factory=set)

    def __post_init__(self):
        self.friends = set(self.friends)

    def is_friend(self, other):
        """Return True if ``other`` (a Person or a person id) is among the friends."""
        other_id = other.id if isinstance(other, Person) else other
        return other_id in self.friends

    def add_friend(self, other):
        """Add ``other`` (a Person or a person id) to the friends."""
        self.friends.add(other.id if isinstance(other, Person) else other)

    def count_overlapping_friends(self, other):
        """Return how many of this person's friends are also friends of ``other``."""
        return sum(1 for friend in self.friends if other.is_friend(friend))

    def to_json(self):
        """Serialize to a compact JSON object with the friends in sorted order."""
        data = {
            "id": self.id,
            "lastname": self.lastname,
            "firstname": self.firstname,
            "email": self.email,
            "friends": sorted(self.friends),
        }
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls, text):
        """Read a person from the first JSON value in ``text``; raise ValueError if malformed."""
        try:
            data, _ = json.JSONDecoder().raw_decode(text.lstrip())
        except json.JSONDecodeError as error:
            raise ValueError(f"invalid person JSON: {error}") from None
        if not isinstance(data, dict):
            raise ValueError("person JSON must be an object")
        missing = [key for key in _JSON_FIELDS if key not in data]
        if missing:
            raise ValueError(f"person JSON lacks {', '.join(missing)}")
        if not isinstance(data["friends"], list):
            raise ValueError("person friends must be a list")
        return cls(
            id=data["id"],
            lastname=data["lastname"],
            firstname=data["firstname"],
            email=data["email"],
            friends=set(data["friends"]),
        )


class PersonCollection:
    """Stores people by id."""

    def __init__(self):
        self._persons = {}

    def __len__(self):
        return len(self._persons)

    def persons(self):
        """Return the ids of all people, sorted."""
        return sorted(self._persons)

    def person(self, person_id):
        """Return the person with the id, or None if there is none."""
        return self._persons.get(person_id)

    def add_person(self, person):
        """Store a copy of the person, replacing one with the same id, and return it."""
        stored = replace(person, friends=set(person.friends))
        self._persons[stored.id] = stored
        return stored

    def erase_person(self, person_id):
        """Remove the person with the id, if present."""
        self._persons.pop(person_id, None)

    def suggest_friends_for(self, person_id):
        """Suggest up to three people who are not yet friends of the given person.

        Returns (common friend count, id) pairs, the most common friends
        first and, among equal counts, the larger id first. Raises KeyError
        for an unknown id.
        """
        source = self._persons[person_id]
        candidates = [
            (source.count_overlapping_friends(other), other_id)
            for other_id, other in sorted(self._persons.items())
            if other_id != person_id and not source.is_friend(other_id)
        ]
        return heapq.nlargest(3, candidates)