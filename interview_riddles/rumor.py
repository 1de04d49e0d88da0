"""Tracking who hears a rumor from a list of timestamped meetings."""

from collections import defaultdict
from dataclasses import dataclass


@dataclass(frozen=True)
class Meeting:
    """A meeting of a group of people at a point in time."""

    persons: frozenset
    timestamp: int

    def __post_init__(self):
        object.__setattr__(self, "persons", frozenset(self.persons))

    def __lt__(self, other):
        if not isinstance(other, Meeting):
            return NotImplemented
        return self.timestamp < other.timestamp


def merge_meetings(meetings):
    """Merge meetings that share at least one person into one meeting.

    Each meeting in turn absorbs every later meeting that shares a person
    with the group gathered so far; the merged meeting keeps the timestamp
    of the meeting it started from.
    """
    remaining = list(meetings)
    merged = []
    while remaining:
        first, *rest = remaining
        persons = set(first.persons)
        remaining = []
        for meeting in rest:
            if persons & meeting.persons:
                persons |= meeting.persons
            else:
                remaining.append(meeting)
        merged.append(Meeting(frozenset(persons), first.timestamp))
    return merged


def who_knows_it(meetings, first_person):
    """Return the set of people who know the rumor after all meetings.

    Only ``first_person`` knows it at first. Meetings may be given in any
    order; those with the same timestamp happen at once, so the rumor
    spreads through every chain of people meeting at that moment.
    """
    knowing = {first_person}
    by_timestamp = defaultdict(list)
    for meeting in meetings:
        by_timestamp[meeting.timestamp].append(meeting)
    for timestamp in sorted(by_timestamp):
        for meeting in merge_meetings(by_timestamp[timestamp]):
            if knowing & meeting.persons:
                knowing |= meeting.persons
    return knowing