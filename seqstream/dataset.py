"""
Sample dataset of five people

Each call builds new records, so no state is shared between callers.
"""

from seqstream.core.sequence import Sequence, from_iterable
from seqstream.core.types import Person


def sample_people() -> list[Person]:
    """Return a new list of the five sample people"""
    return [
        Person("Alice", 25, ("Reading", "Gardening")),
        Person("Bob", 30, ("Cooking", "Painting")),
        Person("Charlie", 35, ("Gaming", "Singing")),
        Person("David", 40, ("Reading", "Writing")),
        Person("Eve", 45, ("Cooking", "Singing")),
    ]


def people() -> Sequence:
    """Sequence over a freshly built sample dataset"""
    return from_iterable(sample_people())
