"""
Record types used by the query engine

Person is the record the practice dataset is made of. Grouping is the
element type produced by Sequence.group_by().
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Person:
    """
    Immutable person record

    Hobbies keep their authored order and may contain duplicates.
    Any iterable passed as hobbies is frozen into a tuple so the record
    stays hashable and can be used as a grouping or distinct key.
    """

    name: str
    age: int
    hobbies: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise TypeError(f"name must be a string, got {type(self.name).__name__}")
        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise TypeError(f"age must be an integer, got {type(self.age).__name__}")
        if self.age < 0:
            raise ValueError(f"age must be non-negative, got {self.age}")
        if isinstance(self.hobbies, str):
            raise TypeError("hobbies must be a sequence of names, not a single string")

        # frozen dataclass: bypass __setattr__ to normalize the field
        object.__setattr__(self, "hobbies", tuple(self.hobbies))

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict (hobbies as a list)"""
        return {"name": self.name, "age": self.age, "hobbies": list(self.hobbies)}


@dataclass(frozen=True)
class Grouping:
    """
    One group produced by group_by()

    Attributes:
        key: Group key (the first-seen key value for the group)
        items: Group members in their original order
    """

    key: Any
    items: tuple = ()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def count(self) -> int:
        """Number of members in the group"""
        return len(self.items)

    @classmethod
    def of(cls, key: Any, items: Iterable[Any]) -> "Grouping":
        return cls(key, tuple(items))
