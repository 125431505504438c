"""
GroupBy Operator

Groups elements by a key function.
"""

from collections.abc import Iterator
from typing import Any, Callable

from seqstream.core.types import Grouping
from seqstream.operators.base import Operator, describe
from seqstream.utils.keys import KeyIndex


class GroupBy(Operator):
    """
    GROUP BY operator

    Uses hash-based grouping:
    1. Scan all input elements
    2. Look up each element's key by structural equality
    3. Append the element to its group
    4. Yield one Grouping per key

    Groups come out in first-seen key order and members keep their
    original order.

    Note: This operator materializes all input in memory (not lazy).
    """

    def __init__(self, source: Operator, key: Callable[[Any], Any]):
        """
        Initialize GroupBy operator

        Args:
            source: Source operator
            key: Key function applied to each element
        """
        super().__init__(source)
        self.key = key

    def __iter__(self) -> Iterator[Grouping]:
        index = KeyIndex("group_by")
        keys: list[Any] = []
        members: list[list[Any]] = []

        for element in self.child:
            group_key = self.key(element)
            slot = index.lookup(group_key)

            if slot is None:
                slot = index.add(group_key)
                keys.append(group_key)
                members.append([])

            members[slot].append(element)

        for group_key, items in zip(keys, members):
            yield Grouping.of(group_key, items)

    def __repr__(self) -> str:
        return f"GroupBy({describe(self.key)})"
