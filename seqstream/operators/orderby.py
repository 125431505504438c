"""
OrderBy Operator

Sorts elements by a key function, ascending or descending.
"""

from collections.abc import Iterator
from typing import Any, Callable

from seqstream.operators.base import Operator, describe


class OrderBy(Operator):
    """
    ORDER BY operator

    Stable sort in both directions: elements with equal keys keep their
    original relative order, also when descending.

    Note: This operator materializes all input in memory (not lazy).
    """

    def __init__(self, source: Operator, key: Callable[[Any], Any], descending: bool = False):
        """
        Initialize OrderBy operator

        Args:
            source: Source operator
            key: Key function applied to each element
            descending: Sort from largest to smallest key
        """
        super().__init__(source)
        self.key = key
        self.descending = descending

    def __iter__(self) -> Iterator[Any]:
        """
        Execute sorting

        Yields:
            Elements in sorted order
        """
        elements = list(self.child)

        # sorted() with reverse=True still keeps ties in input order
        yield from sorted(elements, key=self.key, reverse=self.descending)

    def __repr__(self) -> str:
        direction = "DESC" if self.descending else "ASC"
        return f"OrderBy({describe(self.key)} {direction})"
