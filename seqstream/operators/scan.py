"""
Scan operator - yields the source elements

This is a leaf operator (has no child).
"""

from collections.abc import Iterable, Iterator
from typing import Any

from seqstream.operators.base import Operator


class Scan(Operator):
    """
    Scan operator - leaf of the operator tree

    The source is snapshotted into a tuple at construction, so later
    changes to the caller's list (or a one-shot iterator being
    exhausted) never affect query results, and every iteration
    restarts from the same elements.
    """

    def __init__(self, source: Iterable[Any]):
        """
        Initialize scan operator

        Args:
            source: Finite iterable of elements
        """
        super().__init__(child=None)
        self.elements = tuple(source)

    def __iter__(self) -> Iterator[Any]:
        yield from self.elements

    def __len__(self) -> int:
        return len(self.elements)

    def __repr__(self) -> str:
        return f"Scan({len(self.elements)} elements)"
