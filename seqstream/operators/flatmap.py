"""
FlatMap operator - implements flat_map()
"""

from collections.abc import Iterable, Iterator
from typing import Any, Callable

from seqstream.operators.base import Operator, describe


class FlatMap(Operator):
    """
    FlatMap operator

    Projects each element to a sub-sequence and yields the
    sub-sequences' elements one after another, in order.
    """

    def __init__(self, child: Operator, projection: Callable[[Any], Iterable[Any]]):
        super().__init__(child)
        self.projection = projection

    def __iter__(self) -> Iterator[Any]:
        for element in self.child:
            yield from self.projection(element)

    def __repr__(self) -> str:
        return f"FlatMap({describe(self.projection)})"
