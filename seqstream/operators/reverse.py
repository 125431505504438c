"""
Reverse operator - yields elements last to first
"""

from collections.abc import Iterator
from typing import Any

from seqstream.operators.base import Operator


class Reverse(Operator):
    """
    Reverse operator

    Note: This operator materializes all input in memory (not lazy).
    """

    def __iter__(self) -> Iterator[Any]:
        elements = list(self.child)
        yield from reversed(elements)
