"""
Distinct operator - removes duplicate elements
"""

from collections.abc import Iterator
from typing import Any

from seqstream.operators.base import Operator
from seqstream.utils.keys import KeyIndex


class Distinct(Operator):
    """
    Distinct operator

    Yields the first occurrence of every value (structural equality) and
    skips later duplicates. Elements stream through; only the values
    seen so far are held in memory.
    """

    def __iter__(self) -> Iterator[Any]:
        seen = KeyIndex("distinct")

        for element in self.child:
            if seen.lookup(element) is None:
                seen.add(element)
                yield element
