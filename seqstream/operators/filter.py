"""
Filter operator - keeps elements matching predicates

Evaluates predicates and only yields elements that match.
"""

from collections.abc import Iterator
from typing import Any, Callable

from seqstream.operators.base import Operator, describe

PredicateFn = Callable[[Any], Any]


class Filter(Operator):
    """
    Filter operator - evaluates predicates

    Pulls elements from child and only yields those that satisfy
    all predicates (AND logic). Chained filter() calls are fused into
    a single Filter holding several predicates.
    """

    def __init__(self, child: Operator, predicates: list[PredicateFn]):
        """
        Initialize filter operator

        Args:
            child: Child operator to pull elements from
            predicates: List of predicates (AND'd together, evaluated in order)
        """
        super().__init__(child)
        self.predicates = predicates

    def __iter__(self) -> Iterator[Any]:
        for element in self.child:
            if self._matches(element):
                yield element

    def _matches(self, element: Any) -> bool:
        """
        Check if element matches all predicates

        Stops at the first failing predicate. Exceptions raised by a
        predicate propagate to the caller.
        """
        for predicate in self.predicates:
            if not predicate(element):
                return False
        return True

    def fuse(self, predicate: PredicateFn) -> "Filter":
        """Return a new Filter over the same child with one more predicate"""
        return Filter(self.child, self.predicates + [predicate])

    def __repr__(self) -> str:
        pred_str = " AND ".join(describe(p) for p in self.predicates)
        return f"Filter({pred_str})"
