"""
Main Sequence API - user-facing interface for SeqStream

This is the primary entry point for users. It wraps an operator tree
and provides a fluent API for building and evaluating queries over an
in-memory sequence.

Example:
    >>> from seqstream import from_iterable
    >>> names = (
    ...     from_iterable(people)
    ...     .filter(lambda p: p.age > 30)
    ...     .map(lambda p: p.name)
    ...     .to_list()
    ... )
"""

from collections.abc import Iterable, Iterator
from typing import Any, Callable, Optional

from seqstream.core.exceptions import EmptySequenceError
from seqstream.operators.base import Operator
from seqstream.operators.distinct import Distinct
from seqstream.operators.filter import Filter
from seqstream.operators.flatmap import FlatMap
from seqstream.operators.groupby import GroupBy
from seqstream.operators.orderby import OrderBy
from seqstream.operators.project import Project
from seqstream.operators.reverse import Reverse
from seqstream.operators.scan import Scan
from seqstream.utils.aggregates import create_aggregator

_MISSING = object()


class Sequence:
    """
    Lazy, immutable query over an in-memory sequence

    Intermediate operations (filter, map, flat_map, sort_by, group_by,
    distinct, reverse) return a new Sequence wrapping a larger operator
    tree; nothing is evaluated until a terminal operation (count, sum,
    any, all, first, last, to_list) or iteration pulls from the tree.

    A Sequence can be iterated any number of times. Each pass re-derives
    its elements from the snapshotted source.
    """

    def __init__(self, root: Operator):
        """
        Initialize sequence

        Args:
            root: Root of the operator tree producing this sequence's elements
        """
        self.root = root

    def __iter__(self) -> Iterator[Any]:
        """
        Evaluate the pipeline and yield elements lazily

        Yields:
            Elements of the sequence
        """
        return iter(self.root)

    def __repr__(self) -> str:
        return f"Sequence({self.root!r})"

    # ------------------------------------------------------------------
    # Intermediate operations
    # ------------------------------------------------------------------

    def filter(self, predicate: Callable[[Any], Any]) -> "Sequence":
        """
        Keep elements for which predicate holds, in original order

        Consecutive filters are fused into one Filter operator.

        Args:
            predicate: Function from element to truthy/falsy

        Returns:
            New Sequence
        """
        if isinstance(self.root, Filter):
            return Sequence(self.root.fuse(predicate))
        return Sequence(Filter(self.root, [predicate]))

    def map(self, projection: Callable[[Any], Any]) -> "Sequence":
        """
        Project each element to a derived value, keeping order and count

        Consecutive maps are fused into one Project operator.
        """
        if isinstance(self.root, Project):
            return Sequence(self.root.fuse(projection))
        return Sequence(Project(self.root, [projection]))

    def flat_map(self, projection: Callable[[Any], Iterable[Any]]) -> "Sequence":
        """
        Concatenate, in order, the sub-sequence projected from each element

        Example:
            >>> people.flat_map(lambda p: p.hobbies).count()
            10
        """
        return Sequence(FlatMap(self.root, projection))

    def sort_by(self, key: Callable[[Any], Any], descending: bool = False) -> "Sequence":
        """
        Stable sort by key

        Elements with equal keys keep their original relative order in
        both directions.

        Args:
            key: Key function
            descending: Largest key first

        Returns:
            New Sequence
        """
        return Sequence(OrderBy(self.root, key, descending))

    def group_by(self, key: Callable[[Any], Any]) -> "Sequence":
        """
        Group elements by key

        Returns:
            New Sequence of Grouping(key, items), in first-seen key order
            with members in original order
        """
        return Sequence(GroupBy(self.root, key))

    def distinct(self) -> "Sequence":
        """Remove duplicates by value equality, keeping first occurrences"""
        return Sequence(Distinct(self.root))

    def reverse(self) -> "Sequence":
        """Reverse element order"""
        return Sequence(Reverse(self.root))

    # ------------------------------------------------------------------
    # Terminal operations
    # ------------------------------------------------------------------

    def count(self, predicate: Optional[Callable[[Any], Any]] = None) -> int:
        """
        Count elements

        Args:
            predicate: Optional predicate; only matching elements are counted

        Returns:
            Number of (matching) elements
        """
        source = self.filter(predicate) if predicate is not None else self

        counter = create_aggregator("COUNT")
        for element in source:
            counter.update(element)
        return counter.result()

    def sum(self, projection: Optional[Callable[[Any], Any]] = None):
        """
        Arithmetic sum

        Args:
            projection: Optional function mapping each element to a number;
                without it the elements themselves are summed

        Returns:
            The sum; 0 for an empty sequence

        Raises:
            TypeError: If a summed value is not a number
        """
        source = self.map(projection) if projection is not None else self

        total = create_aggregator("SUM")
        for value in source:
            total.update(value)
        return total.result()

    def any(self, predicate: Optional[Callable[[Any], Any]] = None) -> bool:
        """
        Existential quantifier

        Stops at the first matching element. Without a predicate, reports
        whether the sequence has any element. False for an empty sequence.
        """
        for element in self:
            if predicate is None or predicate(element):
                return True
        return False

    def all(self, predicate: Callable[[Any], Any]) -> bool:
        """
        Universal quantifier

        Stops at the first failing element. True for an empty sequence.
        """
        for element in self:
            if not predicate(element):
                return False
        return True

    def first(self, predicate: Optional[Callable[[Any], Any]] = None) -> Any:
        """
        First element (optionally the first matching predicate)

        Raises:
            EmptySequenceError: If there is no such element
        """
        source = self.filter(predicate) if predicate is not None else self

        for element in source:
            return element
        raise EmptySequenceError("first", filtered=predicate is not None)

    def last(self, predicate: Optional[Callable[[Any], Any]] = None) -> Any:
        """
        Last element (optionally the last matching predicate)

        Raises:
            EmptySequenceError: If there is no such element
        """
        source = self.filter(predicate) if predicate is not None else self

        result = _MISSING
        for element in source:
            result = element

        if result is _MISSING:
            raise EmptySequenceError("last", filtered=predicate is not None)
        return result

    def to_list(self) -> list[Any]:
        """
        Materialize all elements into a list

        Returns:
            New list; changing it does not affect the sequence
        """
        return list(self)

    def explain(self) -> str:
        """
        Get the operator tree as an indented plan

        Example:
            >>> print(people.filter(is_adult).map(name).explain())
            Project(name)
              Filter(is_adult)
                Scan(5 elements)
        """
        return "\n".join(self.root.explain())


def from_iterable(source: Iterable[Any]) -> Sequence:
    """
    Create a Sequence over a finite iterable

    The source is copied at construction; later changes to it are not
    seen by the sequence.

    Args:
        source: Records or other values (lists, tuples, strings, generators...)

    Returns:
        Sequence over a snapshot of source
    """
    return Sequence(Scan(source))
