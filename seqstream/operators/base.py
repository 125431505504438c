"""
Base operator class for Volcano-style sequence evaluation

The Volcano model uses pull-based execution where each operator
pulls elements from its child operator on demand.
"""

from collections.abc import Iterator
from typing import Any, Callable, Optional


def describe(fn: Callable) -> str:
    """Short human-readable name of a predicate/projection for plans"""
    name = getattr(fn, "__name__", None)
    if name is None or name == "<lambda>":
        return repr(fn) if name is None else "lambda"
    return name


class Operator:
    """
    Base class for all sequence operators

    Operators form a tree where:
    - The leaf operator (Scan) yields the snapshotted source elements
    - Internal operators (e.g., Filter, Project) transform elements
    - The root operator is pulled by a terminal operation

    The pull-based execution model means:
    - Operators are lazy (generators)
    - Elements flow through the tree on demand
    - Iterating the root again re-derives everything from the source
    """

    def __init__(self, child: Optional["Operator"] = None):
        """
        Initialize operator

        Args:
            child: Child operator to pull elements from (None for leaf operators)
        """
        self.child = child

    def __iter__(self) -> Iterator[Any]:
        """
        Execute operator and yield results

        This is the core method that defines operator behavior.
        Subclasses must implement this to define how they process elements.

        Yields:
            Elements of the sequence
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement __iter__()")

    def explain(self, indent: int = 0) -> list[str]:
        """Generate execution plan explanation"""
        lines = [" " * indent + repr(self)]
        if self.child is not None:
            lines.extend(self.child.explain(indent + 2))
        return lines

    def __repr__(self) -> str:
        """String representation for debugging"""
        return f"{self.__class__.__name__}()"
