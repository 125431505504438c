"""
Project operator - implements map()

Projects each element to a derived value.
"""

from collections.abc import Iterator
from typing import Any, Callable

from seqstream.operators.base import Operator, describe


class Project(Operator):
    """
    Project operator - applies projections to every element

    Preserves order and count. Chained map() calls are fused into a
    single Project that applies its projections left to right.
    """

    def __init__(self, child: Operator, projections: list[Callable[[Any], Any]]):
        """
        Initialize project operator

        Args:
            child: Child operator to pull elements from
            projections: Projections applied in order to each element
        """
        super().__init__(child)
        self.projections = projections

    def __iter__(self) -> Iterator[Any]:
        for element in self.child:
            for projection in self.projections:
                element = projection(element)
            yield element

    def fuse(self, projection: Callable[[Any], Any]) -> "Project":
        """Return a new Project over the same child with one more projection"""
        return Project(self.child, self.projections + [projection])

    def __repr__(self) -> str:
        proj_str = " -> ".join(describe(p) for p in self.projections)
        return f"Project({proj_str})"
