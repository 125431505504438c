"""
Aggregation function implementations

Provides the COUNT and SUM aggregations behind the count() and sum()
terminal operations. Each aggregator maintains state and can be
updated incrementally.
"""

import numbers
from typing import Any, Union

Number = Union[int, float]


class Aggregator:
    """Base class for aggregators"""

    def update(self, value: Any) -> None:
        """Update aggregator with a new value"""
        raise NotImplementedError

    def result(self) -> Any:
        """Get final aggregated result"""
        raise NotImplementedError


class CountAggregator(Aggregator):
    """COUNT aggregator - counts every value it is given"""

    def __init__(self):
        self.count = 0

    def update(self, value: Any) -> None:
        """Update count"""
        self.count += 1

    def result(self) -> int:
        """Return total count"""
        return self.count


class SumAggregator(Aggregator):
    """
    SUM aggregator - arithmetic sum of numeric values

    Unlike SQL SUM, an empty input sums to 0, and a non-numeric value
    raises TypeError instead of being skipped. Any numbers.Number counts
    as numeric (int, float, Decimal, Fraction...) except bool.
    """

    def __init__(self, start: Number = 0):
        self.sum: Number = start

    def update(self, value: Any) -> None:
        """Add value to sum"""
        if isinstance(value, bool) or not isinstance(value, numbers.Number):
            raise TypeError(
                f"sum() requires numeric values, got {type(value).__name__}: {value!r}"
            )
        self.sum += value

    def result(self) -> Number:
        """Return sum (0 if no values)"""
        return self.sum


def create_aggregator(function: str) -> Aggregator:
    """
    Factory function to create appropriate aggregator

    Args:
        function: Aggregate function name (COUNT, SUM)

    Returns:
        Aggregator instance

    Raises:
        ValueError: If function is not recognized
    """
    aggregators = {
        "COUNT": CountAggregator,
        "SUM": SumAggregator,
    }

    function = function.upper()
    if function not in aggregators:
        available = ", ".join(aggregators)
        raise ValueError(f"Unknown aggregate function: {function}. Available: {available}")

    return aggregators[function]()
