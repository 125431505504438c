"""
JSON formatter for machine-readable output
"""

import json
import numbers
from typing import Any

from seqstream.cli.formatters.base import BaseFormatter
from seqstream.core.types import Grouping, Person


def _encode(value: Any) -> Any:
    # Called by json.dumps for values it cannot encode itself
    if isinstance(value, Person):
        return value.to_dict()
    if isinstance(value, Grouping):
        return {"key": value.key, "count": len(value), "items": list(value)}
    if isinstance(value, (set, frozenset)):
        return list(value)
    if isinstance(value, numbers.Number):
        # Decimal, Fraction: keep the exact value as text
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JSONFormatter(BaseFormatter):
    """Format results as JSON"""

    def format(self, results: list[dict[str, Any]], **kwargs) -> str:
        """
        Format results as JSON

        Records and groupings nested anywhere in a row (a grouping of
        groupings, a record used as a group key) are written as objects.
        Sets become arrays; Decimal and Fraction values become strings.

        Args:
            results: List of row dictionaries
            **kwargs: Options like 'compact', 'indent'

        Returns:
            JSON string
        """
        if kwargs.get("compact", False):
            return json.dumps(results, default=_encode, separators=(",", ":"))
        return json.dumps(results, default=_encode, indent=kwargs.get("indent", 2))
