"""
Base formatter interface for CLI output

All formatters must implement the format() method. Query results of
any shape are first normalized into rows with to_rows().
"""

from collections.abc import Iterable
from typing import Any

from seqstream.core.types import Grouping, Person


def _to_row(value: Any) -> dict[str, Any]:
    if isinstance(value, Person):
        return value.to_dict()
    if isinstance(value, Grouping):
        return {
            "key": value.key,
            "count": len(value),
            "items": [_plain(item) for item in value],
        }
    if isinstance(value, dict):
        return dict(value)
    return {"value": _plain(value)}


def _plain(value: Any) -> Any:
    if isinstance(value, Person):
        return value.to_dict()
    if isinstance(value, tuple):
        return list(value)
    return value


def to_rows(result: Any) -> list[dict[str, Any]]:
    """
    Normalize a query result into a list of row dicts

    - Person -> one row with name, age, hobbies
    - list/tuple/other non-string iterable -> one row per element
      (Person, Grouping and dict elements expand into columns, other
      values go in a "value" column)
    - scalar (bool, number, string, ...) -> [{"result": value}]

    Args:
        result: Terminal result of a query

    Returns:
        List of rows
    """
    if isinstance(result, Person):
        return [result.to_dict()]
    if isinstance(result, Iterable) and not isinstance(result, (str, bytes, dict)):
        return [_to_row(value) for value in result]
    return [{"result": result}]


def format_cell(value: Any) -> str:
    """Render one value as display text (lists joined with commas)"""
    if isinstance(value, (list, tuple)):
        return ", ".join(format_cell(item) for item in value)
    if isinstance(value, dict):
        return ", ".join(f"{k}={format_cell(v)}" for k, v in value.items())
    return str(value)


class BaseFormatter:
    """Base class for all output formatters"""

    def format(self, results: list[dict[str, Any]], **kwargs) -> str:
        """
        Format query results for output

        Args:
            results: List of row dictionaries
            **kwargs: Additional formatter-specific options

        Returns:
            Formatted string ready for output
        """
        raise NotImplementedError("Formatters must implement format() method")

    def get_name(self) -> str:
        """Get formatter name"""
        return self.__class__.__name__.replace("Formatter", "").lower()
