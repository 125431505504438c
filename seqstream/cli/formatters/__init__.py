"""
Output formatters for CLI

Available formatters:
- TableFormatter: Rich tables
- JSONFormatter: Machine-readable JSON
- CSVFormatter: Unix-friendly CSV
- MarkdownFormatter: GitHub Flavored Markdown tables
"""

from seqstream.cli.formatters.base import BaseFormatter, to_rows
from seqstream.cli.formatters.csv import CSVFormatter
from seqstream.cli.formatters.json import JSONFormatter
from seqstream.cli.formatters.markdown import MarkdownFormatter
from seqstream.cli.formatters.table import TableFormatter

__all__ = [
    "BaseFormatter",
    "CSVFormatter",
    "JSONFormatter",
    "MarkdownFormatter",
    "TableFormatter",
    "get_formatter",
    "to_rows",
]


def get_formatter(format_name: str) -> BaseFormatter:
    """
    Get formatter by name

    Args:
        format_name: Name of formatter (table, json, csv, markdown)

    Returns:
        Formatter instance

    Raises:
        ValueError: If formatter not found
    """
    formatters = {
        "table": TableFormatter,
        "json": JSONFormatter,
        "csv": CSVFormatter,
        "markdown": MarkdownFormatter,
    }

    if format_name not in formatters:
        available = ", ".join(formatters.keys())
        raise ValueError(f"Unknown format: {format_name}. Available formats: {available}")

    return formatters[format_name]()
