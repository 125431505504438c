"""
Rich table formatter for terminal output
"""

from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from seqstream.cli.formatters.base import BaseFormatter, format_cell


class TableFormatter(BaseFormatter):
    """Format results as a Rich table"""

    def format(self, results: list[dict[str, Any]], **kwargs) -> str:
        """
        Format results as a Rich table

        Args:
            results: List of row dictionaries
            **kwargs: Options like 'no_color', 'show_footer', 'title'

        Returns:
            Formatted table string
        """
        if not results:
            return "No results found."

        console = Console(force_terminal=not kwargs.get("no_color", False))
        columns = list(results[0].keys())

        # Narrow terminal: compact box and tighter columns
        if console.width < 80:
            table = Table(
                show_header=True,
                header_style="bold magenta",
                box=box.SIMPLE,
                title=kwargs.get("title"),
            )
            max_col_width = kwargs.get("max_width", 15)
        else:
            table = Table(show_header=True, header_style="bold magenta", title=kwargs.get("title"))
            max_col_width = kwargs.get("max_width", 40)

        for col in columns:
            table.add_column(col, style="cyan", overflow="ellipsis", max_width=max_col_width)

        for row in results:
            table.add_row(*[escape(format_cell(row.get(col))) for col in columns])

        with console.capture() as capture:
            console.print(table)

        output = capture.get()

        if kwargs.get("show_footer", True):
            row_count = len(results)
            footer = f"[dim]{row_count} row{'s' if row_count != 1 else ''}[/dim]"
            with console.capture() as capture:
                console.print(footer)
            output += capture.get()

        return output
