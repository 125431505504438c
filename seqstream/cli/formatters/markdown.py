"""
Markdown formatter for documentation and sharing
"""

from typing import Any

from seqstream.cli.formatters.base import BaseFormatter, format_cell


class MarkdownFormatter(BaseFormatter):
    """Format results as a Markdown table"""

    def format(self, results: list[dict[str, Any]], **kwargs) -> str:
        """
        Format results as a Markdown table

        Args:
            results: List of row dictionaries
            **kwargs: Options like 'show_footer', 'align'

        Returns:
            Markdown formatted table string
        """
        if not results:
            return "_No results found._"

        columns = list(results[0].keys())

        header = "| " + " | ".join(columns) + " |"

        # 'left', 'center' or 'right', globally or per column
        align = kwargs.get("align", "left")
        separators = []
        for col in columns:
            col_align = align if isinstance(align, str) else align.get(col, "left")
            if col_align == "center":
                separators.append(":---:")
            elif col_align == "right":
                separators.append("---:")
            else:
                separators.append(":---")

        separator = "| " + " | ".join(separators) + " |"

        data_rows = []
        for row in results:
            values = [format_cell(row.get(col)).replace("|", "\\|") for col in columns]
            data_rows.append("| " + " | ".join(values) + " |")

        output = "\n".join([header, separator] + data_rows)

        if kwargs.get("show_footer", True):
            row_count = len(results)
            output += f"\n\n_{row_count} row{'s' if row_count != 1 else ''}_"

        return output
