"""
CSV formatter for Unix-friendly output
"""

import csv
import io
from typing import Any

from seqstream.cli.formatters.base import BaseFormatter, format_cell


class CSVFormatter(BaseFormatter):
    """Format results as CSV"""

    def format(self, results: list[dict[str, Any]], **kwargs) -> str:
        """
        Format results as CSV

        List-valued cells (e.g. hobbies) are joined with ", ".

        Args:
            results: List of row dictionaries
            **kwargs: Options like 'delimiter', 'quote_all'

        Returns:
            CSV string
        """
        if not results:
            return ""

        columns = list(results[0].keys())

        output = io.StringIO()
        writer = csv.DictWriter(
            output,
            fieldnames=columns,
            delimiter=kwargs.get("delimiter", ","),
            quoting=csv.QUOTE_MINIMAL if not kwargs.get("quote_all") else csv.QUOTE_ALL,
        )

        writer.writeheader()
        for row in results:
            writer.writerow({col: format_cell(row.get(col)) for col in columns})

        return output.getvalue()
