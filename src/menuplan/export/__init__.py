"""Rendering of meal plan results."""

from menuplan.export.formatters import (
    JSONFormatter,
    MarkdownFormatter,
    TableFormatter,
    format_result,
)

__all__ = ["JSONFormatter", "MarkdownFormatter", "TableFormatter", "format_result"]
