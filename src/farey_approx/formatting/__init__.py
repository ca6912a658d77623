"""
Formatting — текстовый и JSON вывод результата поиска.
"""

from farey_approx.formatting.diagram import (
    format_diagram,
    format_float_plain,
    format_trace_line,
    format_value,
)
from farey_approx.formatting.report import build_report

__all__ = [
    "format_diagram",
    "format_float_plain",
    "format_trace_line",
    "format_value",
    "build_report",
]
