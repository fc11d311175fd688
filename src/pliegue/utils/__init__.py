"""Utility modules for Pliegue.

Provides:
- text: column_width, indentation for width accounting
- walk: iter_nodes, node_count, has_break for stack-based traversal
- logger: get_logger for logging
"""

from pliegue.utils.logger import get_logger
from pliegue.utils.text import column_width, indentation, longest_line
from pliegue.utils.walk import has_break, iter_nodes, node_count

__all__ = [
    "column_width",
    "get_logger",
    "has_break",
    "indentation",
    "iter_nodes",
    "longest_line",
    "node_count",
]
