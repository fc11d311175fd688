"""Text measurement helpers.

Column accounting is by Unicode code point: ``"é"`` and ``"日"`` each
occupy one column, regardless of how many bytes they encode to.
"""

from __future__ import annotations


def column_width(s: str) -> int:
    """Number of columns ``s`` occupies on a line.

    Example:
        >>> column_width("naïve")
        5

    """
    return len(s)


def indentation(amount: int) -> str:
    """Whitespace for an indentation level (empty for zero or negative)."""
    return " " * amount if amount > 0 else ""


def longest_line(s: str) -> int:
    """Width of the widest line in a rendered string."""
    return max((column_width(line) for line in s.split("\n")), default=0)
