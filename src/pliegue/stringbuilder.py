"""StringBuilder for O(n) string accumulation with column tracking.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. Also tracks the current column (in code
points) so the renderer can ask how much of the line is left.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations

from pliegue.utils.text import column_width, indentation


class StringBuilder:
    """Efficient string accumulator that knows its current column.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("a {").newline(2).append("b;").column
            4
            >>> sb.build()
            'a {\\n  b;'

    Thread Safety:
        Instance is local to each render() call.
        No shared mutable state.

    """

    __slots__ = ("_column", "_parts")

    def __init__(self) -> None:
        """Initialize empty StringBuilder at column 0."""
        self._parts: list[str] = []
        self._column = 0

    @property
    def column(self) -> int:
        """Column of the next character on the current line."""
        return self._column

    def append(self, s: str) -> StringBuilder:
        """Append text to the current line.

        Args:
            s: Text to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._column += column_width(s)
        return self

    def newline(self, indent: int = 0) -> StringBuilder:
        """Start a new line indented by ``indent`` spaces.

        The column is reset to ``indent``.

        Args:
            indent: Indentation of the new line

        Returns:
            self for method chaining
        """
        self._parts.append("\n")
        self._parts.append(indentation(indent))
        self._column = indent
        return self

    def build(self) -> str:
        """Join all parts into final string.

        Returns:
            Concatenated string of all appended parts
        """
        return "".join(self._parts)
