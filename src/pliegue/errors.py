"""Exception classes for Pliegue.

Provides standardized exceptions for error handling throughout Pliegue.
Rendering itself never fails on well-formed documents; these cover bad
construction input, foreign objects in a tree, malformed serialized data
and invalid configuration.
"""

from __future__ import annotations


class PliegueError(Exception):
    """Base exception for all Pliegue errors.

    Subclass this for specific error categories.
    """

    pass


class DocumentError(PliegueError, ValueError):
    """Invalid input while building a document.

    Raised when text contains an embedded newline, or when a value
    cannot be converted into a document.
    """

    pass


class RenderError(PliegueError):
    """Error during rendering.

    Raised when the renderer meets an object that is not a document node.
    """

    def __init__(self, message: str, node: object | None = None) -> None:
        """Initialize render error.

        Args:
            message: Error description
            node: The offending object (optional)
        """
        self.node = node
        super().__init__(message)


class SerializationError(PliegueError, ValueError):
    """Malformed serialized document.

    Raised by ``from_dict``/``from_json`` on missing or unknown node types
    and on fields a builder would reject (wrong type, embedded newline).
    """

    pass


class ConfigError(PliegueError, ValueError):
    """Invalid render configuration value."""

    def __init__(self, field_name: str, message: str) -> None:
        """Initialize config error.

        Args:
            field_name: Name of the offending RenderConfig field
            message: Description of the problem
        """
        self.field_name = field_name
        super().__init__(f"RenderConfig.{field_name}: {message}")
