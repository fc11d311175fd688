"""
Pliegue: Document-Algebra Pretty Printer for Python

Build a tree of layout primitives (text, optional breaks, indentation and
groups) and render it against a maximum line width. Each group is laid
out flat when it fits on the rest of the line and broken otherwise, in
the Wadler/Prettier tradition. Zero runtime dependencies.

Quick Start:
    >>> from pliegue import fold, group, nest, render, text
    >>> doc = group(nest(fold([text("alpha"), text("beta"), text("gamma")]), 2))
    >>> render(doc, 80)
    'alpha beta gamma'
    >>> print(render(doc, 10))
    alpha
      beta
      gamma

    >>> # Or use the high-level Printer class with any ToDoc value
    >>> from pliegue import Printer
    >>> printer = Printer(width=40)
    >>> printer(doc)
    'alpha beta gamma'

Your Own Trees:
    Give any AST node a ``to_doc()`` method returning a document and it
    can be passed to ``fold`` or ``Printer`` directly. See ``pliegue.css``
    for a worked example.

"""

from collections.abc import Iterable

from pliegue.builders import (
    as_doc,
    break_,
    break_with,
    concat,
    concat_list,
    concat_with_break,
    fold,
    group,
    nest,
    nil,
    text,
)
from pliegue.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from pliegue.debug import dump
from pliegue.errors import (
    ConfigError,
    DocumentError,
    PliegueError,
    RenderError,
    SerializationError,
)
from pliegue.fitting import fits
from pliegue.nodes import NIL, Break, Cons, Doc, Group, Nest, Nil, Text
from pliegue.profiling import RenderAccumulator, get_render_accumulator, profiled_render
from pliegue.protocols import ToDoc
from pliegue.renderers.protocol import DocRenderer
from pliegue.renderers.text import Mode, TextRenderer, render, render_many
from pliegue.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"


class Printer:
    """High-level printer combining configuration and renderer.

    Usage:
        >>> printer = Printer(width=60)
        >>> printer("hello")
        'hello'

        >>> # Any ToDoc value works
        >>> from pliegue.css import CssProperty
        >>> printer(CssProperty("color", ("yellow",)))
        'color: yellow;'

    Thread Safety:
        Config is immutable and set via ContextVar (thread-local) for the
        duration of each call. Safe to share one Printer across threads.

    """

    __slots__ = ("_config",)

    def __init__(self, *, width: int | None = None, indent: int | None = None) -> None:
        """Initialize printer.

        Args:
            width: Target line width (defaults to RenderConfig's default)
            indent: Indent used by builders that nest blocks
                (defaults to RenderConfig's default)

        Raises:
            ConfigError: If width or indent is negative.
        """
        values = {"width": width, "indent": indent}
        self._config = RenderConfig(**{k: v for k, v in values.items() if v is not None})

    @property
    def config(self) -> RenderConfig:
        return self._config

    def __call__(self, value: Doc | ToDoc | str) -> str:
        """Convert ``value`` to a document and render it.

        Conversion runs with this printer's config active, so builders
        that read ``RenderConfig.indent`` see this printer's indent.

        """
        with render_config_context(self._config):
            return TextRenderer(self._config.width).render(as_doc(value))

    def render_many(self, values: Iterable[Doc | ToDoc | str]) -> list[str]:
        """Render several values with this printer's config."""
        with render_config_context(self._config):
            renderer = TextRenderer(self._config.width)
            return [renderer.render(as_doc(value)) for value in values]


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "fits",
    "render",
    "render_many",
    # Builders
    "as_doc",
    "break_",
    "break_with",
    "concat",
    "concat_list",
    "concat_with_break",
    "fold",
    "group",
    "nest",
    "nil",
    "text",
    # Document nodes
    "Doc",
    "NIL",
    "Break",
    "Cons",
    "Group",
    "Nest",
    "Nil",
    "Text",
    # Protocols
    "ToDoc",
    "DocRenderer",
    # Renderer
    "Mode",
    "TextRenderer",
    # Errors
    "ConfigError",
    "DocumentError",
    "PliegueError",
    "RenderError",
    "SerializationError",
    # Profiling
    "RenderAccumulator",
    "get_render_accumulator",
    "profiled_render",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Debugging
    "dump",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
    # High-level
    "Printer",
]
