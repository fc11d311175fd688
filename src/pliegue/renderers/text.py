"""Width-aware text renderer.

Walks a document with an explicit work stack and lays it out against a
target width. Each Group is resolved on the spot: flat if its content
fits on what is left of the current line, broken otherwise. Because the
decision reads the live column, the same Group can come out flat in one
position and broken in another.

Mode Semantics:
- FLAT: Breaks render as their fallback string
- BROKEN: Breaks render as a newline plus the current indentation
- UNSET: outside any Group; Breaks always render as newlines

Thread Safety:
All per-render state (work stack, StringBuilder) is local to each
render() call. A TextRenderer instance can be shared across threads.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from pliegue.config import get_render_config
from pliegue.errors import RenderError
from pliegue.fitting import fits
from pliegue.nodes import Break, Cons, Doc, Group, Nest, Nil, Text
from pliegue.profiling import get_render_accumulator
from pliegue.stringbuilder import StringBuilder
from pliegue.utils.logger import get_logger

logger = get_logger(__name__)


class Mode(Enum):
    """Break mode of the enclosing group."""

    UNSET = "unset"
    FLAT = "flat"
    BROKEN = "broken"


@dataclass(frozen=True, slots=True)
class RenderState:
    """One pending unit of work: a document and the context it renders in."""

    indentation: int
    mode: Mode
    doc: Doc


class TextRenderer:
    """Render documents to strings for a given width.

    Usage:
        >>> from pliegue import fold, group, text
        >>> TextRenderer(width=3).render(group(fold(["a", "b"])))
        'a b'
        >>> TextRenderer(width=2).render(group(fold(["a", "b"])))
        'a\\nb'

    The width is soft: a Text run longer than the width is emitted as is.
    """

    __slots__ = ("_width",)

    def __init__(self, width: int | None = None) -> None:
        """Initialize renderer.

        Args:
            width: Target line width (uses the active RenderConfig if None)
        """
        self._width = get_render_config().width if width is None else width

    @property
    def width(self) -> int:
        return self._width

    def render(self, doc: Doc) -> str:
        """Lay out ``doc`` and return the rendered string.

        Raises:
            RenderError: If the tree contains an object that is not a
                document node.

        """
        width = self._width
        acc = get_render_accumulator()
        logger.debug("Rendering document at width %d", width)

        sb = StringBuilder()
        stack: list[RenderState] = [RenderState(0, Mode.UNSET, doc)]
        visits = 0

        while stack:
            state = stack.pop()
            visits += 1
            match state.doc:
                case Nil():
                    continue
                case Text(content=content):
                    sb.append(content)
                case Break(content=content):
                    if state.mode is Mode.FLAT:
                        sb.append(content)
                    else:
                        sb.newline(state.indentation)
                case Nest(child=child, indent=indent):
                    stack.append(RenderState(state.indentation + indent, state.mode, child))
                case Cons(children=children):
                    stack.extend(
                        RenderState(state.indentation, state.mode, child)
                        for child in reversed(children)
                    )
                case Group(child=child):
                    remaining = width - sb.column
                    flat = fits(child, remaining)
                    if acc is not None:
                        acc.record_group(flat)
                    logger.debug(
                        "Group at column %d resolved %s (remaining width %d)",
                        sb.column,
                        "flat" if flat else "broken",
                        remaining,
                    )
                    mode = Mode.FLAT if flat else Mode.BROKEN
                    stack.append(RenderState(state.indentation, mode, child))
                case other:
                    msg = f"Cannot render {type(other).__name__}: not a document node"
                    raise RenderError(msg, node=other)

        result = sb.build()
        logger.debug("Rendered %d nodes into %d characters", visits, len(result))
        if acc is not None:
            acc.record_render(node_visits=visits, output_length=len(result))
        return result

    def render_many(self, docs: Iterable[Doc]) -> list[str]:
        """Render several documents at this renderer's width."""
        return [self.render(doc) for doc in docs]


def render(doc: Doc, width: int | None = None) -> str:
    """Render a document to a string.

    Args:
        doc: Document to render
        width: Target line width (uses the active RenderConfig if None)

    Returns:
        The laid-out text

    Example:
        >>> from pliegue import break_with, concat, fold, group, nest, text
        >>> doc = group(nest(concat(break_with(""), fold([text("a"), text("b")])), 2))
        >>> render(doc, 2)
        '\\n  a\\n  b'

    """
    return TextRenderer(width).render(doc)


def render_many(docs: Iterable[Doc], width: int | None = None) -> list[str]:
    """Render several documents with one resolved width."""
    return TextRenderer(width).render_many(docs)


__all__ = ["Mode", "RenderState", "TextRenderer", "render", "render_many"]
