"""Readable dumps of document trees.

``dump`` prints a document's structure, laid out by the renderer itself,
so large trees stay readable at any width:

    >>> from pliegue import fold, group, nest
    >>> print(dump(group(nest(fold(["a", "b"]), 2)), width=80))
    Group(Nest(Cons(Text('a'), Break(' '), Text('b')), 2))
    >>> print(dump(group(nest(fold(["a", "b"]), 2)), width=44))
    Group(
      Nest(
        Cons(Text('a'), Break(' '), Text('b')),
        2
      )
    )

"""

from __future__ import annotations

from pliegue.builders import break_with, concat, concat_list, group, nest, text
from pliegue.nodes import NIL, Break, Cons, Doc, Group, Nest, Nil, Text
from pliegue.renderers.text import render


def _call(name: str, args: list[Doc]) -> Doc:
    """``name(arg, arg, ...)`` that breaks one argument per line when too wide."""
    if not args:
        return text(f"{name}()")
    body: Doc = NIL
    for i, arg in enumerate(args):
        if i:
            body = concat_list([body, text(","), break_with(" ")])
        body = concat(body, arg)
    return group(
        concat_list([
            text(f"{name}("),
            nest(concat(break_with(""), body), 2),
            break_with(""),
            text(")"),
        ])
    )


def to_debug_doc(doc: Doc) -> Doc:
    """Build a document that spells out the structure of ``doc``.

    Works bottom-up with an explicit stack, so the depth of ``doc`` is
    not limited by the interpreter's recursion limit.
    """
    built: list[Doc] = []
    stack: list[tuple[Doc, bool]] = [(doc, False)]

    while stack:
        node, expanded = stack.pop()
        match node:
            case Cons(children=children) if not expanded:
                stack.append((node, True))
                stack.extend((child, False) for child in reversed(children))
            case Nest(child=child) | Group(child=child) if not expanded:
                stack.append((node, True))
                stack.append((child, False))
            case Cons(children=children):
                start = len(built) - len(children)
                args = built[start:]
                del built[start:]
                built.append(_call("Cons", args))
            case Nest(indent=indent):
                built.append(_call("Nest", [built.pop(), text(str(indent))]))
            case Group():
                built.append(_call("Group", [built.pop()]))
            case Nil():
                built.append(text("Nil()"))
            case Text(content=content):
                built.append(text(f"Text({content!r})"))
            case Break(content=content):
                built.append(text(f"Break({content!r})"))
            case other:
                built.append(text(repr(other)))

    return built.pop()


def dump(doc: Doc, width: int | None = None) -> str:
    """Render the structure of ``doc`` as constructor calls.

    Args:
        doc: Document to describe
        width: Target line width (uses the active RenderConfig if None)

    """
    return render(to_debug_doc(doc), width)


__all__ = ["dump", "to_debug_doc"]
