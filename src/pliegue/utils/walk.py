"""Iterative traversal of document trees.

Uses an explicit stack so arbitrarily deep documents can be walked
without hitting the interpreter's recursion limit.
"""

from __future__ import annotations

from collections.abc import Iterator

from pliegue.nodes import Break, Cons, Doc, Group, Nest


def iter_nodes(doc: Doc) -> Iterator[Doc]:
    """Yield every node of ``doc`` in pre-order (parent before children).

    Example:
        >>> from pliegue import group, text
        >>> [type(n).__name__ for n in iter_nodes(group(text("a")))]
        ['Group', 'Text']

    """
    stack: list[Doc] = [doc]
    while stack:
        node = stack.pop()
        yield node
        match node:
            case Cons(children=children):
                stack.extend(reversed(children))
            case Nest(child=child) | Group(child=child):
                stack.append(child)


def node_count(doc: Doc) -> int:
    """Total number of nodes in ``doc``."""
    return sum(1 for _ in iter_nodes(doc))


def has_break(doc: Doc) -> bool:
    """Return True if ``doc`` contains at least one Break."""
    return any(isinstance(node, Break) for node in iter_nodes(doc))
