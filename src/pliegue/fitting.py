"""Fit evaluation for groups.

Decides whether a group can be laid out flat on the remainder of the
current line. The simulation is optimistic: every Break is measured by
its flat string and every nested Group is treated as flat, whatever it
would resolve to when actually rendered.

Only content that has somewhere to wrap can fail. A document with no
Break at all fits whatever its length, since there is no other layout
to fall back to.

Thread Safety:
    Pure function over an immutable tree. Safe to call from any thread.

"""

from __future__ import annotations

from pliegue.nodes import Break, Cons, Doc, Group, Nest, Nil, Text


def fits(doc: Doc, available_width: int) -> bool:
    """Return True if ``doc`` can be rendered flat within ``available_width``.

    The result is False only once the running column count exceeds
    ``available_width`` and at least one Break has been seen.

    Args:
        doc: Group (or any document) to measure
        available_width: Columns left on the current line

    Returns:
        True if the document fits flat

    Example:
        >>> from pliegue import fold, group, text
        >>> fits(group(fold([text("a"), text("b")])), 3)
        True
        >>> fits(group(fold([text("a"), text("b")])), 2)
        False
        >>> fits(text("a long run with no break"), 2)
        True

    Complexity: O(n) in the number of nodes of ``doc``; stops early on
    the first overflow past a break.
    """
    stack: list[Doc] = [doc]
    column = 0
    seen_break = False

    while stack:
        node = stack.pop()
        match node:
            case Nil():
                continue
            case Text(content=content):
                column += len(content)
            case Break(content=content):
                seen_break = True
                column += len(content)
            case Nest(child=child) | Group(child=child):
                stack.append(child)
            case Cons(children=children):
                stack.extend(reversed(children))

        if seen_break and column > available_width:
            return False

    return True


__all__ = ["fits"]
