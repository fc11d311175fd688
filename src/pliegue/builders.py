"""Document combinators.

The public way to build documents. Every function returns a new tree and
never mutates its arguments.

Example:
    >>> from pliegue import fold, group, nest, render, text
    >>> doc = group(nest(fold([text("a"), text("b"), text("c")]), 2))
    >>> render(doc, 80)
    'a b c'
    >>> render(doc, 3)
    'a\\n  b\\n  c'

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from pliegue.errors import DocumentError
from pliegue.nodes import NIL, Break, Cons, Doc, Group, Nest, Nil, Text, is_doc
from pliegue.protocols import ToDoc


def nil() -> Nil:
    """The empty document."""
    return NIL


def text(s: str) -> Text:
    """A literal run of text.

    Raises:
        DocumentError: If ``s`` contains a newline.

    """
    if "\n" in s:
        msg = f"Text cannot contain newlines, use break_() instead: {s!r}"
        raise DocumentError(msg)
    return Text(s)


def break_with(s: str) -> Break:
    """An optional line break rendered as ``s`` when its group is flat.

    Raises:
        DocumentError: If ``s`` contains a newline.

    """
    if "\n" in s:
        msg = f"Break fallback cannot contain newlines: {s!r}"
        raise DocumentError(msg)
    return Break(s)


def break_() -> Break:
    """An optional line break rendered as a single space when flat."""
    return Break(" ")


def concat(a: Doc, b: Doc) -> Cons:
    """Concatenate two documents without a separator.

    Cons operands are spliced into the result, so the tree never holds a
    Cons directly inside another Cons.

    """
    left = a.children if isinstance(a, Cons) else (a,)
    right = b.children if isinstance(b, Cons) else (b,)
    return Cons(left + right)


def concat_list(docs: Iterable[Doc]) -> Doc:
    """Concatenate a sequence of documents, starting from ``nil()``."""
    doc: Doc = NIL
    for d in docs:
        doc = concat(doc, d)
    return doc


def concat_with_break(a: Doc, b: Doc) -> Doc:
    """Concatenate two documents with a ``break_()`` between them.

    If either side is Nil the other side is returned unchanged and no
    break is inserted.

    """
    if isinstance(a, Nil):
        return b
    if isinstance(b, Nil):
        return a
    return concat(concat(a, break_()), b)


def as_doc(value: Doc | ToDoc | str) -> Doc:
    """Coerce a value into a document.

    Documents pass through, ``ToDoc`` values are converted with
    ``to_doc()`` and strings become ``text()``.

    Raises:
        DocumentError: If the value has no document form.

    """
    if is_doc(value):
        return value  # type: ignore[return-value]
    if isinstance(value, str):
        return text(value)
    if isinstance(value, ToDoc):
        return value.to_doc()
    msg = f"Cannot convert {type(value).__name__} to a document"
    raise DocumentError(msg)


def fold[T](items: Iterable[T], to_doc: Callable[[T], Doc] | None = None) -> Doc:
    """Join items into one document with a break between neighbours.

    Folds ``concat_with_break`` left to right starting from ``nil()``, so
    items that convert to Nil vanish without leaving a stray separator.

    Args:
        items: Values to join
        to_doc: Converter for each item (defaults to ``as_doc``)

    Returns:
        The joined document, or Nil when every item is empty

    """
    convert = to_doc or as_doc
    doc: Doc = NIL
    for item in items:
        doc = concat_with_break(doc, convert(item))  # type: ignore[arg-type]
    return doc


def nest(d: Doc, indent: int) -> Nest:
    """Add ``indent`` columns to every newline rendered inside ``d``."""
    return Nest(d, indent)


def group(d: Doc) -> Group:
    """Make ``d`` an independent flat/broken layout decision."""
    return Group(d)


__all__ = [
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
]
