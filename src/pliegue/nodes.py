"""Document nodes for Pliegue.

All document nodes are frozen dataclasses with slots for:
- Immutability: combinators build new trees, never mutate in place
- Safe sharing: one document can be rendered from many threads at once
- Pattern matching: Python 3.10+ match statements work naturally

Node Variants:
Doc
├── Nil     renders to nothing
├── Text    literal run of characters
├── Break   optional line break with a flat fallback string
├── Cons    ordered sequence of documents
├── Nest    indentation scope
└── Group   independent flat/broken layout decision

Nodes are plain data. Build them through ``pliegue.builders`` so Cons
flattening and Nil elision are applied consistently.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Nil:
    """The empty document.

    Absorbing element for ``concat_with_break``: joining Nil with any
    document yields that document with no separator.

    """


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text.

    Contributes ``len(content)`` columns (code points) in every mode.
    Must not contain newlines; use Break for layout breaks.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Break:
    """Optional line break.

    Flat mode: rendered as ``content`` (usually a single space).
    Broken mode: rendered as a newline plus the current indentation.

    """

    content: str = " "


@dataclass(frozen=True, slots=True)
class Cons:
    """Ordered sequence of documents sharing indentation and mode."""

    children: tuple[Doc, ...]


@dataclass(frozen=True, slots=True)
class Nest:
    """Indentation scope.

    Adds ``indent`` columns to every newline emitted while rendering
    ``child``. Has no effect on flat rendering.

    """

    child: Doc
    indent: int


@dataclass(frozen=True, slots=True)
class Group:
    """Layout decision point.

    Rendered flat when its content fits on the rest of the line,
    broken otherwise. Nested groups decide independently.

    """

    child: Doc


# Shared empty document (Nil carries no state)
NIL = Nil()


# PEP 695 type alias for any document node
type Doc = Nil | Text | Break | Cons | Nest | Group

# Concrete classes, for isinstance checks
DOC_TYPES: tuple[type, ...] = (Nil, Text, Break, Cons, Nest, Group)


def is_doc(value: object) -> bool:
    """Return True if ``value`` is one of the document node variants."""
    return isinstance(value, DOC_TYPES)


__all__ = [
    "DOC_TYPES",
    "NIL",
    "Break",
    "Cons",
    "Doc",
    "Group",
    "Nest",
    "Nil",
    "Text",
    "is_doc",
]
