"""CSS rule trees as documents.

A small reference client: a stylesheet model whose nodes implement
``ToDoc``. Rule bodies always break (their breaks sit outside any
group); property values wrap as a group when they don't fit.

Example:
    >>> from pliegue import render
    >>> rule = CssRule(
    ...     selector=CssCompoundSelector((CssSelector("a-tag", ">"),)),
    ...     properties=(CssProperty("display", ("flex",)),),
    ... )
    >>> print(render(rule.to_doc(), 60))
    a-tag > {
      display: flex;
    }

Nothing here validates CSS; names and values are laid out verbatim.

"""

from __future__ import annotations

from dataclasses import dataclass

from pliegue.builders import break_, concat_list, fold, group, nest, text
from pliegue.config import get_render_config
from pliegue.nodes import Doc


@dataclass(frozen=True, slots=True)
class CssProperty:
    """Declaration: ``name: value tokens;``"""

    name: str
    value: tuple[str, ...]

    def to_doc(self) -> Doc:
        value_doc = group(nest(fold(text(token) for token in self.value), get_render_config().indent))
        return concat_list([text(self.name), text(": "), value_doc, text(";")])


@dataclass(frozen=True, slots=True)
class CssSelector:
    """Simple selector with the combinator that follows it."""

    selector: str
    combinator: str = ""

    def to_doc(self) -> Doc:
        if not self.combinator:
            return text(self.selector)
        return concat_list([text(self.selector), text(" "), text(self.combinator)])


@dataclass(frozen=True, slots=True)
class CssCompoundSelector:
    """Selectors chained by combinators, e.g. ``a > .b + .c``."""

    selectors: tuple[CssSelector, ...]

    def to_doc(self) -> Doc:
        return fold(self.selectors)


@dataclass(frozen=True, slots=True)
class CssRule:
    """Selector followed by a block of properties."""

    selector: CssCompoundSelector
    properties: tuple[CssProperty, ...] = ()

    def to_doc(self) -> Doc:
        # selector {
        #   property1
        #   property2
        # }
        return concat_list([
            self.selector.to_doc(),
            text(" {"),
            nest(concat_list([break_(), fold(self.properties)]), get_render_config().indent),
            break_(),
            text("}"),
        ])


@dataclass(frozen=True, slots=True)
class CssFile:
    """Stylesheet: rules separated by line breaks."""

    rules: tuple[CssRule, ...] = ()

    def to_doc(self) -> Doc:
        return fold(self.rules)


__all__ = [
    "CssCompoundSelector",
    "CssFile",
    "CssProperty",
    "CssRule",
    "CssSelector",
]
