"""Print a small stylesheet at several widths.

Selectors and property blocks always break (their breaks sit outside any
group); only long property values wrap, and only when they don't fit.
"""

from pliegue import Printer
from pliegue.css import CssCompoundSelector, CssFile, CssProperty, CssRule, CssSelector

stylesheet = CssFile((
    CssRule(
        selector=CssCompoundSelector((
            CssSelector("a-tag", ">"),
            CssSelector(".b-selector", "+"),
            CssSelector(".c-selector.d-selector"),
        )),
        properties=(
            CssProperty("display", ("flex",)),
            CssProperty("color", ("yellow",)),
            CssProperty("transform", ("translate(10%, 10%)", "scale(1.2)", "rotate(160deg)")),
        ),
    ),
    CssRule(
        selector=CssCompoundSelector((
            CssSelector("c-tag", "~"),
            CssSelector(".f-selector.g-selector"),
        )),
        properties=(CssProperty("padding", ("12px", "12px", "12px", "12px")),),
    ),
))

for width in (40, 50, 60):
    print("-" * 32)
    print(f"Print with width {width}")
    print(Printer(width=width)(stylesheet))
