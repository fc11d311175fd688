"""Inspect how many groups came out flat vs broken."""

from pliegue import Printer
from pliegue.css import CssCompoundSelector, CssFile, CssProperty, CssRule, CssSelector
from pliegue.profiling import profiled_render

sheet = CssFile(tuple(
    CssRule(
        CssCompoundSelector((CssSelector(f".item-{i}"),)),
        (CssProperty("box-shadow", ("0", "1px", "2px", "rgba(0, 0, 0, 0.2)")),),
    )
    for i in range(50)
))

with profiled_render() as metrics:
    Printer(width=30)(sheet)

print(metrics.summary())
