"""Build a document and render it at two widths with no configuration."""

from pliegue import fold, group, nest, render, text

doc = group(nest(fold([text("hello"), text("pretty"), text("world")]), 2))
print(render(doc, 80))
print(render(doc, 10))
