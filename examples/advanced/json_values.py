"""Lay out nested JSON-like values with your own ToDoc adapter.

Any tree can be rendered: wrap its nodes in objects with a ``to_doc()``
method and let groups decide, level by level, what stays on one line.
"""

from dataclasses import dataclass
from typing import Any

from pliegue import Doc, break_with, concat, concat_list, group, nest, render, text


@dataclass(frozen=True)
class Value:
    data: Any

    def to_doc(self) -> Doc:
        match self.data:
            case dict():
                items = [
                    concat(text(f'"{key}": '), Value(value).to_doc())
                    for key, value in self.data.items()
                ]
                return _bracketed("{", items, "}")
            case list():
                return _bracketed("[", [Value(v).to_doc() for v in self.data], "]")
            case bool():
                return text("true" if self.data else "false")
            case str():
                return text(f'"{self.data}"')
            case _:
                return text(str(self.data))


def _bracketed(open_: str, items: list[Doc], close: str) -> Doc:
    if not items:
        return text(open_ + close)
    body = items[0]
    for item in items[1:]:
        body = concat(concat_list([body, text(","), break_with(" ")]), item)
    return group(
        concat_list([
            text(open_),
            nest(concat(break_with(""), body), 2),
            break_with(""),
            text(close),
        ])
    )


data = {
    "name": "pliegue",
    "tags": ["layout", "pretty-printing"],
    "widths": [40, 60, 80],
    "nested": {"flat": True, "items": list(range(12))},
}

doc = Value(data).to_doc()
for width in (100, 40):
    print(render(doc, width))
    print()
