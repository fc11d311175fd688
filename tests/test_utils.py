"""Tests for Pliegue utility modules."""

import logging

from pliegue import concat_list, fold, group, nest, nil, text
from pliegue.nodes import Break, Cons, Group, Nest, Text


class TestColumnWidth:
    def test_ascii(self) -> None:
        from pliegue.utils.text import column_width

        assert column_width("hello") == 5

    def test_code_points(self) -> None:
        from pliegue.utils.text import column_width

        assert column_width("naïve") == 5
        assert column_width("日本語") == 3

    def test_empty(self) -> None:
        from pliegue.utils.text import column_width

        assert column_width("") == 0


class TestIndentation:
    def test_positive(self) -> None:
        from pliegue.utils.text import indentation

        assert indentation(3) == "   "

    def test_zero_and_negative(self) -> None:
        from pliegue.utils.text import indentation

        assert indentation(0) == ""
        assert indentation(-2) == ""


class TestLongestLine:
    def test_multiline(self) -> None:
        from pliegue.utils.text import longest_line

        assert longest_line("ab\nabcd\n") == 4

    def test_empty(self) -> None:
        from pliegue.utils.text import longest_line

        assert longest_line("") == 0


class TestIterNodes:
    def test_pre_order(self) -> None:
        from pliegue.utils.walk import iter_nodes

        doc = group(nest(fold(["a", "b"]), 2))
        kinds = [type(node) for node in iter_nodes(doc)]
        assert kinds == [Group, Nest, Cons, Text, Break, Text]

    def test_children_in_order(self) -> None:
        from pliegue.utils.walk import iter_nodes

        doc = concat_list([text("1"), group(text("2")), text("3")])
        contents = [n.content for n in iter_nodes(doc) if isinstance(n, Text)]
        assert contents == ["1", "2", "3"]

    def test_deep_document(self) -> None:
        from pliegue.utils.walk import node_count

        doc = text("x")
        for _ in range(50_000):
            doc = group(doc)
        assert node_count(doc) == 50_001


class TestHasBreak:
    def test_without_break(self) -> None:
        from pliegue.utils.walk import has_break

        assert not has_break(group(concat_list([text("a"), nil()])))

    def test_with_nested_break(self) -> None:
        from pliegue.utils.walk import has_break

        assert has_break(group(nest(fold(["a", "b"]), 2)))


class TestLogger:
    def test_prefixes_name(self) -> None:
        from pliegue.utils.logger import get_logger

        assert get_logger("mymodule").name == "pliegue.mymodule"

    def test_keeps_package_names(self) -> None:
        from pliegue.utils.logger import get_logger

        assert get_logger("pliegue").name == "pliegue"
        assert get_logger("pliegue.renderers.text").name == "pliegue.renderers.text"

    def test_returns_stdlib_logger(self) -> None:
        from pliegue.utils.logger import get_logger

        assert isinstance(get_logger("x"), logging.Logger)

    def test_renderer_logs_group_decisions(self, caplog) -> None:  # type: ignore[no-untyped-def]
        from pliegue import render

        with caplog.at_level(logging.DEBUG, logger="pliegue"):
            render(group(fold(["a", "b"])), 1)
        messages = [r.getMessage() for r in caplog.records]
        assert any("resolved broken" in m for m in messages)
        assert any("width 1" in m for m in messages)

    def test_renderer_logs_node_count(self, caplog) -> None:  # type: ignore[no-untyped-def]
        from pliegue import render
        from pliegue.utils.walk import node_count

        doc = group(fold(["a", "b"]))
        with caplog.at_level(logging.DEBUG, logger="pliegue"):
            render(doc, 1)
        messages = [r.getMessage() for r in caplog.records]
        assert f"Rendered {node_count(doc)} nodes into 3 characters" in messages
