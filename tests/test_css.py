"""Tests for the CSS reference client."""

import pytest

from pliegue import Printer, RenderConfig, ToDoc, render, render_config_context
from pliegue.css import (
    CssCompoundSelector,
    CssFile,
    CssProperty,
    CssRule,
    CssSelector,
)


def _rule(selectors: list[tuple[str, str]], properties: list[tuple[str, tuple[str, ...]]]) -> CssRule:
    return CssRule(
        selector=CssCompoundSelector(tuple(CssSelector(s, c) for s, c in selectors)),
        properties=tuple(CssProperty(name, value) for name, value in properties),
    )


@pytest.fixture
def stylesheet() -> CssFile:
    return CssFile((
        _rule(
            [("a-tag", ">"), (".b-selector", "+"), (".c-selector.d-selector", "")],
            [
                ("display", ("flex",)),
                ("color", ("yellow",)),
                ("transform", ("translate(10%, 10%)", "scale(1.2)", "rotate(160deg)")),
            ],
        ),
        _rule(
            [("c-tag", "~"), (".f-selector.g-selector", "")],
            [("padding", ("12px", "12px", "12px", "12px"))],
        ),
    ))


class TestProtocol:
    @pytest.mark.parametrize(
        "node",
        [
            CssProperty("a", ("b",)),
            CssSelector("a"),
            CssCompoundSelector(()),
            CssRule(CssCompoundSelector(())),
            CssFile(),
        ],
    )
    def test_nodes_are_to_doc(self, node: object) -> None:
        assert isinstance(node, ToDoc)


class TestProperty:
    def test_single_token(self) -> None:
        assert render(CssProperty("display", ("flex",)).to_doc(), 80) == "display: flex;"

    def test_tokens_flat_when_fit(self) -> None:
        prop = CssProperty("margin", ("1px", "2px"))
        assert render(prop.to_doc(), 80) == "margin: 1px 2px;"

    def test_tokens_break_with_indent(self) -> None:
        prop = CssProperty("margin", ("1px", "2px", "3px"))
        assert render(prop.to_doc(), 10) == "margin: 1px\n  2px\n  3px;"

    def test_empty_value(self) -> None:
        assert render(CssProperty("content", ()).to_doc(), 80) == "content: ;"


class TestSelector:
    def test_with_combinator(self) -> None:
        assert render(CssSelector("a", ">").to_doc(), 80) == "a >"

    def test_without_combinator(self) -> None:
        assert render(CssSelector(".b").to_doc(), 80) == ".b"

    def test_compound_selectors_break_outside_groups(self) -> None:
        compound = CssCompoundSelector((CssSelector("a", ">"), CssSelector(".b")))
        assert render(compound.to_doc(), 1000) == "a >\n.b"


class TestRule:
    def test_generous_width(self) -> None:
        rule = _rule([("a-tag", ">")], [("display", ("flex",))])
        assert render(rule.to_doc(), 60) == "a-tag > {\n  display: flex;\n}"

    def test_narrow_width_keeps_single_token_value(self) -> None:
        """Only breaks between value tokens can fire; "display: flex" has none."""
        rule = _rule([("a-tag", ">")], [("display", ("flex",))])
        assert render(rule.to_doc(), 5) == "a-tag > {\n  display: flex;\n}"

    def test_narrow_width_breaks_between_value_tokens_only(self) -> None:
        rule = _rule([("a-tag", ">")], [("padding", ("1px", "2px"))])
        assert render(rule.to_doc(), 5) == "a-tag > {\n  padding: 1px\n    2px;\n}"

    def test_properties_on_separate_lines(self) -> None:
        rule = _rule([("p", "")], [("a", ("1",)), ("b", ("2",))])
        assert render(rule.to_doc(), 1000) == "p {\n  a: 1;\n  b: 2;\n}"

    def test_indent_from_config(self) -> None:
        rule = _rule([("p", "")], [("a", ("1",))])
        with render_config_context(RenderConfig(indent=4)):
            doc = rule.to_doc()
        assert render(doc, 80) == "p {\n    a: 1;\n}"


class TestStylesheet:
    def test_width_60(self, stylesheet: CssFile) -> None:
        assert render(stylesheet.to_doc(), 60) == (
            "a-tag >\n"
            ".b-selector +\n"
            ".c-selector.d-selector {\n"
            "  display: flex;\n"
            "  color: yellow;\n"
            "  transform: translate(10%, 10%) scale(1.2) rotate(160deg);\n"
            "}\n"
            "c-tag ~\n"
            ".f-selector.g-selector {\n"
            "  padding: 12px 12px 12px 12px;\n"
            "}"
        )

    @pytest.mark.parametrize("width", [40, 50])
    def test_narrower_widths_wrap_transform(self, stylesheet: CssFile, width: int) -> None:
        out = render(stylesheet.to_doc(), width)
        assert (
            "  transform: translate(10%, 10%)\n"
            "    scale(1.2)\n"
            "    rotate(160deg);\n"
        ) in out
        assert "  padding: 12px 12px 12px 12px;\n" in out

    def test_printer_accepts_css_nodes(self, stylesheet: CssFile) -> None:
        printer = Printer(width=60)
        assert printer(stylesheet) == render(stylesheet.to_doc(), 60)

    def test_empty_stylesheet(self) -> None:
        assert render(CssFile().to_doc(), 80) == ""
