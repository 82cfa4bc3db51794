"""Tests for declaration shape recognition."""

from __future__ import annotations

import pytest

from dolc.dsl.shapes import Declaration, DeclarationKind, leading_identifier, recognize


class TestSpiritShape:
    def test_spirit_with_brace(self) -> None:
        assert recognize("spirit Counter {") == Declaration(
            kind=DeclarationKind.SPIRIT, name="Counter", opens_brace=True
        )

    def test_spirit_without_brace(self) -> None:
        decl = recognize("spirit Counter")
        assert decl is not None
        assert decl.kind is DeclarationKind.SPIRIT
        assert decl.opens_brace is False

    def test_spirit_brace_without_space(self) -> None:
        decl = recognize("spirit Counter{")
        assert decl is not None
        assert decl.name == "Counter"
        assert decl.opens_brace is True

    def test_spirit_must_start_the_line(self) -> None:
        assert recognize("let spirit Foo {") is None

    def test_spirit_keyword_needs_whitespace(self) -> None:
        assert recognize("spiritual Foo {") is None

    def test_spirit_wins_over_function_on_same_line(self) -> None:
        decl = recognize("spirit Foo { fn bar() {} }")
        assert decl is not None
        assert decl.kind is DeclarationKind.SPIRIT
        assert decl.name == "Foo"


class TestFunctionShape:
    @pytest.mark.parametrize(
        "text,name",
        [
            ("fn bar() {}", "bar"),
            ("pub fn exported(x) {", "exported"),
            ("fn spaced (a, b) {", "spaced"),
            ("fn 9lives() {}", "9lives"),
            ("} fn after() {", "after"),
        ],
    )
    def test_function_names(self, text: str, name: str) -> None:
        decl = recognize(text)
        assert decl is not None
        assert decl.kind is DeclarationKind.FUNCTION
        assert decl.name == name

    @pytest.mark.parametrize(
        "text",
        [
            "fn bad-name() {}",
            "fn missing_parens {",
            "myfn thing() {}",
            "fn_helper()",
            "fn ",
        ],
    )
    def test_non_matching_lines(self, text: str) -> None:
        assert recognize(text) is None


class TestLeadingIdentifier:
    def test_identifier(self) -> None:
        assert leading_identifier("count = 0") == "count"

    def test_no_identifier(self) -> None:
        assert leading_identifier("}") is None
        assert leading_identifier("42 + x") is None
