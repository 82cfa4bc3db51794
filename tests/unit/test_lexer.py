"""Tests for the line normalizer."""

from __future__ import annotations

from dolc.dsl.lexer import SourceLine, SourceLines


class TestSourceLines:
    def test_yields_trimmed_lines_with_numbers(self) -> None:
        lines = list(SourceLines("spirit Foo {\n    fn bar() {}\n}"))
        assert lines == [
            SourceLine(number=1, text="spirit Foo {"),
            SourceLine(number=2, text="fn bar() {}"),
            SourceLine(number=3, text="}"),
        ]

    def test_skips_blank_and_comment_lines(self) -> None:
        source = "\n   \n// comment\n  // indented comment\nfn a() {}\n"
        lines = list(SourceLines(source))
        assert lines == [SourceLine(number=5, text="fn a() {}")]

    def test_count_includes_blank_and_comment_lines(self) -> None:
        source = "\n   \n// comment\nfn a() {}\n"
        assert SourceLines(source).count == 5
        assert len(SourceLines(source)) == 5

    def test_empty_source_has_one_line(self) -> None:
        lines = SourceLines("")
        assert lines.count == 1
        assert list(lines) == []

    def test_iteration_is_restartable(self) -> None:
        lines = SourceLines("fn a() {}\nfn b() {}")
        first = list(lines)
        second = list(lines)
        assert first == second
        assert len(first) == 2

    def test_crlf_line_endings_are_trimmed(self) -> None:
        lines = list(SourceLines("fn a() {}\r\n}\r\n"))
        assert [line.text for line in lines] == ["fn a() {}", "}"]
        assert SourceLines("fn a() {}\r\n}\r\n").count == 3

    def test_comment_marker_mid_line_is_kept(self) -> None:
        lines = list(SourceLines("fn a() {} // trailing"))
        assert lines[0].text == "fn a() {} // trailing"
