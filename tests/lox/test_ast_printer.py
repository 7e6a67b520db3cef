"""Tests for rendering Lox syntax trees as text."""

import pytest

from lox import Lox, LoxASTPrinter, LoxLexer, LoxParser


def parse_expression(source: str):
    """Parse a standalone expression."""
    return LoxParser(LoxLexer().lex(source)).parse_expression()


class TestPrefixRendering:
    """Test the Lisp-like prefix rendering."""

    @pytest.mark.parametrize("source,expected", [
        ("1", "1"),
        ("2.5", "2.5"),
        ('"hi"', '"hi"'),
        ("true", "true"),
        ("nil", "nil"),
        ("x", "x"),
        ("-1 + 2 * (3)", "(+ (- 1) (* 2 (group 3)))"),
        ("!(1 < 2)", "(! (group (< 1 2)))"),
        ("a = b = 1", "(= a (= b 1))"),
        ("1 - 2 - 3", "(- (- 1 2) 3)"),
    ])
    def test_expressions(self, source, expected):
        """Test rendering of each expression kind."""
        assert LoxASTPrinter().print(parse_expression(source)) == expected

    def test_statements(self, helpers):
        """Test rendering of each statement kind."""
        printer = LoxASTPrinter()
        statements = helpers.parse('print 1 + 2; "x"; var a; var b = a;')

        assert [printer.print(s) for s in statements] == [
            "(print (+ 1 2))",
            '(; "x")',
            "(var a)",
            "(var b a)",
        ]


class TestSourceRendering:
    """Test rendering back to parenthesized Lox source."""

    @pytest.mark.parametrize("source,expected", [
        ("1 + 2 * 3", "(1 + (2 * 3))"),
        ("-1 + 2", "((-1) + 2)"),
        ("--1", "(-(-1))"),
        ("(1)", "(1)"),
        ('"a" + "b"', '("a" + "b")'),
        ("!nil", "(!nil)"),
        ("x = 1 + 2", "x = (1 + 2)"),
    ])
    def test_expressions(self, source, expected):
        """Test that sub-expressions are fully parenthesized."""
        assert LoxASTPrinter().to_source(parse_expression(source)) == expected

    def test_statements(self, helpers):
        """Test that statements render to source that parses back with only extra groupings."""
        printer = LoxASTPrinter()
        source = 'var a = 1 + 2; var b; print a * 3; "s";'
        statements = helpers.parse(source)

        rendered = " ".join(printer.to_source(s) for s in statements)
        assert rendered == 'var a = (1 + 2); var b; print (a * 3); "s";'
        assert [printer.print(s) for s in helpers.parse(rendered)] == [
            "(var a (group (+ 1 2)))",
            "(var b)",
            "(print (group (* a 3)))",
            '(; "s")',
        ]

    @pytest.mark.parametrize("source", [
        "1 + 2 * 3 - 4 / 5",
        "-(1 - 2) * -3",
        "((1 + 2)) / (3 - 4 - 5)",
        "0.1 + 0.2 * 1000000000000000000000",
        "1 < 2",
        "2 * 3 >= 6",
        "!(1 == 2)",
        '"ab" + "" + "cd"',
        "!!nil",
        "1 / 3",
    ])
    def test_round_trip_preserves_value(self, source):
        """Test that re-parsing the rendered form evaluates to the same value."""
        printer = LoxASTPrinter()
        lox = Lox()

        original = parse_expression(source)
        reparsed = parse_expression(printer.to_source(original))

        assert lox.interpreter.evaluate(reparsed) == lox.interpreter.evaluate(original)
