"""Shared fixtures and utilities for Lox tests."""

import io

import pytest

from lox import Lox, LoxLexer, LoxParser


class LoxTestHelpers:
    """Helper utilities for Lox testing."""

    @staticmethod
    def run_and_capture(source: str) -> str:
        """Run a program on a fresh Lox instance and return everything it printed."""
        output = io.StringIO()
        Lox(output).run(source)
        return output.getvalue()

    @staticmethod
    def parse(source: str):
        """Lex and parse source text into statements."""
        return LoxParser(LoxLexer().lex(source)).parse()

    @staticmethod
    def token_types(source: str) -> list:
        """Lex source text and return the token type names, EOF included."""
        return [token.type.name for token in LoxLexer().lex(source)]


@pytest.fixture
def output():
    """Provide a stream that captures program output."""
    return io.StringIO()


@pytest.fixture
def lox(output):
    """Create a fresh Lox instance whose output is captured by the `output` fixture."""
    return Lox(output)


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return LoxTestHelpers
