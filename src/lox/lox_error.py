"""Exception classes for Lox diagnostics, each tagged with the source line."""

from typing import ClassVar, List

from lox.lox_token import LoxToken


class LoxError(Exception):
    """Base exception for Lox errors carrying a line number and message."""

    kind: ClassVar[str] = ""

    def __init__(self, message: str, line: int, errors: 'List[LoxError] | None' = None):
        """
        Initialize a diagnostic.

        Args:
            message: Human-readable description of the problem
            line: Source line (1-indexed) where the problem was found
            errors: Every diagnostic collected by the stage that raised this one.  When
                omitted the error stands alone and lists only itself.
        """
        self.message = message
        self.line = line
        self.errors: List[LoxError] = errors if errors else [self]

        super().__init__(self.report())

    def report(self) -> str:
        """Render the diagnostic as `[line N] KindError: message`."""
        return f"[line {self.line}] {self.kind}Error: {self.message}"


class LoxLexError(LoxError):
    """Lexical errors: unexpected characters and unterminated strings."""

    kind = "Lexical"


class LoxParseError(LoxError):
    """Syntax errors found while parsing a token sequence."""

    kind = "Syntax"


class LoxRuntimeError(LoxError):
    """Errors raised while evaluating a statement."""

    kind = "Runtime"

    def __init__(self, token: LoxToken, message: str):
        """
        Initialize a runtime error.

        Args:
            token: The operator or identifier token being evaluated when the error occurred
            message: Human-readable description of the problem
        """
        self.token = token
        super().__init__(message, token.line)
