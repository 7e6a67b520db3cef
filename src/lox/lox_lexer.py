"""Lexer for Lox source text."""

import logging
from typing import List

from lox.lox_error import LoxLexError
from lox.lox_token import KEYWORDS, LoxToken, LoxTokenType
from lox.lox_value import LoxValue


class LoxLexer:
    """Lexes Lox source text into tokens, collecting every lexical error in a single pass."""

    # Operators that can be extended by a following '=' to form a two-character operator
    TWO_CHAR_OPERATORS = {
        '!': (LoxTokenType.BANG, LoxTokenType.BANG_EQUAL),
        '=': (LoxTokenType.EQUAL, LoxTokenType.EQUAL_EQUAL),
        '<': (LoxTokenType.LESS, LoxTokenType.LESS_EQUAL),
        '>': (LoxTokenType.GREATER, LoxTokenType.GREATER_EQUAL),
    }

    SINGLE_CHAR_TOKENS = {
        '(': LoxTokenType.LEFT_PAREN,
        ')': LoxTokenType.RIGHT_PAREN,
        '{': LoxTokenType.LEFT_BRACE,
        '}': LoxTokenType.RIGHT_BRACE,
        ',': LoxTokenType.COMMA,
        '.': LoxTokenType.DOT,
        '-': LoxTokenType.MINUS,
        '+': LoxTokenType.PLUS,
        ';': LoxTokenType.SEMICOLON,
        '*': LoxTokenType.STAR,
    }

    def __init__(self) -> None:
        """Initialize the lexer."""
        self.errors: List[LoxLexError] = []
        self._logger = logging.getLogger("LoxLexer")

    def lex(self, source: str) -> List[LoxToken]:
        """
        Lex Lox source text.

        Scanning does not stop at the first problem: every lexical error is
        recorded in `self.errors` and scanning resumes after the offending text.

        Args:
            source: The source text to lex

        Returns:
            List of tokens, always terminated by an EOF token on the final line

        Raises:
            LoxLexError: If any lexical error was found.  The first error is raised and
                carries the full list in its `errors` attribute.
        """
        self.errors = []
        tokens: List[LoxToken] = []
        i = 0
        line = 1

        while i < len(source):
            start = i
            char = source[i]
            i += 1

            if char == '\n':
                line += 1
                continue

            if char in ' \r\t':
                continue

            if char in self.SINGLE_CHAR_TOKENS:
                tokens.append(LoxToken(self.SINGLE_CHAR_TOKENS[char], char, None, line))
                continue

            if char in self.TWO_CHAR_OPERATORS:
                single_type, double_type = self.TWO_CHAR_OPERATORS[char]
                if i < len(source) and source[i] == '=':
                    i += 1
                    tokens.append(LoxToken(double_type, source[start:i], None, line))
                    continue

                tokens.append(LoxToken(single_type, char, None, line))
                continue

            if char == '/':
                # Line comments run to the end of the line, leaving the newline to be counted
                if i < len(source) and source[i] == '/':
                    while i < len(source) and source[i] != '\n':
                        i += 1

                    continue

                tokens.append(LoxToken(LoxTokenType.SLASH, char, None, line))
                continue

            if char == '"':
                i, line = self._read_string(source, start, line, tokens)
                continue

            if self._is_digit(char):
                i = self._read_number(source, start, line, tokens)
                continue

            if self._is_alpha(char):
                i = self._read_identifier(source, start, line, tokens)
                continue

            self._error(line, f"Unexpected character '{char}'.")

        tokens.append(LoxToken(LoxTokenType.EOF, "", None, line))
        self._logger.debug("lexed %d tokens over %d lines", len(tokens), line)

        if self.errors:
            first = self.errors[0]
            raise LoxLexError(first.message, first.line, list(self.errors))

        return tokens

    def _read_string(self, source: str, start: int, line: int, tokens: List[LoxToken]) -> tuple[int, int]:
        """
        Read a string literal whose opening quote is at `start`.

        Strings may span lines; the line counter advances for each embedded newline.

        Returns:
            Tuple of (position after the literal, current line)
        """
        i = start + 1
        while i < len(source) and source[i] != '"':
            if source[i] == '\n':
                line += 1

            i += 1

        if i >= len(source):
            self._error(line, "Unterminated string.")
            return i, line

        # Consume the closing quote
        i += 1
        value: LoxValue = source[start + 1:i - 1]
        tokens.append(LoxToken(LoxTokenType.STRING, source[start:i], value, line))
        return i, line

    def _read_number(self, source: str, start: int, line: int, tokens: List[LoxToken]) -> int:
        """
        Read a number literal starting at `start`.

        A fractional part is only consumed when the '.' is followed by a digit, so
        `1.` lexes as the number 1 followed by a DOT token.

        Returns:
            Position after the literal
        """
        i = start
        while i < len(source) and self._is_digit(source[i]):
            i += 1

        if i + 1 < len(source) and source[i] == '.' and self._is_digit(source[i + 1]):
            i += 1
            while i < len(source) and self._is_digit(source[i]):
                i += 1

        text = source[start:i]
        tokens.append(LoxToken(LoxTokenType.NUMBER, text, float(text), line))
        return i

    def _read_identifier(self, source: str, start: int, line: int, tokens: List[LoxToken]) -> int:
        """
        Read an identifier or keyword starting at `start`.

        Returns:
            Position after the identifier
        """
        i = start
        while i < len(source) and self._is_alpha(source[i]):
            i += 1

        text = source[start:i]
        token_type = KEYWORDS.get(text, LoxTokenType.IDENTIFIER)

        literal: LoxValue = None
        if token_type == LoxTokenType.TRUE:
            literal = True

        elif token_type == LoxTokenType.FALSE:
            literal = False

        tokens.append(LoxToken(token_type, text, literal, line))
        return i

    def _is_digit(self, char: str) -> bool:
        """Check if a character is an ASCII digit."""
        return '0' <= char <= '9'

    def _is_alpha(self, char: str) -> bool:
        """Check if a character can appear in an identifier (ASCII letters and underscore)."""
        return ('a' <= char <= 'z') or ('A' <= char <= 'Z') or char == '_'

    def _error(self, line: int, message: str) -> None:
        """Record a lexical error and keep scanning."""
        self._logger.debug("lexical error on line %d: %s", line, message)
        self.errors.append(LoxLexError(message, line))
