"""Main Lox class tying the lexer, parser and interpreter together."""

import logging
from typing import List, TextIO

from lox.lox_ast import LoxExpr, LoxStmt
from lox.lox_interpreter import LoxInterpreter
from lox.lox_lexer import LoxLexer
from lox.lox_parser import LoxParser
from lox.lox_token import LoxToken
from lox.lox_value import LoxValue


class Lox:
    """
    Lox front end and evaluator.

    A `Lox` instance owns one interpreter, and therefore one environment, for its
    whole lifetime.  Successive calls to `run` execute in sequence against that
    environment, so later runs see variables defined by earlier ones.
    """

    def __init__(self, output: TextIO | None = None):
        """
        Initialize Lox.

        Args:
            output: Stream that `print` statements write to (default: stdout)
        """
        self.interpreter = LoxInterpreter(output)
        self._logger = logging.getLogger("Lox")

    def tokenize(self, source: str) -> List[LoxToken]:
        """
        Lex source text.

        Raises:
            LoxLexError: If the source contains lexical errors
        """
        return LoxLexer().lex(source)

    def parse(self, source: str) -> List[LoxStmt]:
        """
        Lex and parse source text into statements.

        Raises:
            LoxLexError: If the source contains lexical errors
            LoxParseError: If any statement is malformed
        """
        tokens = self.tokenize(source)
        return LoxParser(tokens).parse()

    def parse_expression(self, source: str) -> LoxExpr:
        """
        Lex and parse source text holding exactly one expression, with no trailing ';'.

        Raises:
            LoxLexError: If the source contains lexical errors
            LoxParseError: If the source is not a single expression
        """
        tokens = self.tokenize(source)
        return LoxParser(tokens).parse_expression()

    def run(self, source: str) -> None:
        """
        Lex, parse and execute source text.

        Nothing is executed unless the whole source lexes and parses cleanly.

        Args:
            source: Lox program text

        Raises:
            LoxLexError: If the source contains lexical errors
            LoxParseError: If any statement is malformed
            LoxRuntimeError: If execution fails; earlier statements keep their effects
        """
        self.execute(self.parse(source))

    def execute(self, statements: List[LoxStmt]) -> None:
        """
        Execute already-parsed statements against the shared environment.

        Raises:
            LoxRuntimeError: If execution fails; earlier statements keep their effects
        """
        self._logger.debug("running %d statements", len(statements))
        self.interpreter.interpret(statements)

    def evaluate(self, source: str) -> LoxValue:
        """
        Evaluate a single expression against the current environment.

        Args:
            source: Expression text, with no trailing ';'

        Returns:
            The value of the expression

        Raises:
            LoxLexError: If the source contains lexical errors
            LoxParseError: If the source is not a single expression
            LoxRuntimeError: If evaluation fails
        """
        return self.interpreter.evaluate(self.parse_expression(source))
