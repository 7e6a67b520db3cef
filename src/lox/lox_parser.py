"""Recursive-descent parser for Lox with statement-level error recovery."""

import logging
from typing import Callable, List

from lox.lox_ast import (
    LoxAssignExpr, LoxBinaryExpr, LoxExpr, LoxExpressionStmt, LoxGroupingExpr, LoxLiteralExpr,
    LoxPrintStmt, LoxStmt, LoxUnaryExpr, LoxVarStmt, LoxVariableExpr
)
from lox.lox_error import LoxParseError
from lox.lox_token import LoxToken, LoxTokenType


class LoxParser:
    """
    Parses a token sequence into a list of statements.

    Operator precedence is encoded by the nesting of the rule methods, from
    `_assignment` (loosest) down to `_primary` (tightest).  Every binary level
    is left-associative; unary and assignment are right-associative.
    """

    # Tokens that begin a new statement, used when resynchronizing after an error
    STATEMENT_STARTS = {
        LoxTokenType.CLASS,
        LoxTokenType.FUN,
        LoxTokenType.VAR,
        LoxTokenType.FOR,
        LoxTokenType.IF,
        LoxTokenType.WHILE,
        LoxTokenType.PRINT,
        LoxTokenType.RETURN,
    }

    def __init__(self, tokens: List[LoxToken]):
        """
        Initialize parser with tokens.

        Args:
            tokens: Token sequence produced by the lexer, terminated by an EOF token
        """
        if not tokens or tokens[-1].type != LoxTokenType.EOF:
            last_line = tokens[-1].line if tokens else 1
            tokens = [*tokens, LoxToken(LoxTokenType.EOF, "", None, last_line)]

        self.tokens = tokens
        self.pos = 0
        self.errors: List[LoxParseError] = []
        self._logger = logging.getLogger("LoxParser")

    def parse(self) -> List[LoxStmt]:
        """
        Parse every statement up to the EOF token.

        Returns:
            Statements in execution order

        Raises:
            LoxParseError: If any statement was malformed.  The first error is raised and
                carries the full list in its `errors` attribute.
        """
        statements: List[LoxStmt] = []
        while not self._is_at_end():
            statement = self._declaration()
            if statement is not None:
                statements.append(statement)

        if self.errors:
            first = self.errors[0]
            raise LoxParseError(first.message, first.line, list(self.errors))

        return statements

    def parse_expression(self) -> LoxExpr:
        """
        Parse a single expression that must make up the whole token sequence.

        Returns:
            The parsed expression

        Raises:
            LoxParseError: If the tokens do not form exactly one expression
        """
        expr = self._expression()
        if not self._is_at_end():
            raise self._error(self._peek(), "Expect end of expression.")

        return expr

    def _declaration(self) -> LoxStmt | None:
        """Parse a declaration, recovering to the next statement boundary on error."""
        try:
            if self._match(LoxTokenType.VAR):
                return self._var_declaration()

            return self._statement()

        except LoxParseError as e:
            self.errors.append(e)
            self._logger.debug("recovering from syntax error: %s", e.report())
            self._synchronize()
            return None

    def _var_declaration(self) -> LoxStmt:
        """Parse `var IDENT ("=" expression)? ";"` after the `var` keyword."""
        name = self._consume(LoxTokenType.IDENTIFIER, "Expect variable name.")

        initializer = None
        if self._match(LoxTokenType.EQUAL):
            initializer = self._expression()

        self._consume(LoxTokenType.SEMICOLON, "Expect ';' after variable declaration.")
        return LoxVarStmt(name, initializer)

    def _statement(self) -> LoxStmt:
        if self._match(LoxTokenType.PRINT):
            value = self._expression()
            self._consume(LoxTokenType.SEMICOLON, "Expect ';' after value.")
            return LoxPrintStmt(value)

        expr = self._expression()
        self._consume(LoxTokenType.SEMICOLON, "Expect ';' after expression.")
        return LoxExpressionStmt(expr)

    def _expression(self) -> LoxExpr:
        return self._assignment()

    def _assignment(self) -> LoxExpr:
        """
        Parse an assignment or fall through to equality.

        The target is parsed as an ordinary expression first; only a bare variable
        is accepted as the left-hand side of '='.
        """
        expr = self._equality()

        if self._match(LoxTokenType.EQUAL):
            equals = self._previous()
            value = self._assignment()

            if isinstance(expr, LoxVariableExpr):
                return LoxAssignExpr(expr.name, value)

            raise self._error(equals, "Invalid assignment target.")

        return expr

    def _equality(self) -> LoxExpr:
        return self._binary_level(self._comparison, LoxTokenType.BANG_EQUAL, LoxTokenType.EQUAL_EQUAL)

    def _comparison(self) -> LoxExpr:
        return self._binary_level(
            self._term,
            LoxTokenType.GREATER,
            LoxTokenType.GREATER_EQUAL,
            LoxTokenType.LESS,
            LoxTokenType.LESS_EQUAL
        )

    def _term(self) -> LoxExpr:
        return self._binary_level(self._factor, LoxTokenType.MINUS, LoxTokenType.PLUS)

    def _factor(self) -> LoxExpr:
        return self._binary_level(self._unary, LoxTokenType.SLASH, LoxTokenType.STAR)

    def _binary_level(self, operand: Callable[[], LoxExpr], *operators: LoxTokenType) -> LoxExpr:
        """
        Parse one left-associative binary precedence level.

        Args:
            operand: Rule method for the next tighter-binding level
            operators: Operator token types handled at this level

        Returns:
            Operands folded left-to-right into nested binary expressions
        """
        expr = operand()

        while self._match(*operators):
            operator = self._previous()
            right = operand()
            expr = LoxBinaryExpr(expr, operator, right)

        return expr

    def _unary(self) -> LoxExpr:
        if self._match(LoxTokenType.BANG, LoxTokenType.MINUS):
            operator = self._previous()
            right = self._unary()
            return LoxUnaryExpr(operator, right)

        return self._primary()

    def _primary(self) -> LoxExpr:
        if self._match(LoxTokenType.FALSE):
            return LoxLiteralExpr(False)

        if self._match(LoxTokenType.TRUE):
            return LoxLiteralExpr(True)

        if self._match(LoxTokenType.NIL):
            return LoxLiteralExpr(None)

        if self._match(LoxTokenType.NUMBER, LoxTokenType.STRING):
            return LoxLiteralExpr(self._previous().literal)

        if self._match(LoxTokenType.IDENTIFIER):
            return LoxVariableExpr(self._previous())

        if self._match(LoxTokenType.LEFT_PAREN):
            expr = self._expression()
            self._consume(LoxTokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return LoxGroupingExpr(expr)

        raise self._error(self._peek(), "Expect expression.")

    def _match(self, *token_types: LoxTokenType) -> bool:
        """Consume the current token if it has one of the given types."""
        if self._peek().type in token_types:
            self._advance()
            return True

        return False

    def _consume(self, token_type: LoxTokenType, message: str) -> LoxToken:
        """Consume a token of the expected type or raise a syntax error at the current token."""
        if self._check(token_type):
            return self._advance()

        raise self._error(self._peek(), message)

    def _check(self, token_type: LoxTokenType) -> bool:
        return self._peek().type == token_type

    def _is_at_end(self) -> bool:
        return self._peek().type == LoxTokenType.EOF

    def _peek(self) -> LoxToken:
        return self.tokens[self.pos]

    def _previous(self) -> LoxToken:
        return self.tokens[self.pos - 1]

    def _advance(self) -> LoxToken:
        """Move to the next token, never past EOF, and return the consumed token."""
        if not self._is_at_end():
            self.pos += 1

        return self._previous()

    def _error(self, token: LoxToken, message: str) -> LoxParseError:
        """Build a syntax error tagged with the line of the offending token."""
        return LoxParseError(message, token.line)

    def _synchronize(self) -> None:
        """Discard tokens until just after a ';' or just before the start of a new statement."""
        self._advance()

        while not self._is_at_end():
            if self._previous().type == LoxTokenType.SEMICOLON:
                return

            if self._peek().type in self.STATEMENT_STARTS:
                return

            self._advance()
