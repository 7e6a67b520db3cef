"""Renders Lox syntax trees as text, either as prefix trees or as parenthesized source."""

from decimal import Decimal
from typing import List

from lox.lox_ast import (
    LoxAssignExpr, LoxBinaryExpr, LoxExpr, LoxExpressionStmt, LoxGroupingExpr, LoxLiteralExpr,
    LoxPrintStmt, LoxStmt, LoxUnaryExpr, LoxVarStmt, LoxVariableExpr
)
from lox.lox_value import LoxValue, stringify


class LoxASTPrinter:
    """
    Render expressions and statements as text.

    `print` produces a Lisp-like prefix tree, so `-1 + 2 * (3)` renders as
    `(+ (- 1) (* 2 (group 3)))`.

    `to_source` produces fully parenthesized Lox source for the same tree,
    `((-1) + (2 * (3)))`, which parses back to an expression with the same value.
    """

    def print(self, node: LoxExpr | LoxStmt) -> str:
        """
        Render a node as a prefix tree.

        Args:
            node: Expression or statement to render

        Returns:
            Parenthesized prefix text
        """
        if isinstance(node, LoxPrintStmt):
            return self._parenthesize("print", [node.expression])

        if isinstance(node, LoxExpressionStmt):
            return self._parenthesize(";", [node.expression])

        if isinstance(node, LoxVarStmt):
            if node.initializer is None:
                return f"(var {node.name.lexeme})"

            return f"(var {node.name.lexeme} {self.print(node.initializer)})"

        if isinstance(node, LoxBinaryExpr):
            return self._parenthesize(node.operator.lexeme, [node.left, node.right])

        if isinstance(node, LoxGroupingExpr):
            return self._parenthesize("group", [node.expression])

        if isinstance(node, LoxUnaryExpr):
            return self._parenthesize(node.operator.lexeme, [node.right])

        if isinstance(node, LoxLiteralExpr):
            if isinstance(node.value, str):
                return f'"{node.value}"'

            return stringify(node.value)

        if isinstance(node, LoxVariableExpr):
            return node.name.lexeme

        if isinstance(node, LoxAssignExpr):
            return f"(= {node.name.lexeme} {self.print(node.value)})"

        raise TypeError(f"Unknown node type: {type(node).__name__}")

    def to_source(self, node: LoxExpr | LoxStmt) -> str:
        """
        Render a node as Lox source with every sub-expression parenthesized.

        Args:
            node: Expression or statement to render

        Returns:
            Source text that parses back to an equivalent tree
        """
        if isinstance(node, LoxPrintStmt):
            return f"print {self.to_source(node.expression)};"

        if isinstance(node, LoxExpressionStmt):
            return f"{self.to_source(node.expression)};"

        if isinstance(node, LoxVarStmt):
            if node.initializer is None:
                return f"var {node.name.lexeme};"

            return f"var {node.name.lexeme} = {self.to_source(node.initializer)};"

        if isinstance(node, LoxBinaryExpr):
            return f"({self.to_source(node.left)} {node.operator.lexeme} {self.to_source(node.right)})"

        if isinstance(node, LoxGroupingExpr):
            return f"({self.to_source(node.expression)})"

        if isinstance(node, LoxUnaryExpr):
            return f"({node.operator.lexeme}{self.to_source(node.right)})"

        if isinstance(node, LoxLiteralExpr):
            return self._literal_source(node.value)

        if isinstance(node, LoxVariableExpr):
            return node.name.lexeme

        if isinstance(node, LoxAssignExpr):
            return f"{node.name.lexeme} = {self.to_source(node.value)}"

        raise TypeError(f"Unknown node type: {type(node).__name__}")

    def _literal_source(self, value: LoxValue) -> str:
        """Render a literal so that the lexer reads back exactly the same value."""
        if isinstance(value, str):
            return f'"{value}"'

        if value is None or isinstance(value, bool):
            return stringify(value)

        # Number literals are plain digits, so avoid exponent notation
        return format(Decimal(value), 'f')

    def _parenthesize(self, name: str, nodes: List[LoxExpr]) -> str:
        parts = [name]
        for node in nodes:
            parts.append(self.print(node))

        return f"({' '.join(parts)})"
