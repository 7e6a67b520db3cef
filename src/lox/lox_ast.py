"""Lox syntax tree node types.

Expressions and statements are two closed sets of immutable dataclasses.  Nodes
carry no behaviour of their own: each consumer (the interpreter, the AST
printer) dispatches over the node classes itself.
"""

from dataclasses import dataclass
from typing import Union

from lox.lox_token import LoxToken
from lox.lox_value import LoxValue


@dataclass(frozen=True)
class LoxBinaryExpr:
    """Binary operator applied to two operands."""
    left: 'LoxExpr'
    operator: LoxToken
    right: 'LoxExpr'


@dataclass(frozen=True)
class LoxGroupingExpr:
    """Parenthesized expression."""
    expression: 'LoxExpr'


@dataclass(frozen=True)
class LoxLiteralExpr:
    """Literal number, string, boolean or nil."""
    value: LoxValue


@dataclass(frozen=True)
class LoxUnaryExpr:
    """Prefix operator applied to one operand."""
    operator: LoxToken
    right: 'LoxExpr'


@dataclass(frozen=True)
class LoxVariableExpr:
    """Read of a named variable."""
    name: LoxToken


@dataclass(frozen=True)
class LoxAssignExpr:
    """Assignment of a value to an existing variable."""
    name: LoxToken
    value: 'LoxExpr'


LoxExpr = Union[
    LoxBinaryExpr, LoxGroupingExpr, LoxLiteralExpr, LoxUnaryExpr, LoxVariableExpr, LoxAssignExpr
]


@dataclass(frozen=True)
class LoxExpressionStmt:
    """Expression evaluated for its side effects."""
    expression: LoxExpr


@dataclass(frozen=True)
class LoxPrintStmt:
    """Print the stringified value of an expression."""
    expression: LoxExpr


@dataclass(frozen=True)
class LoxVarStmt:
    """Variable declaration with an optional initializer."""
    name: LoxToken
    initializer: LoxExpr | None = None


LoxStmt = Union[LoxExpressionStmt, LoxPrintStmt, LoxVarStmt]
