"""Lox expression language: lexer, parser and tree-walking interpreter."""

# Main API
from lox.lox import Lox

# Exceptions (for error handling)
from lox.lox_error import LoxError, LoxLexError, LoxParseError, LoxRuntimeError

# Values
from lox.lox_value import LoxValue, is_truthy, stringify

# Syntax tree
from lox.lox_ast import (
    LoxExpr, LoxBinaryExpr, LoxGroupingExpr, LoxLiteralExpr, LoxUnaryExpr, LoxVariableExpr, LoxAssignExpr,
    LoxStmt, LoxExpressionStmt, LoxPrintStmt, LoxVarStmt
)

# Lower-level components (for advanced usage)
from lox.lox_token import LoxToken, LoxTokenType
from lox.lox_lexer import LoxLexer
from lox.lox_parser import LoxParser
from lox.lox_ast_printer import LoxASTPrinter
from lox.lox_environment import LoxEnvironment
from lox.lox_interpreter import LoxInterpreter
from lox.lox_config import LoxConfig


__all__ = [
    # Main API
    "Lox",

    # Exceptions
    "LoxError", "LoxLexError", "LoxParseError", "LoxRuntimeError",

    # Values
    "LoxValue", "is_truthy", "stringify",

    # Syntax tree
    "LoxExpr", "LoxBinaryExpr", "LoxGroupingExpr", "LoxLiteralExpr", "LoxUnaryExpr", "LoxVariableExpr",
    "LoxAssignExpr", "LoxStmt", "LoxExpressionStmt", "LoxPrintStmt", "LoxVarStmt",

    # Lower-level components
    "LoxToken", "LoxTokenType", "LoxLexer", "LoxParser", "LoxASTPrinter", "LoxEnvironment",
    "LoxInterpreter", "LoxConfig"
]
