"""Tree-walking interpreter for Lox statements and expressions."""

import logging
import math
import sys
from typing import List, TextIO, cast

from lox.lox_ast import (
    LoxAssignExpr, LoxBinaryExpr, LoxExpr, LoxExpressionStmt, LoxGroupingExpr, LoxLiteralExpr,
    LoxPrintStmt, LoxStmt, LoxUnaryExpr, LoxVarStmt, LoxVariableExpr
)
from lox.lox_environment import LoxEnvironment
from lox.lox_error import LoxRuntimeError
from lox.lox_token import LoxToken, LoxTokenType
from lox.lox_value import LoxValue, is_number, is_truthy, stringify, type_name


class LoxInterpreter:
    """Executes Lox statements against a single environment owned by the interpreter."""

    def __init__(self, output: TextIO | None = None):
        """
        Initialize interpreter.

        Args:
            output: Stream that `print` writes to.  Defaults to the current `sys.stdout`
                at the time each statement runs.
        """
        self.environment = LoxEnvironment()
        self._output = output
        self._logger = logging.getLogger("LoxInterpreter")

    def interpret(self, statements: List[LoxStmt]) -> None:
        """
        Execute statements in order.

        Execution stops at the first runtime error.  Side effects of statements
        that already ran are kept.

        Args:
            statements: Parsed statements

        Raises:
            LoxRuntimeError: If evaluating a statement fails
        """
        for statement in statements:
            self._logger.debug("executing %s", type(statement).__name__)
            self.execute(statement)

    def execute(self, stmt: LoxStmt) -> None:
        """Execute a single statement."""
        if isinstance(stmt, LoxPrintStmt):
            value = self.evaluate(stmt.expression)
            output = self._output if self._output is not None else sys.stdout
            output.write(stringify(value) + "\n")
            return

        if isinstance(stmt, LoxExpressionStmt):
            self.evaluate(stmt.expression)
            return

        if isinstance(stmt, LoxVarStmt):
            # A declaration without an initializer leaves the name unbound
            if stmt.initializer is None:
                return

            value = self.evaluate(stmt.initializer)
            self.environment.define(stmt.name.lexeme, value)
            return

        raise TypeError(f"Unknown statement type: {type(stmt).__name__}")

    def evaluate(self, expr: LoxExpr) -> LoxValue:
        """
        Evaluate an expression to a value.

        Args:
            expr: Expression to evaluate

        Returns:
            The resulting value

        Raises:
            LoxRuntimeError: On undefined variables or operands of the wrong type
        """
        if isinstance(expr, LoxLiteralExpr):
            return expr.value

        if isinstance(expr, LoxGroupingExpr):
            return self.evaluate(expr.expression)

        if isinstance(expr, LoxVariableExpr):
            return self.environment.get(expr.name)

        if isinstance(expr, LoxAssignExpr):
            value = self.evaluate(expr.value)
            self.environment.assign(expr.name, value)
            return value

        if isinstance(expr, LoxUnaryExpr):
            return self._evaluate_unary(expr)

        if isinstance(expr, LoxBinaryExpr):
            return self._evaluate_binary(expr)

        raise TypeError(f"Unknown expression type: {type(expr).__name__}")

    def _evaluate_unary(self, expr: LoxUnaryExpr) -> LoxValue:
        right = self.evaluate(expr.right)

        if expr.operator.type == LoxTokenType.MINUS:
            self._check_number_operand(expr.operator, right)
            return -right  # type: ignore[operator]

        if expr.operator.type == LoxTokenType.BANG:
            return not is_truthy(right)

        raise LoxRuntimeError(expr.operator, f"Unknown unary operator '{expr.operator.lexeme}'.")

    def _evaluate_binary(self, expr: LoxBinaryExpr) -> LoxValue:
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        operator = expr.operator
        op_type = operator.type

        if op_type == LoxTokenType.PLUS:
            if is_number(left) and is_number(right):
                return left + right  # type: ignore[operator]

            if isinstance(left, str) and isinstance(right, str):
                return left + right

            raise LoxRuntimeError(
                operator,
                f"Operands must be two numbers or two strings (got {type_name(left)} and {type_name(right)})."
            )

        # Every remaining operator, equality included, is defined for numbers only
        self._check_number_operands(operator, left, right)
        left_number = cast(float, left)
        right_number = cast(float, right)

        if op_type == LoxTokenType.MINUS:
            return left_number - right_number

        if op_type == LoxTokenType.STAR:
            return left_number * right_number

        if op_type == LoxTokenType.SLASH:
            return self._divide(left_number, right_number)

        if op_type == LoxTokenType.GREATER:
            return left_number > right_number

        if op_type == LoxTokenType.GREATER_EQUAL:
            return left_number >= right_number

        if op_type == LoxTokenType.LESS:
            return left_number < right_number

        if op_type == LoxTokenType.LESS_EQUAL:
            return left_number <= right_number

        if op_type == LoxTokenType.EQUAL_EQUAL:
            return left_number == right_number

        if op_type == LoxTokenType.BANG_EQUAL:
            return left_number != right_number

        raise LoxRuntimeError(operator, f"Unknown binary operator '{operator.lexeme}'.")

    def _divide(self, left: float, right: float) -> float:
        """Divide with IEEE-754 semantics for a zero divisor."""
        if right != 0.0:
            return left / right

        if left == 0.0 or math.isnan(left):
            return math.nan

        return math.copysign(math.inf, left) * math.copysign(1.0, right)

    def _check_number_operand(self, operator: LoxToken, operand: LoxValue) -> None:
        if is_number(operand):
            return

        raise LoxRuntimeError(operator, f"Operand must be a number (got {type_name(operand)}).")

    def _check_number_operands(self, operator: LoxToken, left: LoxValue, right: LoxValue) -> None:
        if is_number(left) and is_number(right):
            return

        raise LoxRuntimeError(
            operator,
            f"Operands must be numbers (got {type_name(left)} and {type_name(right)})."
        )
