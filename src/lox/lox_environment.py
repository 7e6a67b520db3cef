"""Variable storage for a Lox run."""

from typing import Dict, List

from lox.lox_error import LoxRuntimeError
from lox.lox_token import LoxToken
from lox.lox_value import LoxValue


class LoxEnvironment:
    """
    Flat, mutable mapping from variable name to value.

    There is one environment per interpreter and no nested scopes: a name is
    unbound until a declaration defines it, and re-declaring a name replaces
    its value.
    """

    def __init__(self) -> None:
        self._values: Dict[str, LoxValue] = {}

    def define(self, name: str, value: LoxValue) -> None:
        """
        Bind a name to a value, replacing any existing binding.

        Args:
            name: Variable name
            value: Value to bind
        """
        self._values[name] = value

    def get(self, name: LoxToken) -> LoxValue:
        """
        Look up a variable.

        Args:
            name: Identifier token naming the variable

        Returns:
            The bound value

        Raises:
            LoxRuntimeError: If the variable has never been defined
        """
        if name.lexeme in self._values:
            return self._values[name.lexeme]

        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    def assign(self, name: LoxToken, value: LoxValue) -> None:
        """
        Update an existing variable.

        Assignment never creates a binding.

        Args:
            name: Identifier token naming the variable
            value: New value

        Raises:
            LoxRuntimeError: If the variable has never been defined
        """
        if name.lexeme not in self._values:
            raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

        self._values[name.lexeme] = value

    def is_defined(self, name: str) -> bool:
        """Check if a name is currently bound."""
        return name in self._values

    def get_available_bindings(self) -> List[str]:
        """Get the names of all bound variables."""
        return list(self._values.keys())

    def __repr__(self) -> str:
        return f"LoxEnvironment(bindings={sorted(self._values)})"
