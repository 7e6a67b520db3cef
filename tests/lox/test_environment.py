"""Tests for the Lox variable environment."""

import pytest

from lox import LoxEnvironment, LoxRuntimeError, LoxToken, LoxTokenType


def name_token(name: str, line: int = 1) -> LoxToken:
    """Build an identifier token."""
    return LoxToken(LoxTokenType.IDENTIFIER, name, None, line)


class TestLoxEnvironment:
    """Test define, get and assign."""

    def test_define_then_get(self):
        """Test that a defined name can be read back."""
        env = LoxEnvironment()
        env.define("x", 1.0)

        assert env.get(name_token("x")) == 1.0

    def test_define_nil(self):
        """Test that nil is a real binding distinct from being unbound."""
        env = LoxEnvironment()
        env.define("x", None)

        assert env.is_defined("x")
        assert env.get(name_token("x")) is None

    def test_define_overwrites(self):
        """Test that defining an existing name replaces its value."""
        env = LoxEnvironment()
        env.define("x", 1.0)
        env.define("x", "two")

        assert env.get(name_token("x")) == "two"

    def test_get_undefined(self):
        """Test that reading an unbound name raises with the token's line."""
        env = LoxEnvironment()

        with pytest.raises(LoxRuntimeError, match="Undefined variable 'missing'") as exc_info:
            env.get(name_token("missing", line=7))

        assert exc_info.value.line == 7

    def test_assign_existing(self):
        """Test that assignment updates an existing binding."""
        env = LoxEnvironment()
        env.define("x", 1.0)
        env.assign(name_token("x"), 2.0)

        assert env.get(name_token("x")) == 2.0

    def test_assign_undefined_does_not_bind(self):
        """Test that assigning an unbound name raises and creates nothing."""
        env = LoxEnvironment()

        with pytest.raises(LoxRuntimeError, match="Undefined variable 'x'"):
            env.assign(name_token("x"), 1.0)

        assert not env.is_defined("x")
        assert env.get_available_bindings() == []

    def test_available_bindings(self):
        """Test listing bound names."""
        env = LoxEnvironment()
        env.define("b", 1.0)
        env.define("a", 2.0)

        assert sorted(env.get_available_bindings()) == ["a", "b"]
        assert repr(env) == "LoxEnvironment(bindings=['a', 'b'])"
