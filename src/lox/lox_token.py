"""Token types and token representation for Lox source text."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from lox.lox_value import LoxValue


class LoxTokenType(Enum):
    """Token types for Lox source text."""
    # Single-character tokens
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    COMMA = ","
    DOT = "."
    MINUS = "-"
    PLUS = "+"
    SEMICOLON = ";"
    SLASH = "/"
    STAR = "*"

    # One or two character tokens
    BANG = "!"
    BANG_EQUAL = "!="
    EQUAL = "="
    EQUAL_EQUAL = "=="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    # Literals
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"

    # Keywords
    AND = "and"
    CLASS = "class"
    ELSE = "else"
    FALSE = "false"
    FUN = "fun"
    FOR = "for"
    IF = "if"
    NIL = "nil"
    OR = "or"
    PRINT = "print"
    RETURN = "return"
    SUPER = "super"
    THIS = "this"
    TRUE = "true"
    VAR = "var"
    WHILE = "while"

    EOF = "EOF"


KEYWORDS: Dict[str, LoxTokenType] = {
    token_type.value: token_type for token_type in (
        LoxTokenType.AND,
        LoxTokenType.CLASS,
        LoxTokenType.ELSE,
        LoxTokenType.FALSE,
        LoxTokenType.FUN,
        LoxTokenType.FOR,
        LoxTokenType.IF,
        LoxTokenType.NIL,
        LoxTokenType.OR,
        LoxTokenType.PRINT,
        LoxTokenType.RETURN,
        LoxTokenType.SUPER,
        LoxTokenType.THIS,
        LoxTokenType.TRUE,
        LoxTokenType.VAR,
        LoxTokenType.WHILE,
    )
}


@dataclass(frozen=True)
class LoxToken:
    """Represents a single token in Lox source text."""
    type: LoxTokenType
    lexeme: str
    literal: LoxValue
    line: int

    def __str__(self) -> str:
        return self.lexeme

    def __repr__(self) -> str:
        return f"LoxToken({self.type.name}, {self.lexeme!r}, {self.literal!r}, line={self.line})"
