"""Lox runtime values.

Lox values are represented directly by Python objects: `None` for nil, `bool`,
`float` for every number, and `str`.  The same representation is used for
literal tokens, literal expression nodes and evaluation results.
"""

import math
from decimal import Decimal
from typing import Union


LoxValue = Union[str, float, bool, None]


def is_number(value: LoxValue) -> bool:
    """Check if a value is a Lox number (booleans are not numbers)."""
    return isinstance(value, float) and not isinstance(value, bool)


def is_truthy(value: LoxValue) -> bool:
    """
    Apply the Lox truthiness rule.

    Only nil and false are falsy; every other value, including 0 and the empty
    string, is truthy.
    """
    if value is None:
        return False

    if isinstance(value, bool):
        return value

    return True


def type_name(value: LoxValue) -> str:
    """Return the Lox type name for error messages and debug logging."""
    if value is None:
        return "nil"

    if isinstance(value, bool):
        return "boolean"

    if isinstance(value, str):
        return "string"

    return "number"


def stringify(value: LoxValue) -> str:
    """
    Convert a value to the text written by `print`.

    Numbers are written in positional decimal notation using the shortest digits
    that round-trip, and drop a trailing `.0`, so 3.0 is shown as `3`, 3.5 as
    `3.5` and 1e21 as `1000000000000000000000`.
    """
    if value is None:
        return "nil"

    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, str):
        return value

    if math.isnan(value):
        return "NaN"

    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    text = format(Decimal(repr(value)), 'f')
    if text.endswith(".0"):
        return text[:-2]

    return text
