"""Runtime values for bscript.

A bscript value is exactly one of three kinds, held as the matching
Python object:

    Text     -> str
    Number   -> float
    Boolean  -> bool

The helpers here name a value's kind, render it for `print`, and parse
literal token text. Accessors such as `expect_number` reject a value of
the wrong kind with a 'TypeMismatchError' instead of converting it.
"""

from __future__ import annotations

import math
from typing import Any, Union

from .errors import BScriptError, ErrorVal

Value = Union[str, float, bool]

# Largest jump target accepted from a number literal (unsigned 64 bit).
MAX_INDEX = 2 ** 64 - 1


def type_name(value: Any) -> str:
    """Return the bscript kind name of a runtime value."""
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return 'Boolean'
    if isinstance(value, float):
        return 'Number'
    if isinstance(value, str):
        return 'Text'
    raise TypeError(f"not a bscript value: {type(value).__name__}")


def check_value(value: Any) -> bool:
    """Return True if `value` is one of the three bscript kinds.

    Raises TypeError (not a bscript error) otherwise; a foreign value can
    only come from host code, never from a running program.
    """
    type_name(value)
    return True


def format_number(value: float) -> str:
    if math.isinf(value):
        return 'inf' if value > 0 else '-inf'
    if value.is_integer():
        return str(int(value))
    return repr(value)


def to_string(value: Value) -> str:
    """Render a value the way `print` shows it."""
    kind = type_name(value)
    if kind == 'Boolean':
        return 'true' if value else 'false'
    if kind == 'Number':
        return format_number(value)
    return value


def type_mismatch(message: str) -> BScriptError:
    return BScriptError(ErrorVal('TypeMismatchError', message))


def expect_number(value: Value, context: str) -> float:
    kind = type_name(value)
    if kind != 'Number':
        raise type_mismatch(f"{kind} value in {context} - must be Number")
    return value


def expect_boolean(value: Value, context: str) -> bool:
    kind = type_name(value)
    if kind != 'Boolean':
        raise type_mismatch(f"{kind} value in {context} - must be Boolean")
    return value


def parse_error(message: str) -> BScriptError:
    return BScriptError(ErrorVal('NumericParseError', message))


def parse_number(text: str) -> float:
    """Parse number literal text as a float."""
    if not text.isdecimal():
        raise parse_error(f"failed to parse numeric literal {text!r}")
    try:
        return float(text)
    except ValueError:
        raise parse_error(f"failed to parse numeric literal {text!r}")


def parse_boolean(text: str) -> bool:
    if text == 'true':
        return True
    if text == 'false':
        return False
    raise parse_error(f"failed to parse boolean literal {text!r}")


def parse_index(text: str) -> int:
    """Parse number literal text as an unsigned token index."""
    if not text.isdecimal():
        raise parse_error(f"failed to parse jump target {text!r}")
    digits = text.lstrip("0") or "0"
    # int() rejects digit strings past the interpreter limit
    if len(digits) > len(str(MAX_INDEX)) or int(digits) > MAX_INDEX:
        raise parse_error(f"jump target {text} is too large")
    return int(digits)


def truncate_index(value: float) -> int:
    """Truncate a Number toward zero for use as a jump target."""
    if not math.isfinite(value):
        raise type_mismatch(f"non-finite number {format_number(value)} used as jump target")
    return math.trunc(value)
