"""JSON serialization/deserialization for bscript token lists.

A token list is the whole compiled form of a bscript program, so dumping
it is enough to re-run the program later without the source. Each token
becomes a plain dict suitable for `json.dump`.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from .errors import BScriptError, ErrorVal
from .tokens import Token, TOKEN_TYPES


def token_to_obj(token: Token) -> Dict[str, Any]:
    return {"type": token.type, "value": token.value, "line": token.line, "column": token.column}


def tokens_to_obj(tokens: Sequence[Token]) -> List[Dict[str, Any]]:
    return [token_to_obj(t) for t in tokens]


def format_error(message: str) -> BScriptError:
    return BScriptError(ErrorVal('TokenFormatError', message))


def token_from_obj(obj: Any) -> Token:
    if not isinstance(obj, dict):
        raise format_error(f"expected a token object, got {type(obj).__name__}")
    t = obj.get("type")
    if not isinstance(t, str) or t not in TOKEN_TYPES:
        raise format_error(f"unknown token type: {t!r}")
    value = obj.get("value")
    if not isinstance(value, str):
        raise format_error(f"token value must be a string, got {value!r}")
    position = []
    for key in ("line", "column"):
        n = obj.get(key, 0)
        if isinstance(n, bool) or not isinstance(n, int):
            raise format_error(f"token {key} must be an integer, got {n!r}")
        position.append(n)
    return Token(t, value, *position)


def tokens_from_obj(obj: Any) -> List[Token]:
    if not isinstance(obj, list):
        raise format_error("token file must contain a list")
    return [token_from_obj(o) for o in obj]
