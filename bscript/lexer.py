"""Tokenizer for bscript.

The lexer makes a single left-to-right pass over the source and returns
the complete token list. Strings may be quoted with either `'` or `"` and
end at the next occurrence of the same quote; there are no escape
sequences. Alphabetic runs are either keywords or identifiers, digit runs
are number literals, and whitespace only separates tokens.
"""

from __future__ import annotations

from typing import List

from .errors import BScriptError, ErrorVal
from .tokens import Token, KEYWORDS, PUNCTUATION, IDENT, NUMBER, STRING


def lexical_error(message: str) -> BScriptError:
    return BScriptError(ErrorVal('LexicalError', message))


def tokenize(source: str) -> List[Token]:
    """Convert source text into a list of tokens.

    Raises a `BScriptError` named 'LexicalError' on the first character
    that cannot start a token, or when a string literal is never closed.
    """
    tokens: List[Token] = []
    i = 0
    line = 1
    col = 1
    length = len(source)

    def advance(n: int = 1):
        nonlocal i, col, line
        for _ in range(n):
            if i < length and source[i] == '\n':
                line += 1
                col = 1
            else:
                col += 1
            i += 1

    while i < length:
        c = source[i]
        if c.isspace():
            advance()
            continue
        # String literal, closed only by the same quote character
        if c == '\'' or c == '"':
            start_line, start_col = line, col
            advance()
            start_i = i
            while i < length and source[i] != c:
                advance()
            if i >= length:
                raise lexical_error(f"unterminated string literal at {start_line}:{start_col}")
            tokens.append(Token(STRING, source[start_i:i], start_line, start_col))
            advance()  # closing quote
            continue
        if c in PUNCTUATION:
            tokens.append(Token(PUNCTUATION[c], c, line, col))
            advance()
            continue
        # Keywords, boolean literals or identifiers
        if c.isalpha():
            start_col = col
            start_i = i
            while i < length and source[i].isalpha():
                advance()
            value = source[start_i:i]
            tokens.append(Token(KEYWORDS.get(value, IDENT), value, line, start_col))
            continue
        # Digits only: no sign and no fractional part
        if c.isdecimal():
            start_col = col
            start_i = i
            while i < length and source[i].isdecimal():
                advance()
            tokens.append(Token(NUMBER, source[start_i:i], line, start_col))
            continue
        raise lexical_error(f"unexpected character {c!r} at {line}:{col}")
    return tokens
