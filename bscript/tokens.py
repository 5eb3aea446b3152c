"""Token definitions for bscript.

A program is executed straight from its token list, so the token kinds
below are the whole vocabulary of the language. Tokens are frozen: the
list produced by the lexer is never modified during a run.
"""

from __future__ import annotations

from dataclasses import dataclass

LET = 'LET'
IDENT = 'IDENT'
ASSIGN = 'ASSIGN'
STRING = 'STRING'
NUMBER = 'NUMBER'
BOOLEAN = 'BOOLEAN'
PRINT = 'PRINT'
LBRACE = 'LBRACE'
RBRACE = 'RBRACE'
LPAREN = 'LPAREN'
RPAREN = 'RPAREN'
IF = 'IF'
ELSE = 'ELSE'
GOTO = 'GOTO'

TOKEN_TYPES = frozenset({
    LET, IDENT, ASSIGN, STRING, NUMBER, BOOLEAN, PRINT,
    LBRACE, RBRACE, LPAREN, RPAREN, IF, ELSE, GOTO,
})

KEYWORDS = {
    'let': LET,
    'print': PRINT,
    'if': IF,
    'else': ELSE,
    'true': BOOLEAN,
    'false': BOOLEAN,
    'goto': GOTO,
}

PUNCTUATION = {
    '=': ASSIGN,
    '{': LBRACE,
    '}': RBRACE,
    '(': LPAREN,
    ')': RPAREN,
}

LITERALS = frozenset({STRING, NUMBER, BOOLEAN})


@dataclass(frozen=True)
class Token:
    type: str
    value: str
    line: int = 0
    column: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value!r}, {self.line}:{self.column})"
