"""Execution engine for bscript.

Programs are executed straight from the token list produced by
`bscript.lexer.tokenize`; no syntax tree is built. The interpreter keeps
an instruction pointer (`index`) into the token list and dispatches one
statement per step on the token found there:

    let NAME = VALUE      bind a literal or a copy of another variable
    print VALUE           write "Print call : <value>"
    goto TARGET           set the pointer to a raw token index
    if COND { ... }       enter the block, or skip to the first `}`
    else { ... }          skip the block (reached after a taken `if`)
    }                     no-op

Block ends are found with a plain forward scan for the next `}` token,
so blocks do not nest. Jump targets are token indices, not source lines.

Every malformed construct raises `BScriptError`; the run stops at the
point of failure and nothing is reported from here. Reporting and exit
codes belong to the caller (see `bscript.__main__`).
"""

from __future__ import annotations

import pathlib
from typing import Optional, Sequence

from .environment import Environment
from .errors import BScriptError, ErrorVal
from .lexer import tokenize
from .tokens import (
    Token, LITERALS,
    LET, IDENT, ASSIGN, STRING, NUMBER, BOOLEAN, PRINT,
    LBRACE, RBRACE, LPAREN, IF, ELSE, GOTO,
)
from .types import (
    Value, to_string, type_name,
    expect_number, expect_boolean,
    parse_number, parse_boolean, parse_index, truncate_index,
)


class Interpreter:
    """Runs a token list with an explicit instruction pointer."""
    def __init__(self, tokens: Sequence[Token], debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.tokens = tuple(tokens)
        self.variables = Environment()
        self.index = 0
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 else None

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def error(self, name: str, message: str, index: Optional[int] = None) -> BScriptError:
        if index is None:
            index = self.index
        return BScriptError(ErrorVal(name, f"{message} (token {index})"))

    # Public API
    def run(self) -> Environment:
        """Execute until the pointer reaches the end of the token list."""
        if self.debug_level >= 1:
            self.debug(f"run: {len(self.tokens)} tokens")
        try:
            while self.index != len(self.tokens):
                self.step()
            if self.debug_level >= 1:
                self.debug(f"finished: {len(self.variables)} variables")
            return self.variables
        finally:
            if self.debug_fp:
                self.debug_fp.close()
                self.debug_fp = None

    def step(self):
        """Execute the statement starting at the current pointer."""
        if not 0 <= self.index < len(self.tokens):
            raise self.error('JumpError', f"instruction pointer {self.index} outside of program "
                                          f"of {len(self.tokens)} tokens")
        token = self.tokens[self.index]
        if self.debug_level >= 3:
            self.debug(f"[{self.index}] {token.type} {token.value!r}")
        if token.type == LET:
            self.exec_let()
        elif token.type == PRINT:
            self.exec_print()
        elif token.type == GOTO:
            self.exec_goto()
        elif token.type == IF:
            self.exec_if()
        elif token.type == ELSE:
            self.exec_else()
        elif token.type == RBRACE:
            self.index += 1
        else:
            raise self.error('SyntaxError', f"invalid token {token.type} {token.value!r}")

    # Statement handlers
    def exec_let(self):
        name_tok = self.peek(1, 'let')
        if name_tok.type != IDENT:
            raise self.error('SyntaxError', 'invalid token after let - must be an alphabetic identifier',
                             self.index + 1)
        assign_tok = self.peek(2, 'let')
        if assign_tok.type != ASSIGN:
            raise self.error('SyntaxError', f'invalid token after variable {name_tok.value} - must be =',
                             self.index + 2)
        source_tok = self.peek(3, 'let')
        if source_tok.type == STRING:
            value: Value = source_tok.value
        elif source_tok.type == NUMBER:
            value = parse_number(source_tok.value)
        elif source_tok.type == BOOLEAN:
            value = parse_boolean(source_tok.value)
        elif source_tok.type == IDENT:
            # str, float and bool are immutable, so this is a copy
            value = self.lookup(source_tok.value)
        else:
            raise self.error('SyntaxError', f'invalid value {source_tok.type} {source_tok.value!r} in let',
                             self.index + 3)
        self.variables.set(name_tok.value, value)
        if self.debug_level >= 2:
            self.debug(f"let {name_tok.value}: {type_name(value)} = {to_string(value)}")
        self.index += 4

    def exec_print(self):
        arg = self.peek(1, 'print')
        if arg.type == IDENT:
            text = to_string(self.lookup(arg.value))
        elif arg.type in LITERALS:
            text = arg.value
        else:
            raise self.error('SyntaxError', 'invalid token after print - must be a literal or variable',
                             self.index + 1)
        print(f"Print call : {text}")
        self.index += 2

    def exec_goto(self):
        target = self.peek(1, 'goto')
        if target.type == IDENT:
            number = expect_number(self.lookup(target.value), 'goto statement')
            self.jump(truncate_index(number))
        elif target.type == NUMBER:
            self.jump(parse_index(target.value))
            print(f"GOTO - went to line {self.index}")
        else:
            raise self.error('SyntaxError', 'invalid token after goto - must be a numeric variable or literal',
                             self.index + 1)

    def exec_if(self):
        cond = self.peek(1, 'if')
        if cond.type == IDENT:
            value = expect_boolean(self.lookup(cond.value), 'if statement')
        elif cond.type == BOOLEAN:
            value = parse_boolean(cond.value)
        elif cond.type == LPAREN:
            raise self.error('UnsupportedError', 'parenthesized conditions are not supported', self.index + 1)
        else:
            raise self.error('SyntaxError', f'invalid condition {cond.type} {cond.value!r} in if statement',
                             self.index + 1)
        if self.debug_level >= 3:
            self.debug(f"if {cond.value} -> {to_string(value)}")
        if value:
            # Step over `if COND {` into the block body
            self.index += 3
            return
        close = self.find_index_of_token(self.index + 1, RBRACE)
        if close is None:
            raise self.error('UnterminatedBlockError', 'unclosed conditional statement')
        self.index = close + 1
        if self.index < len(self.tokens) and self.tokens[self.index].type == ELSE:
            # Step over `else {` into the else body
            self.index += 2

    def exec_else(self):
        # Only reached by falling out of a taken if block: skip the else body
        brace = self.peek(1, 'else')
        if brace.type != LBRACE:
            raise self.error('SyntaxError', 'else statement with no scoping - expected {', self.index + 1)
        close = self.find_index_of_token(self.index + 1, RBRACE)
        if close is None:
            raise self.error('UnterminatedBlockError', 'unfinished else block')
        self.index = close + 1

    # Helpers
    def peek(self, offset: int, statement: str) -> Token:
        pos = self.index + offset
        if pos >= len(self.tokens):
            raise self.error('SyntaxError', f'unexpected end of input in {statement} statement', pos)
        return self.tokens[pos]

    def lookup(self, name: str) -> Value:
        try:
            return self.variables.get(name)
        except BScriptError as e:
            raise self.error(e.err.name, e.err.message) from None

    def jump(self, target: int):
        if self.debug_level >= 2:
            self.debug(f"goto {self.index} -> {target}")
        self.index = target

    def find_index_of_token(self, start: int, token_type: str) -> Optional[int]:
        for i in range(start, len(self.tokens)):
            if self.tokens[i].type == token_type:
                return i
        return None


def run_program(source: str, debug_level: int = 0) -> Interpreter:
    """Tokenize and run a bscript program, returning the finished interpreter."""
    tokens = tokenize(source)
    interpreter = Interpreter(tokens, debug_level=debug_level)
    interpreter.run()
    return interpreter


def run_file(file_path: str, debug_level: int = 0) -> Interpreter:
    """Run a bscript source file (UTF-8)."""
    source = pathlib.Path(file_path).read_text(encoding='utf-8')
    return run_program(source, debug_level=debug_level)
