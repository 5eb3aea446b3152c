# bscript language package
# Tokenizer and token-stream interpreter for the bscript language.
from .errors import BScriptError, ErrorVal
from .interpreter import run_program, run_file, Interpreter
from .lexer import tokenize
from .tokens import Token

__all__ = [
    'run_program',
    'run_file',
    'Interpreter',
    'tokenize',
    'Token',
    'BScriptError',
    'ErrorVal',
]
