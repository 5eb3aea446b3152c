from pathlib import Path

from bscript.interpreter import Interpreter
from bscript.lexer import tokenize

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_1_hello(capsys):
    with open(EXAMPLES / 'program_1.bs', 'r', encoding='utf-8') as f:
        source = f.read()
    tokens = tokenize(source)
    interp = Interpreter(tokens)
    interp.run()
    out = capsys.readouterr().out.strip().splitlines()
    assert out == ['Print call : Hello World!!']
