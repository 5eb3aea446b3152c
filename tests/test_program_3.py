from pathlib import Path

from bscript.interpreter import Interpreter
from bscript.lexer import tokenize

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_3_copy_binding(capsys):
    with open(EXAMPLES / 'program_3.bs', 'r', encoding='utf-8') as f:
        source = f.read()
    tokens = tokenize(source)
    interp = Interpreter(tokens)
    interp.run()
    out = capsys.readouterr().out.strip().splitlines()
    assert out == ['Print call : first', 'Print call : second']
    assert interp.variables.get('x') == 'first'
    assert interp.variables.get('y') == 'second'
