from pathlib import Path

from bscript.interpreter import Interpreter
from bscript.lexer import tokenize

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_10_backward_goto(capsys):
    with open(EXAMPLES / 'program_10.bs', 'r', encoding='utf-8') as f:
        source = f.read()
    tokens = tokenize(source)
    interp = Interpreter(tokens)
    interp.run()
    out = capsys.readouterr().out.strip().splitlines()
    assert out == [
        'Print call : tick',
        'GOTO - went to line 4',
        'Print call : tick',
        'Print call : done',
    ]
    assert interp.variables.get('again') is False
