from pathlib import Path

from bscript.interpreter import Interpreter
from bscript.lexer import tokenize

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_2_literals(capsys):
    with open(EXAMPLES / 'program_2.bs', 'r', encoding='utf-8') as f:
        source = f.read()
    tokens = tokenize(source)
    interp = Interpreter(tokens)
    interp.run()
    out = capsys.readouterr().out.strip().splitlines()
    assert out == [
        'Print call : hi there',
        'Print call : 42',
        'Print call : true',
        'Print call : false',
        'Print call : 007',
    ]
    assert interp.variables.as_dict() == {'greeting': 'hi there', 'count': 42.0, 'flag': True}
