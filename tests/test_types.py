import pytest

from bscript.environment import Environment
from bscript.errors import BScriptError
from bscript.types import (
    to_string, type_name, expect_number, expect_boolean,
    parse_number, parse_boolean, parse_index, truncate_index,
)


@pytest.mark.parametrize('value, text', [
    ('plain', 'plain'),
    ('', ''),
    (True, 'true'),
    (False, 'false'),
    (5.0, '5'),
    (0.0, '0'),
    (2.5, '2.5'),
    (float('inf'), 'inf'),
])
def test_to_string(value, text):
    assert to_string(value) == text


def test_type_names():
    assert [type_name(v) for v in ('s', 1.0, True)] == ['Text', 'Number', 'Boolean']
    with pytest.raises(TypeError):
        type_name(1)


def test_expect_rejects_other_kinds():
    assert expect_number(3.0, 'test') == 3.0
    assert expect_boolean(False, 'test') is False
    for value in ('1', True):
        with pytest.raises(BScriptError) as exc:
            expect_number(value, 'test')
        assert exc.value.name == 'TypeMismatchError'
    for value in ('true', 1.0):
        with pytest.raises(BScriptError) as exc:
            expect_boolean(value, 'test')
        assert exc.value.name == 'TypeMismatchError'


def test_literal_parsers():
    assert parse_number('0042') == 42.0
    assert parse_boolean('true') is True
    assert parse_boolean('false') is False
    assert parse_index('17') == 17
    for parser, text in ((parse_number, '1.5'), (parse_boolean, 'True'), (parse_index, '-1')):
        with pytest.raises(BScriptError) as exc:
            parser(text)
        assert exc.value.name == 'NumericParseError'


def test_truncate_index():
    assert truncate_index(7.0) == 7
    assert truncate_index(7.9) == 7
    with pytest.raises(BScriptError):
        truncate_index(float('inf'))


def test_environment_bindings():
    env = Environment()
    env.set('a', 'x')
    env.set('a', 2.0)
    assert 'a' in env
    assert env.get('a') == 2.0
    assert env.as_dict() == {'a': 2.0}
    with pytest.raises(BScriptError) as exc:
        env.get('b')
    assert exc.value.name == 'UndefinedVariableError'
    with pytest.raises(TypeError):
        env.set('c', [1])
