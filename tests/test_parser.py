import pytest

from sexp2c.errors import ParseError
from sexp2c.lexer import tokenize, PAREN
from sexp2c.parser import parse
from sexp2c.source_ast import Program, CallExpression, NumberLiteral, StringLiteral


def test_nested_call():
    assert parse(tokenize("(add 2 (subtract 4 2))")) == Program([
        CallExpression('add', [
            NumberLiteral('2'),
            CallExpression('subtract', [NumberLiteral('4'), NumberLiteral('2')]),
        ]),
    ])


def test_zero_argument_call():
    assert parse(tokenize("(foo)")) == Program([CallExpression('foo', [])])


def test_string_argument():
    assert parse(tokenize('(foo "bar")')) == Program([
        CallExpression('foo', [StringLiteral('bar')]),
    ])


def test_multiple_top_level_forms_in_order():
    program = parse(tokenize('(a 1)(b 2) 3 "x"'))
    assert program.body == [
        CallExpression('a', [NumberLiteral('1')]),
        CallExpression('b', [NumberLiteral('2')]),
        NumberLiteral('3'),
        StringLiteral('x'),
    ]


def test_deep_nesting():
    depth = 50
    program = parse(tokenize("(f " * depth + "1" + ")" * depth))
    node = program.body[0]
    for _ in range(depth - 1):
        assert node.name == 'f'
        node = node.params[0]
    assert node.params == [NumberLiteral('1')]


def test_empty_token_list():
    assert parse([]) == Program([])


def test_missing_closing_paren():
    with pytest.raises(ParseError) as excinfo:
        parse(tokenize("(add 2"))
    assert excinfo.value.token is None


def test_open_paren_at_end():
    with pytest.raises(ParseError):
        parse(tokenize("("))


def test_stray_closing_paren():
    with pytest.raises(ParseError) as excinfo:
        parse(tokenize("(a 1))"))
    assert excinfo.value.token.type == PAREN
    assert excinfo.value.token.value == ')'


def test_bare_name_is_not_a_form():
    with pytest.raises(ParseError, match="NAME"):
        parse(tokenize("(add x)"))


def test_call_name_must_be_a_name():
    with pytest.raises(ParseError, match="call name"):
        parse(tokenize("(1 2)"))
    with pytest.raises(ParseError, match="call name"):
        parse(tokenize('("add" 2)'))
    with pytest.raises(ParseError, match="call name"):
        parse(tokenize("(())"))
