import pytest

from lox.parser import parse_program, parse_expression
from lox.printer import describe, render
from lox.scanner import Scanner


def tokens_of(source):
    return Scanner(source).scan_tokens()


def test_render_canonical_forms():
    cases = {
        '1 + 2 * 3': '(+ 1 (* 2 3))',
        '(1)': '(group 1)',
        '-5': '(- 5)',
        '!true': '(! true)',
        '"a" + "b"': '(+ a b)',
        'x = 2.5': '(= x 2.5)',
        'nil == false': '(== nil false)',
    }
    for source, expected in cases.items():
        assert render(parse_expression(tokens_of(source))) == expected, source


def test_describe_statements():
    statements = parse_program(tokens_of('var a = 1; var b; print a; a; { print b; }'))
    assert [describe(s) for s in statements] == [
        '(var a 1)',
        '(var b)',
        '(print a)',
        '(; a)',
        '(block (print b))',
    ]


def test_unknown_node_is_rejected():
    with pytest.raises(TypeError):
        render(object())
    with pytest.raises(TypeError):
        describe(object())
