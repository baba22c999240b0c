from lox.scanner import tokenize
from lox.parser import parse_program
from lox.interpreter import Interpreter


def test_program_2_shadowing(capsys):
    with open('examples/program_2.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    tokens, _ = tokenize(source)
    interp = Interpreter()
    interp.run(parse_program(tokens))
    out_lines = capsys.readouterr().out.strip().split('\n')
    # the inner a is only visible inside the block
    assert out_lines == ['2', '1']
