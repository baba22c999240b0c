"""CLI entry point for the Lox interpreter.

Usage:
    python -m lox [-v|-vv|-vvv] [--debug-file PATH] tokenize <file>
    python -m lox [-v...] parse <file>
    python -m lox [-v...] evaluate <file>
    python -m lox [-v...] run <file>

Commands:
  tokenize      Print one token per line
  parse         Print the parenthesized form of a single expression
  evaluate      Print the value of a single expression
  run           Execute a program

Exit status is 0 on success, 65 on a lexical or syntax error, 70 on a
runtime error. Debug information is written to `debug.txt` (or the path
given with --debug-file) when verbosity is greater than zero.
"""

import argparse
import sys
from pathlib import Path

from .errors import ParseError, ParseErrors, LoxRuntimeError
from .interpreter import evaluate_expression, run_program
from .parser import NESTED_TOO_DEEPLY, parse_expression, parse_program
from .printer import render
from .scanner import tokenize
from .types import to_string

EX_OK = 0
EX_DATAERR = 65
EX_SOFTWARE = 70


def read_source(path: str) -> str:
    program_file = Path(path)
    if not program_file.exists():
        print(f"Error: file {program_file} not found", file=sys.stderr)
        sys.exit(1)
    with open(program_file, 'r', encoding='utf-8') as f:
        return f.read()


def cmd_tokenize(source: str, args: argparse.Namespace) -> int:
    tokens, had_error = tokenize(source)
    for token in tokens:
        print(token)
    return EX_DATAERR if had_error else EX_OK


def cmd_parse(source: str, args: argparse.Namespace) -> int:
    tokens, had_error = tokenize(source)
    if had_error:
        return EX_DATAERR
    try:
        expr = parse_expression(tokens)
    except ParseError as e:
        print(e, file=sys.stderr)
        return EX_DATAERR
    try:
        text = render(expr)
    except RecursionError:
        # long operator chains parse in a loop but render recursively
        print(f"Error: {NESTED_TOO_DEEPLY}", file=sys.stderr)
        return EX_DATAERR
    print(text)
    return EX_OK


def cmd_evaluate(source: str, args: argparse.Namespace) -> int:
    tokens, had_error = tokenize(source)
    if had_error:
        return EX_DATAERR
    try:
        expr = parse_expression(tokens)
    except ParseError as e:
        print(e, file=sys.stderr)
        return EX_DATAERR
    try:
        value = evaluate_expression(expr, debug_level=args.v, debug_file=args.debug_file)
    except LoxRuntimeError as e:
        print(e, file=sys.stderr)
        return EX_SOFTWARE
    print(to_string(value))
    return EX_OK


def cmd_run(source: str, args: argparse.Namespace) -> int:
    tokens, had_error = tokenize(source)
    if had_error:
        return EX_DATAERR
    try:
        statements = parse_program(tokens)
    except ParseErrors as e:
        for error in e.errors:
            print(error, file=sys.stderr)
        return EX_DATAERR
    try:
        run_program(statements, debug_level=args.v, debug_file=args.debug_file)
    except LoxRuntimeError as e:
        print(e, file=sys.stderr)
        return EX_SOFTWARE
    return EX_OK


COMMANDS = {
    'tokenize': cmd_tokenize,
    'parse': cmd_parse,
    'evaluate': cmd_evaluate,
    'run': cmd_run,
}


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='lox', description="Lox language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--debug-file', metavar='PATH', default=None,
                        help='where to write debug output (default: debug.txt)')
    parser.add_argument('command', choices=sorted(COMMANDS), help='what to do with the file')
    parser.add_argument('file', help='Lox source file')
    args = parser.parse_args(argv)

    source = read_source(args.file)
    sys.exit(COMMANDS[args.command](source, args))


if __name__ == '__main__':
    main()
