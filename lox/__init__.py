# Lox language package
# This package provides a scanner, parser and tree-walking interpreter for Lox.
from .scanner import Scanner, tokenize
from .parser import Parser, parse_expression, parse_program
from .printer import render
from .environment import Environment
from .interpreter import Interpreter, evaluate_expression, run_program
from .errors import LoxError, LexError, ParseError, ParseErrors, LoxRuntimeError

__all__ = [
    'Scanner',
    'tokenize',
    'Parser',
    'parse_expression',
    'parse_program',
    'render',
    'Environment',
    'Interpreter',
    'evaluate_expression',
    'run_program',
    'LoxError',
    'LexError',
    'ParseError',
    'ParseErrors',
    'LoxRuntimeError',
]
