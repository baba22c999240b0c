"""Tree-walking interpreter for Lox.

The interpreter executes statements and evaluates expressions directly
on the AST produced by :mod:`lox.parser`. The active scope is passed
explicitly to :meth:`Interpreter.execute` and :meth:`Interpreter.evaluate`;
a block runs its statements against a fresh child scope, so when the
block finishes, normally or by raising, the caller is still holding the
scope it had before the block and every binding made inside is dropped.

Runtime errors are raised as :class:`~lox.errors.LoxRuntimeError` and are
never caught here: the first one aborts the rest of the program. Running
out of Python stack on a deeply nested expression is reported as one.
"""

from __future__ import annotations

import math
import sys
from typing import Any, List, Optional, TextIO

from .ast import (
    Literal, Grouping, Unary, Binary, Variable, Assign,
    Expression, Print, Var, Block, Expr, Stmt,
)
from .environment import Environment
from .errors import LoxRuntimeError
from .parser import NESTED_TOO_DEEPLY
from .printer import describe, render
from .tokens import Token, TokenType
from .types import is_truthy, to_string, values_equal


class Interpreter:
    def __init__(self, debug_level: int = 0, debug_file: Optional[str] = None,
                 out: Optional[TextIO] = None):
        self.globals = Environment()
        self.out = out
        self.debug_level = debug_level
        self.debug_fp = open(debug_file or 'debug.txt', 'w', encoding='utf-8') if debug_level > 0 else None

    def debug(self, msg: str):
        if self.debug_level > 0 and self.debug_fp:
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def run(self, statements: List[Stmt], env: Optional[Environment] = None):
        if env is None:
            env = self.globals
        self.debug(f"run {len(statements)} statement(s)")
        try:
            self.execute_block(statements, env)
            self.debug('run finished')
        except LoxRuntimeError as e:
            self.debug(f"run aborted: {e.message} [line {e.token.line}]")
            raise
        finally:
            self.close()

    def evaluate_expression(self, expr: Expr) -> Any:
        if self.debug_level >= 1:
            self.debug(f"evaluate {render(expr)}")
        try:
            return self.evaluate(expr, self.globals)
        finally:
            self.close()

    def execute_block(self, statements: List[Stmt], env: Environment):
        for stmt in statements:
            self.execute(stmt, env)

    def execute(self, node: Stmt, env: Environment):
        if self.debug_level >= 2:
            self.debug(f"execute {describe(node)}")
        if isinstance(node, Expression):
            self.evaluate(node.expression, env)
            return
        if isinstance(node, Print):
            value = self.evaluate(node.expression, env)
            print(to_string(value), file=self.out or sys.stdout)
            return
        if isinstance(node, Var):
            value = self.evaluate(node.initializer, env) if node.initializer is not None else None
            env.define(node.name.lexeme, value)
            if self.debug_level >= 2:
                self.debug(f"define {node.name.lexeme} = {to_string(value)}")
            return
        if isinstance(node, Block):
            block_env = env.child()
            if self.debug_level >= 3:
                self.debug(f"enter block at depth {block_env.depth}")
            self.execute_block(node.statements, block_env)
            if self.debug_level >= 3:
                self.debug(f"leave block at depth {block_env.depth}")
            return
        raise TypeError(f"execute: unexpected node type {type(node)}")

    def evaluate(self, node: Expr, env: Environment) -> Any:
        if isinstance(node, Literal):
            return node.value
        if isinstance(node, Grouping):
            return self.evaluate(node.expression, env)
        if isinstance(node, Variable):
            return env.get(node.name)
        if isinstance(node, Assign):
            value = self.evaluate_operand(node.value, env, node.name)
            env.assign(node.name, value)
            if self.debug_level >= 3:
                self.debug(f"assign {node.name.lexeme} = {to_string(value)}")
            return value
        if isinstance(node, Unary):
            right = self.evaluate_operand(node.right, env, node.operator)
            return self.apply_unary_op(node.operator, right)
        if isinstance(node, Binary):
            left = self.evaluate_operand(node.left, env, node.operator)
            right = self.evaluate_operand(node.right, env, node.operator)
            return self.apply_binary_op(node.operator, left, right)
        raise TypeError(f"evaluate: unexpected node type {type(node)}")

    def evaluate_operand(self, node: Expr, env: Environment, token: Token) -> Any:
        try:
            return self.evaluate(node, env)
        except RecursionError:
            # long operator chains like 1 + 1 + ... recurse once per operator
            raise LoxRuntimeError(token, NESTED_TOO_DEEPLY) from None

    def apply_unary_op(self, op: Token, right: Any) -> Any:
        if op.type == TokenType.BANG:
            return not is_truthy(right)
        if op.type == TokenType.MINUS:
            check_number_operand(op, right)
            return -right
        raise TypeError(f"unknown unary operator {op.lexeme}")

    def apply_binary_op(self, op: Token, a: Any, b: Any) -> Any:
        kind = op.type
        if kind == TokenType.EQUAL_EQUAL:
            return values_equal(a, b)
        if kind == TokenType.BANG_EQUAL:
            return not values_equal(a, b)
        if kind == TokenType.PLUS:
            if is_number(a) and is_number(b):
                return a + b
            if isinstance(a, str) and isinstance(b, str):
                return a + b
            raise LoxRuntimeError(op, 'Operands must be numbers or strings.')
        check_number_operands(op, a, b)
        if kind == TokenType.MINUS:
            return a - b
        if kind == TokenType.STAR:
            return a * b
        if kind == TokenType.SLASH:
            return divide(a, b)
        if kind == TokenType.GREATER:
            return a > b
        if kind == TokenType.GREATER_EQUAL:
            return a >= b
        if kind == TokenType.LESS:
            return a < b
        if kind == TokenType.LESS_EQUAL:
            return a <= b
        raise TypeError(f"unknown binary operator {op.lexeme}")


def is_number(value: Any) -> bool:
    # bool is not a Lox number even though Python treats it as one
    return isinstance(value, float)


def check_number_operand(op: Token, operand: Any):
    if not is_number(operand):
        raise LoxRuntimeError(op, 'Operand must be a number.')


def check_number_operands(op: Token, a: Any, b: Any):
    if not (is_number(a) and is_number(b)):
        raise LoxRuntimeError(op, 'Operands must be numbers.')


def divide(a: float, b: float) -> float:
    """IEEE 754 division; Python raises on a zero divisor, Lox does not."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        # the sign of a zero divisor counts: 1 / -0 is -inf
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def evaluate_expression(expr: Expr, debug_level: int = 0, debug_file: Optional[str] = None) -> Any:
    """Evaluate a single expression against a fresh global scope."""
    interpreter = Interpreter(debug_level=debug_level, debug_file=debug_file)
    return interpreter.evaluate_expression(expr)


def run_program(statements: List[Stmt], debug_level: int = 0, debug_file: Optional[str] = None):
    """Execute a parsed program; the first runtime error propagates."""
    interpreter = Interpreter(debug_level=debug_level, debug_file=debug_file)
    interpreter.run(statements)
