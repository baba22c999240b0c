"""Canonical text forms of Lox AST nodes.

``render`` produces the fully parenthesized form of an expression used by
the ``parse`` command and by tests, e.g. ``(+ 1 (* 2 3))``. ``describe``
gives a one-line form of a statement for the interpreter debug trace.
"""

from __future__ import annotations

from .ast import (
    Literal, Grouping, Unary, Binary, Variable, Assign,
    Expression, Print, Var, Block, Expr, Stmt,
)
from .types import to_string


def parenthesize(name: str, *parts: str) -> str:
    return '(' + ' '.join((name,) + parts) + ')'


def render(expr: Expr) -> str:
    if isinstance(expr, Literal):
        return to_string(expr.value)
    if isinstance(expr, Grouping):
        return parenthesize('group', render(expr.expression))
    if isinstance(expr, Unary):
        return parenthesize(expr.operator.lexeme, render(expr.right))
    if isinstance(expr, Binary):
        return parenthesize(expr.operator.lexeme, render(expr.left), render(expr.right))
    if isinstance(expr, Variable):
        return expr.name.lexeme
    if isinstance(expr, Assign):
        return parenthesize('=', expr.name.lexeme, render(expr.value))
    raise TypeError(f"render: unexpected node type {type(expr)}")


def describe(stmt: Stmt) -> str:
    if isinstance(stmt, Expression):
        return parenthesize(';', render(stmt.expression))
    if isinstance(stmt, Print):
        return parenthesize('print', render(stmt.expression))
    if isinstance(stmt, Var):
        if stmt.initializer is None:
            return parenthesize('var', stmt.name.lexeme)
        return parenthesize('var', stmt.name.lexeme, render(stmt.initializer))
    if isinstance(stmt, Block):
        return parenthesize('block', *(describe(s) for s in stmt.statements))
    raise TypeError(f"describe: unexpected node type {type(stmt)}")
