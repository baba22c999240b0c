"""Abstract Syntax Tree (AST) definitions for Lox.

The AST is made of two closed families of dataclasses: expressions and
statements. Every operation over the tree (rendering, evaluation,
execution) dispatches on the concrete node class and must handle every
member of the family; see :mod:`lox.printer` and :mod:`lox.interpreter`.
Nodes form an owned tree: each child belongs to exactly one parent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

from .tokens import Token
from .types import Value


@dataclass
class Node:
    """Base class for all AST nodes."""
    pass


# Expressions

@dataclass
class Literal(Node):
    value: Value


@dataclass
class Grouping(Node):
    expression: 'Expr'


@dataclass
class Unary(Node):
    operator: Token
    right: 'Expr'


@dataclass
class Binary(Node):
    left: 'Expr'
    operator: Token
    right: 'Expr'


@dataclass
class Variable(Node):
    name: Token


@dataclass
class Assign(Node):
    name: Token
    value: 'Expr'


Expr = Union[Literal, Grouping, Unary, Binary, Variable, Assign]


# Statements

@dataclass
class Expression(Node):
    expression: Expr


@dataclass
class Print(Node):
    expression: Expr


@dataclass
class Var(Node):
    name: Token
    initializer: Optional[Expr]


@dataclass
class Block(Node):
    statements: List['Stmt']


Stmt = Union[Expression, Print, Var, Block]
