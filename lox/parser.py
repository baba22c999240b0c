"""Recursive-descent parser for Lox.

The grammar, from lowest to highest precedence::

    program     -> declaration* EOF
    declaration -> "var" varDecl | statement
    varDecl     -> IDENTIFIER ( "=" expression )? ";"
    statement   -> "print" expression ";" | "{" declaration* "}" | expression ";"
    expression  -> assignment
    assignment  -> equality ( "=" assignment )?
    equality    -> comparison ( ( "!=" | "==" ) comparison )*
    comparison  -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term        -> factor ( ( "-" | "+" ) factor )*
    factor      -> unary ( ( "/" | "*" ) unary )*
    unary       -> ( "!" | "-" ) unary | primary
    primary     -> "false" | "true" | "nil" | NUMBER | STRING
                 | IDENTIFIER | "(" expression ")"

Binary levels are left-associative; assignment is right-associative.

When a declaration fails to parse, the error is recorded and the parser
skips ahead to the next statement boundary, so one pass over a program
reports every independent syntax error.
"""

from __future__ import annotations

from typing import List, Optional

from .ast import (
    Literal, Grouping, Unary, Binary, Variable, Assign,
    Expression, Print, Var, Block, Expr, Stmt,
)
from .errors import (
    ParseError, ParseErrors, UnexpectedTokenError, UnclosedDelimiterError,
    MissingSemicolonError, InvalidAssignmentTargetError,
)
from .tokens import Token, TokenType
from .types import NIL


NESTED_TOO_DEEPLY = "Expression nested too deeply."

# Tokens that start a new statement; recovery stops in front of them.
STATEMENT_KEYWORDS = frozenset({
    TokenType.CLASS,
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
})


class Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.current = 0
        self.errors: List[ParseError] = []

    # Entry points

    def parse(self) -> List[Stmt]:
        """Parse a whole program, collecting errors in :attr:`errors`."""
        statements: List[Stmt] = []
        while not self.is_at_end():
            stmt = self.declaration()
            if stmt is not None:
                statements.append(stmt)
        return statements

    def parse_expression(self) -> Expr:
        try:
            return self.expression()
        except RecursionError:
            raise ParseError(self.peek(), NESTED_TOO_DEEPLY) from None

    # Statements

    def declaration(self) -> Optional[Stmt]:
        try:
            if self.match(TokenType.VAR):
                return self.var_declaration()
            return self.statement()
        except ParseError as e:
            self.errors.append(e)
            self.synchronize()
            return None
        except RecursionError:
            self.errors.append(ParseError(self.peek(), NESTED_TOO_DEEPLY))
            self.synchronize()
            return None

    def var_declaration(self) -> Stmt:
        if not self.check(TokenType.IDENTIFIER):
            raise UnexpectedTokenError(self.peek(), 'Expect variable name.')
        name = self.advance()
        initializer: Optional[Expr] = None
        if self.match(TokenType.EQUAL):
            initializer = self.expression()
        self.consume_semicolon('variable declaration')
        return Var(name, initializer)

    def statement(self) -> Stmt:
        if self.match(TokenType.PRINT):
            return self.print_statement()
        if self.match(TokenType.LEFT_BRACE):
            return Block(self.block())
        return self.expression_statement()

    def print_statement(self) -> Stmt:
        value = self.expression()
        self.consume_semicolon('value')
        return Print(value)

    def expression_statement(self) -> Stmt:
        expr = self.expression()
        self.consume_semicolon('expression')
        return Expression(expr)

    def block(self) -> List[Stmt]:
        statements: List[Stmt] = []
        while not self.check(TokenType.RIGHT_BRACE) and not self.is_at_end():
            # a nested error is recorded and recovered from inside the block
            stmt = self.declaration()
            if stmt is not None:
                statements.append(stmt)
        self.consume(TokenType.RIGHT_BRACE, "Expect '}' after block.")
        return statements

    # Expressions

    def expression(self) -> Expr:
        return self.assignment()

    def assignment(self) -> Expr:
        expr = self.equality()
        if self.match(TokenType.EQUAL):
            equals = self.previous()
            value = self.assignment()
            if isinstance(expr, Variable):
                return Assign(expr.name, value)
            raise InvalidAssignmentTargetError(equals, 'Invalid assignment target.')
        return expr

    def equality(self) -> Expr:
        expr = self.comparison()
        while self.match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL):
            operator = self.previous()
            right = self.comparison()
            expr = Binary(expr, operator, right)
        return expr

    def comparison(self) -> Expr:
        expr = self.term()
        while self.match(TokenType.GREATER, TokenType.GREATER_EQUAL,
                         TokenType.LESS, TokenType.LESS_EQUAL):
            operator = self.previous()
            right = self.term()
            expr = Binary(expr, operator, right)
        return expr

    def term(self) -> Expr:
        expr = self.factor()
        while self.match(TokenType.MINUS, TokenType.PLUS):
            operator = self.previous()
            right = self.factor()
            expr = Binary(expr, operator, right)
        return expr

    def factor(self) -> Expr:
        expr = self.unary()
        while self.match(TokenType.SLASH, TokenType.STAR):
            operator = self.previous()
            right = self.unary()
            expr = Binary(expr, operator, right)
        return expr

    def unary(self) -> Expr:
        if self.match(TokenType.BANG, TokenType.MINUS):
            operator = self.previous()
            right = self.unary()
            return Unary(operator, right)
        return self.primary()

    def primary(self) -> Expr:
        if self.match(TokenType.FALSE):
            return Literal(False)
        if self.match(TokenType.TRUE):
            return Literal(True)
        if self.match(TokenType.NIL):
            return Literal(NIL)
        if self.match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self.previous().literal)
        if self.match(TokenType.IDENTIFIER):
            return Variable(self.previous())
        if self.match(TokenType.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)
        raise UnexpectedTokenError(self.peek(), 'Expect expression.')

    # Token helpers

    def consume(self, token_type: TokenType, message: str) -> Token:
        if self.check(token_type):
            return self.advance()
        raise UnclosedDelimiterError(self.peek(), message)

    def consume_semicolon(self, after: str) -> Token:
        if self.check(TokenType.SEMICOLON):
            return self.advance()
        raise MissingSemicolonError(self.previous(), f"Expect ';' after {after}.")

    def match(self, *types: TokenType) -> bool:
        for token_type in types:
            if self.check(token_type):
                self.advance()
                return True
        return False

    def check(self, token_type: TokenType) -> bool:
        if self.is_at_end():
            return False
        return self.peek().type == token_type

    def advance(self) -> Token:
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def is_at_end(self) -> bool:
        return self.peek().type == TokenType.EOF

    def peek(self) -> Token:
        return self.tokens[self.current]

    def previous(self) -> Token:
        return self.tokens[self.current - 1]

    def synchronize(self):
        """Discard tokens up to the next statement boundary."""
        # the offending token is always dropped so recovery makes progress
        self.advance()
        while not self.is_at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.peek().type in STATEMENT_KEYWORDS:
                return
            self.advance()


def parse_expression(tokens: List[Token]) -> Expr:
    """Parse a single expression; raises the first :class:`ParseError`."""
    return Parser(tokens).parse_expression()


def parse_program(tokens: List[Token]) -> List[Stmt]:
    """Parse a program into a list of statements.

    Parsing recovers after each syntax error and keeps going. If any error
    was found, :class:`ParseErrors` carrying all of them is raised instead
    of returning a partial program.
    """
    parser = Parser(tokens)
    statements = parser.parse()
    if parser.errors:
        raise ParseErrors(parser.errors)
    return statements
