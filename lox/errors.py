from typing import List

from lox.tokens import Token, TokenType


class LoxError(Exception):
    """Base class for every error reported to a Lox user."""


class LexError(LoxError):
    """A single malformed lexeme. Recorded by the scanner, which keeps going."""
    def __init__(self, line: int, message: str):
        super().__init__(f"[line {line}] Error: {message}")
        self.line = line
        self.message = message


class ParseError(LoxError):
    """A syntax error located at a token."""
    def __init__(self, token: Token, message: str):
        if token.type == TokenType.EOF:
            where = 'at end'
        else:
            where = f"at '{token.lexeme}'"
        super().__init__(f"[line {token.line}] Error {where}: {message}")
        self.token = token
        self.message = message


class UnexpectedTokenError(ParseError):
    pass


class UnclosedDelimiterError(ParseError):
    pass


class MissingSemicolonError(ParseError):
    """Carries the token after which the semicolon was expected."""


class InvalidAssignmentTargetError(ParseError):
    """Carries the '=' token of the rejected assignment."""


class ParseErrors(LoxError):
    """Every syntax error collected while parsing a whole program."""
    def __init__(self, errors: List[ParseError]):
        super().__init__('\n'.join(str(e) for e in errors))
        self.errors = errors


class LoxRuntimeError(LoxError):
    """Exception type used to propagate Lox runtime errors."""
    def __init__(self, token: Token, message: str):
        super().__init__(f"{message}\n[line {token.line}]")
        self.token = token
        self.message = message
