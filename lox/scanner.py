"""Lexical analysis for Lox.

The scanner makes a single left-to-right pass over the source text and
produces a list of :class:`~lox.tokens.Token`. Lexical errors do not stop
the scan: each one is recorded in :attr:`Scanner.errors` and scanning
resumes with the next character, so a single pass surfaces as many errors
as possible. An ``EOF`` token is always appended.
"""

from __future__ import annotations

import sys
from typing import List, Optional, Tuple, Union

from .errors import LexError
from .tokens import KEYWORDS, Token, TokenType


SINGLE_CHAR_TOKENS = {
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
    '{': TokenType.LEFT_BRACE,
    '}': TokenType.RIGHT_BRACE,
    ',': TokenType.COMMA,
    '.': TokenType.DOT,
    '-': TokenType.MINUS,
    '+': TokenType.PLUS,
    ';': TokenType.SEMICOLON,
    '*': TokenType.STAR,
}

# first char -> (token if followed by '=', token otherwise)
ONE_OR_TWO_CHAR_TOKENS = {
    '!': (TokenType.BANG_EQUAL, TokenType.BANG),
    '=': (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    '<': (TokenType.LESS_EQUAL, TokenType.LESS),
    '>': (TokenType.GREATER_EQUAL, TokenType.GREATER),
}


def is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def is_alpha(c: str) -> bool:
    return ('a' <= c <= 'z') or ('A' <= c <= 'Z') or c == '_'


def is_alnum(c: str) -> bool:
    return is_alpha(c) or is_digit(c)


class Scanner:
    def __init__(self, source: str):
        self.source = source
        self.tokens: List[Token] = []
        self.errors: List[LexError] = []
        self.start = 0
        self.current = 0
        self.line = 1

    @property
    def had_error(self) -> bool:
        return bool(self.errors)

    def scan_tokens(self) -> List[Token]:
        while not self.is_at_end():
            self.start = self.current
            try:
                self.scan_token()
            except LexError as e:
                self.errors.append(e)
        self.tokens.append(Token(TokenType.EOF, '', None, self.line))
        return self.tokens

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def advance(self) -> str:
        c = self.source[self.current]
        self.current += 1
        return c

    def peek(self) -> str:
        if self.is_at_end():
            return ''
        return self.source[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return ''
        return self.source[self.current + 1]

    def match(self, expected: str) -> bool:
        if self.peek() != expected:
            return False
        self.current += 1
        return True

    def add_token(self, token_type: TokenType, literal: Optional[Union[float, str]] = None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.line))

    def scan_token(self):
        c = self.advance()
        if c in SINGLE_CHAR_TOKENS:
            self.add_token(SINGLE_CHAR_TOKENS[c])
        elif c in ONE_OR_TWO_CHAR_TOKENS:
            with_equal, alone = ONE_OR_TWO_CHAR_TOKENS[c]
            self.add_token(with_equal if self.match('=') else alone)
        elif c == '/':
            if self.match('/'):
                # line comment; the newline itself is scanned normally
                while self.peek() not in ('\n', ''):
                    self.advance()
            else:
                self.add_token(TokenType.SLASH)
        elif c in (' ', '\r', '\t'):
            pass
        elif c == '\n':
            self.line += 1
        elif c == '"':
            self.string()
        elif is_digit(c):
            self.number()
        elif is_alpha(c):
            self.identifier()
        else:
            raise LexError(self.line, f"Unexpected character: {c}")

    def string(self):
        newlines = 0
        while self.peek() not in ('"', ''):
            if self.peek() == '\n':
                newlines += 1
            self.advance()
        if self.is_at_end():
            # reported at the opening line; the skipped lines are not counted
            raise LexError(self.line, 'Unterminated string.')
        self.advance()  # closing quote
        value = self.source[self.start + 1:self.current - 1]
        self.add_token(TokenType.STRING, value)
        self.line += newlines

    def number(self):
        while is_digit(self.peek()):
            self.advance()
        if self.peek() == '.' and is_digit(self.peek_next()):
            self.advance()
            while is_digit(self.peek()):
                self.advance()
        text = self.source[self.start:self.current]
        try:
            value = float(text)
        except ValueError:
            raise AssertionError(f"scanner accepted a malformed number {text!r}")
        self.add_token(TokenType.NUMBER, value)

    def identifier(self):
        while is_alnum(self.peek()):
            self.advance()
        text = self.source[self.start:self.current]
        self.add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))


def tokenize(source: str) -> Tuple[List[Token], bool]:
    """Scan ``source`` and report lexical errors to stderr.

    Returns the token list (always ending with ``EOF``) and whether any
    lexical error was found.
    """
    scanner = Scanner(source)
    tokens = scanner.scan_tokens()
    for error in scanner.errors:
        print(error, file=sys.stderr)
    return tokens, scanner.had_error
