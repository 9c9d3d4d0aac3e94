"""Lexical analysis for the Pascal subset.

The lexer pulls characters from a fixed input buffer and hands out one
token per `next_token()` call. Whitespace and brace comments are skipped.
Keywords are recognised case-insensitively; identifiers keep their case.
"""

from __future__ import annotations

import math
from typing import List, Optional, Union

from .errors import NumberOutOfRange, UnknownCharacter, UnterminatedComment
from .tokens import RESERVED_WORDS, SINGLE_CHAR_TOKENS, Token, TokenKind

WHITESPACE = frozenset(' \t\f\r\n')


def is_digit(c: Optional[str]) -> bool:
    return c is not None and '0' <= c <= '9'


def is_identifier_start(c: Optional[str]) -> bool:
    return c is not None and c.isascii() and (c.isalpha() or c == '_')


def is_identifier_char(c: Optional[str]) -> bool:
    return c is not None and c.isascii() and c.isalnum()


def number_value(lexeme: str, line: int, column: int) -> Union[int, float]:
    """Convert an INTEGER_CONST or REAL_CONST lexeme to its value."""
    try:
        value = float(lexeme) if '.' in lexeme else int(lexeme)
    except ValueError:
        # int() refuses digit runs beyond the interpreter's conversion limit.
        raise NumberOutOfRange(lexeme, line, column) from None
    if isinstance(value, float) and not math.isfinite(value):
        raise NumberOutOfRange(lexeme, line, column)
    return value


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char: Optional[str] = text[0] if text else None

    def advance(self) -> None:
        if self.current_char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1
        self.current_char = self.text[self.pos] if self.pos < len(self.text) else None

    def peek(self) -> Optional[str]:
        """Return the character after the current one without consuming it."""
        pos = self.pos + 1
        return self.text[pos] if pos < len(self.text) else None

    def skip_whitespace(self) -> None:
        while self.current_char in WHITESPACE:
            self.advance()

    def skip_comment(self) -> None:
        line, column = self.line, self.column
        self.advance()  # opening brace
        while self.current_char != '}':
            if self.current_char is None:
                raise UnterminatedComment(line, column)
            self.advance()
        self.advance()  # closing brace

    def number(self) -> Token:
        line, column = self.line, self.column
        digits: List[str] = []
        while is_digit(self.current_char):
            digits.append(self.current_char)
            self.advance()
        # A point only belongs to the number when a digit follows it.
        if self.current_char == '.' and is_digit(self.peek()):
            digits.append('.')
            self.advance()
            while is_digit(self.current_char):
                digits.append(self.current_char)
                self.advance()
            text = ''.join(digits)
            return Token(TokenKind.REAL_CONST, number_value(text, line, column), line, column)
        text = ''.join(digits)
        return Token(TokenKind.INTEGER_CONST, number_value(text, line, column), line, column)

    def identifier(self) -> Token:
        line, column = self.line, self.column
        chars = [self.current_char]
        self.advance()
        while is_identifier_char(self.current_char):
            chars.append(self.current_char)
            self.advance()
        word = ''.join(chars)
        kind = RESERVED_WORDS.get(word.upper())
        if kind is not None:
            return Token(kind, None, line, column)
        return Token(TokenKind.ID, word, line, column)

    def next_token(self) -> Token:
        while self.current_char is not None:
            c = self.current_char
            if c in WHITESPACE:
                self.skip_whitespace()
                continue
            if c == '{':
                self.skip_comment()
                continue
            if is_digit(c):
                return self.number()
            if is_identifier_start(c):
                return self.identifier()
            if c == ':' and self.peek() == '=':
                token = Token(TokenKind.ASSIGN, None, self.line, self.column)
                self.advance()
                self.advance()
                return token
            kind = SINGLE_CHAR_TOKENS.get(c)
            if kind is not None:
                token = Token(kind, None, self.line, self.column)
                self.advance()
                return token
            raise UnknownCharacter(c, self.line, self.column)
        return Token(TokenKind.EOF, None, self.line, self.column)


def tokenize(text: str) -> List[Token]:
    """Convert source text into a list of tokens ending with EOF."""
    lexer = Lexer(text)
    tokens: List[Token] = []
    while True:
        token = lexer.next_token()
        tokens.append(token)
        if token.kind is TokenKind.EOF:
            return tokens
