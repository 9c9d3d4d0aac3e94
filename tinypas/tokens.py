"""Token kinds and the token type produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union


class TokenKind(Enum):
    PROGRAM = 'PROGRAM'
    VAR = 'VAR'
    PROCEDURE = 'PROCEDURE'
    BEGIN = 'BEGIN'
    END = 'END'
    INTEGER = 'INTEGER'
    REAL = 'REAL'
    INTEGER_DIV = 'DIV'
    INTEGER_CONST = 'INTEGER_CONST'
    REAL_CONST = 'REAL_CONST'
    ID = 'ID'
    ASSIGN = ':='
    COLON = ':'
    COMMA = ','
    SEMI = ';'
    DOT = '.'
    PLUS = '+'
    MINUS = '-'
    MUL = '*'
    FLOAT_DIV = '/'
    LPAREN = '('
    RPAREN = ')'
    EOF = 'EOF'


# Keywords are matched case-insensitively against the upper-cased lexeme.
RESERVED_WORDS: Mapping[str, TokenKind] = MappingProxyType({
    kind.value: kind
    for kind in (
        TokenKind.PROGRAM,
        TokenKind.VAR,
        TokenKind.PROCEDURE,
        TokenKind.BEGIN,
        TokenKind.END,
        TokenKind.INTEGER,
        TokenKind.REAL,
        TokenKind.INTEGER_DIV,
    )
})

SINGLE_CHAR_TOKENS: Mapping[str, TokenKind] = MappingProxyType({
    kind.value: kind
    for kind in (
        TokenKind.PLUS,
        TokenKind.MINUS,
        TokenKind.MUL,
        TokenKind.FLOAT_DIV,
        TokenKind.LPAREN,
        TokenKind.RPAREN,
        TokenKind.SEMI,
        TokenKind.DOT,
        TokenKind.COLON,
        TokenKind.COMMA,
    )
})


@dataclass(frozen=True)
class Token:
    """A lexical token.

    `value` carries the payload of literals (int or float) and the name of
    identifiers; it is None for keywords and punctuation. Positions are
    informational and do not take part in equality.
    """
    kind: TokenKind
    value: Optional[Union[int, float, str]] = None
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __str__(self) -> str:
        if self.value is not None:
            return str(self.value)
        return self.kind.value
