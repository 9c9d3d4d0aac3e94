"""Grammar-driven parser for the Pascal subset.

This module describes the same language as `parser.py` with a Lark LALR
grammar. The parse tree is transformed into the AST classes of
`tinypas.ast`, so both parsers hand the rest of the pipeline identical
trees. Lark's own exceptions are translated into the interpreter's
`LexError`/`ParseError` taxonomy.

The `parse_program` and `parse_expression` functions are the public entry
points.
"""

from __future__ import annotations

from typing import Any, List

from lark import Lark, Token as LarkToken, Transformer
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedToken, VisitError

from .ast import (
    Assign, BinaryOp, Block, Compound, Declaration, IntegerLiteral, Node,
    NoOp, Parameter, Procedure, Program, RealLiteral, TypeSpec, UnaryOp, Var,
)
from .errors import (
    InterpretError, NestingTooDeep, ParseError, UnknownCharacter, UnterminatedComment,
)
from .lexer import number_value
from .tokens import RESERVED_WORDS, SINGLE_CHAR_TOKENS, Token, TokenKind
from .types import BuiltinType


PASCAL_GRAMMAR = r"""
    program: _PROGRAM variable ";" block "."

    block: declarations compound_statement
    declarations: var_section? procedure_decl*
    var_section: _VAR (var_decl ";")+
    var_decl: ID ("," ID)* ":" type_spec

    procedure_decl: _PROCEDURE ID formal_params? ";" block ";"
    formal_params: "(" param (";" param)* ")"
    param: ID ("," ID)* ":" type_spec

    type_spec: INTEGER | REAL

    compound_statement: _BEGIN statement_list _END
    statement_list: statement (";" statement)*
    ?statement: compound_statement
              | assignment
              | empty
    empty:
    assignment: variable ":=" expr
    variable: ID

    // Expressions with precedence
    ?expr: term
         | expr ADD_OP term              -> binary_op
    ?term: factor
         | term MUL_OP factor            -> binary_op
         | term DIV factor               -> binary_op
    ?factor: ADD_OP factor               -> unary_op
           | INT_CONST                   -> integer
           | REAL_CONST                  -> real
           | "(" expr ")"
           | variable

    // Keywords beat identifiers; a keyword must not run on into letters or digits.
    _PROGRAM.2: /program(?![a-zA-Z0-9])/i
    _VAR.2: /var(?![a-zA-Z0-9])/i
    _PROCEDURE.2: /procedure(?![a-zA-Z0-9])/i
    _BEGIN.2: /begin(?![a-zA-Z0-9])/i
    _END.2: /end(?![a-zA-Z0-9])/i
    INTEGER.2: /integer(?![a-zA-Z0-9])/i
    REAL.2: /real(?![a-zA-Z0-9])/i
    DIV.2: /div(?![a-zA-Z0-9])/i

    ID: /[a-zA-Z_][a-zA-Z0-9]*/
    REAL_CONST.2: /[0-9]+\.[0-9]+/
    INT_CONST: /[0-9]+/
    ADD_OP: "+" | "-"
    MUL_OP: "*" | "/"

    COMMENT: /\{[^}]*\}/
    %ignore COMMENT
    %import common.WS
    %ignore WS
"""


PASCAL_PARSER = Lark(
    PASCAL_GRAMMAR,
    start=['program', 'expr'],
    parser='lalr',
    lexer='basic',
    propagate_positions=True,
)


def _flatten(items: List[Any]) -> List[Any]:
    result: List[Any] = []
    for item in items:
        if isinstance(item, list):
            result.extend(item)
        elif item is not None:
            result.append(item)
    return result


class ASTTransformer(Transformer):
    """Transforms the raw parse tree into an AST."""

    def program(self, items):
        variable, block = items
        return Program(variable.name, block)

    def block(self, items):
        declarations, compound = items
        return Block(tuple(declarations), compound)

    def declarations(self, items):
        return _flatten(items)

    def var_section(self, items):
        return _flatten(items)

    def var_decl(self, items):
        type_spec = items[-1]
        return [Declaration(Var(str(name)), type_spec) for name in items[:-1]]

    def procedure_decl(self, items):
        name = str(items[0])
        block = items[-1]
        params = items[1] if len(items) == 3 else []
        return Procedure(name, tuple(params), block)

    def formal_params(self, items):
        return _flatten(items)

    def param(self, items):
        type_spec = items[-1]
        return [Parameter(Var(str(name)), type_spec) for name in items[:-1]]

    def type_spec(self, items):
        return TypeSpec(BuiltinType[str(items[0]).upper()])

    def compound_statement(self, items):
        return Compound(tuple(items[0]))

    def statement_list(self, items):
        return list(items)

    def empty(self, items):
        return NoOp()

    def assignment(self, items):
        target, value = items
        return Assign(target, value)

    def variable(self, items):
        return Var(str(items[0]))

    def binary_op(self, items):
        left, op, right = items
        return BinaryOp(left, str(op).upper(), right)

    def unary_op(self, items):
        op, operand = items
        return UnaryOp(str(op), operand)

    def integer(self, items):
        token = items[0]
        return IntegerLiteral(number_value(str(token), token.line, token.column))

    def real(self, items):
        token = items[0]
        return RealLiteral(number_value(str(token), token.line, token.column))


def _as_token(lark_token: Any) -> Token:
    """Convert the token Lark choked on into a lexer `Token`."""
    line = getattr(lark_token, 'line', None) or 0
    column = getattr(lark_token, 'column', None) or 0
    if not isinstance(lark_token, LarkToken) or lark_token.type == '$END':
        return Token(TokenKind.EOF, None, line, column)
    text = str(lark_token)
    if lark_token.type == 'INT_CONST':
        return Token(TokenKind.INTEGER_CONST, number_value(text, line, column), line, column)
    if lark_token.type == 'REAL_CONST':
        return Token(TokenKind.REAL_CONST, number_value(text, line, column), line, column)
    if lark_token.type == 'ID':
        return Token(TokenKind.ID, text, line, column)
    kind = RESERVED_WORDS.get(text.upper()) or SINGLE_CHAR_TOKENS.get(text)
    if kind is None and text == TokenKind.ASSIGN.value:
        kind = TokenKind.ASSIGN
    if kind is None:
        return Token(TokenKind.ID, text, line, column)
    return Token(kind, None, line, column)


def _parse(source: str, start: str) -> Node:
    try:
        tree = PASCAL_PARSER.parse(source, start=start)
    except UnexpectedCharacters as e:
        if e.char == '{':
            raise UnterminatedComment(e.line, e.column) from e
        raise UnknownCharacter(e.char, e.line, e.column) from e
    except UnexpectedToken as e:
        expected = ' or '.join(sorted(e.expected))
        raise ParseError(expected, _as_token(e.token)) from e
    except UnexpectedEOF as e:
        expected = ' or '.join(sorted(e.expected))
        raise ParseError(expected, Token(TokenKind.EOF)) from e
    try:
        return ASTTransformer().transform(tree)
    except VisitError as e:
        # Errors raised inside a callback arrive wrapped.
        if isinstance(e.orig_exc, InterpretError):
            raise e.orig_exc from None
        if isinstance(e.orig_exc, RecursionError):
            raise NestingTooDeep('parse') from None
        raise
    except RecursionError:
        raise NestingTooDeep('parse') from None


def parse_program(source: str) -> Program:
    """Parse source text into a Program AST using the Lark grammar."""
    return _parse(source, 'program')


def parse_expression(source: str) -> Node:
    """Parse a standalone expression using the Lark grammar."""
    return _parse(source, 'expr')
