"""Recursive-descent parser for the Pascal subset.

The parser pulls tokens from a `Lexer` with a single token of lookahead
and builds one AST per call. Grammar:

    program        : PROGRAM variable SEMI block DOT
    block          : declarations compound_statement
    declarations   : (VAR (variable_declaration SEMI)+)? procedure_declaration*
    procedure_decl : PROCEDURE ID (LPAREN formal_parameters RPAREN)? SEMI block SEMI
    formal_params  : parameter (SEMI parameter)*
    parameter      : ID (COMMA ID)* COLON type_spec
    variable_decl  : ID (COMMA ID)* COLON type_spec
    type_spec      : INTEGER | REAL
    compound_stmt  : BEGIN statement_list END
    statement_list : statement (SEMI statement)*
    statement      : compound_statement | assignment_statement | empty
    assignment     : variable ASSIGN expr
    expr           : term ((PLUS | MINUS) term)*
    term           : factor ((MUL | INTEGER_DIV | FLOAT_DIV) factor)*
    factor         : (PLUS | MINUS) factor | INTEGER_CONST | REAL_CONST
                   | LPAREN expr RPAREN | variable
    variable       : ID
"""

from __future__ import annotations

from typing import List

from .ast import (
    Assign, BinaryOp, Block, Compound, Declaration, IntegerLiteral, Node,
    NoOp, Parameter, Procedure, Program, RealLiteral, TypeSpec, UnaryOp, Var,
)
from .errors import NestingTooDeep, ParseError
from .lexer import Lexer
from .tokens import Token, TokenKind
from .types import BuiltinType

ADDITIVE_OPS = (TokenKind.PLUS, TokenKind.MINUS)
MULTIPLICATIVE_OPS = (TokenKind.MUL, TokenKind.INTEGER_DIV, TokenKind.FLOAT_DIV)


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.current_token: Token = lexer.next_token()

    def consume(self, kind: TokenKind) -> Token:
        """Check the current token against `kind` and move to the next one."""
        token = self.current_token
        if token.kind is not kind:
            raise ParseError(kind.value, token)
        self.current_token = self.lexer.next_token()
        return token

    def match(self, *kinds: TokenKind) -> bool:
        return self.current_token.kind in kinds

    def parse(self) -> Program:
        node = self.program()
        if not self.match(TokenKind.EOF):
            raise ParseError(TokenKind.EOF.value, self.current_token)
        return node

    def parse_expression(self) -> Node:
        """Parse a standalone expression that must span the whole input."""
        node = self.expr()
        if not self.match(TokenKind.EOF):
            raise ParseError(TokenKind.EOF.value, self.current_token)
        return node

    def program(self) -> Program:
        self.consume(TokenKind.PROGRAM)
        name = self.variable().name
        self.consume(TokenKind.SEMI)
        block = self.block()
        self.consume(TokenKind.DOT)
        return Program(name, block)

    def block(self) -> Block:
        declarations = self.declarations()
        compound = self.compound_statement()
        return Block(tuple(declarations), compound)

    def declarations(self) -> List[Node]:
        declarations: List[Node] = []
        if self.match(TokenKind.VAR):
            self.consume(TokenKind.VAR)
            # At least one declaration must follow VAR.
            declarations.extend(self.variable_declaration())
            self.consume(TokenKind.SEMI)
            while self.match(TokenKind.ID):
                declarations.extend(self.variable_declaration())
                self.consume(TokenKind.SEMI)
        while self.match(TokenKind.PROCEDURE):
            declarations.append(self.procedure_declaration())
        return declarations

    def procedure_declaration(self) -> Procedure:
        self.consume(TokenKind.PROCEDURE)
        name = self.consume(TokenKind.ID).value
        params: List[Parameter] = []
        if self.match(TokenKind.LPAREN):
            self.consume(TokenKind.LPAREN)
            params = self.formal_parameters()
            self.consume(TokenKind.RPAREN)
        self.consume(TokenKind.SEMI)
        block = self.block()
        self.consume(TokenKind.SEMI)
        return Procedure(name, tuple(params), block)

    def formal_parameters(self) -> List[Parameter]:
        params = self.parameter()
        while self.match(TokenKind.SEMI):
            self.consume(TokenKind.SEMI)
            params.extend(self.parameter())
        return params

    def identifier_list(self) -> List[Var]:
        names = [Var(self.consume(TokenKind.ID).value)]
        while self.match(TokenKind.COMMA):
            self.consume(TokenKind.COMMA)
            names.append(Var(self.consume(TokenKind.ID).value))
        return names

    def parameter(self) -> List[Parameter]:
        names = self.identifier_list()
        self.consume(TokenKind.COLON)
        type_spec = self.type_spec()
        return [Parameter(var, type_spec) for var in names]

    def variable_declaration(self) -> List[Declaration]:
        names = self.identifier_list()
        self.consume(TokenKind.COLON)
        type_spec = self.type_spec()
        return [Declaration(var, type_spec) for var in names]

    def type_spec(self) -> TypeSpec:
        if self.match(TokenKind.INTEGER):
            self.consume(TokenKind.INTEGER)
            return TypeSpec(BuiltinType.INTEGER)
        if self.match(TokenKind.REAL):
            self.consume(TokenKind.REAL)
            return TypeSpec(BuiltinType.REAL)
        raise ParseError('INTEGER or REAL', self.current_token)

    def compound_statement(self) -> Compound:
        self.consume(TokenKind.BEGIN)
        children = self.statement_list()
        self.consume(TokenKind.END)
        return Compound(tuple(children))

    def statement_list(self) -> List[Node]:
        statements = [self.statement()]
        while self.match(TokenKind.SEMI):
            self.consume(TokenKind.SEMI)
            statements.append(self.statement())
        # Two statements with nothing between them.
        if self.match(TokenKind.ID):
            raise ParseError(TokenKind.SEMI.value, self.current_token)
        return statements

    def statement(self) -> Node:
        if self.match(TokenKind.BEGIN):
            return self.compound_statement()
        if self.match(TokenKind.ID):
            return self.assignment_statement()
        return NoOp()

    def assignment_statement(self) -> Assign:
        target = self.variable()
        self.consume(TokenKind.ASSIGN)
        return Assign(target, self.expr())

    def variable(self) -> Var:
        return Var(self.consume(TokenKind.ID).value)

    def expr(self) -> Node:
        node = self.term()
        while self.match(*ADDITIVE_OPS):
            op = self.consume(self.current_token.kind)
            node = BinaryOp(node, op.kind.value, self.term())
        return node

    def term(self) -> Node:
        node = self.factor()
        while self.match(*MULTIPLICATIVE_OPS):
            op = self.consume(self.current_token.kind)
            node = BinaryOp(node, op.kind.value, self.factor())
        return node

    def factor(self) -> Node:
        token = self.current_token
        if self.match(*ADDITIVE_OPS):
            self.consume(token.kind)
            return UnaryOp(token.kind.value, self.factor())
        if self.match(TokenKind.INTEGER_CONST):
            self.consume(TokenKind.INTEGER_CONST)
            return IntegerLiteral(token.value)
        if self.match(TokenKind.REAL_CONST):
            self.consume(TokenKind.REAL_CONST)
            return RealLiteral(token.value)
        if self.match(TokenKind.LPAREN):
            self.consume(TokenKind.LPAREN)
            node = self.expr()
            self.consume(TokenKind.RPAREN)
            return node
        if self.match(TokenKind.ID):
            return self.variable()
        raise ParseError('expression', token)


def parse_program(source: str) -> Program:
    """Parse source text into a Program AST."""
    try:
        return Parser(Lexer(source)).parse()
    except RecursionError:
        raise NestingTooDeep('parse') from None


def parse_expression(source: str) -> Node:
    """Parse source text holding a single expression."""
    try:
        return Parser(Lexer(source)).parse_expression()
    except RecursionError:
        raise NestingTooDeep('parse') from None
