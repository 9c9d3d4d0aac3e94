"""Abstract Syntax Tree (AST) definitions for the Pascal subset.

Each node class corresponds to one construct of the grammar. Nodes are
frozen dataclasses holding their children in tuples, so a tree is
immutable once the parser has built it and two trees compare equal when
they have the same shape.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

from .types import BuiltinType


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass(frozen=True)
class Var(Node):
    name: str


@dataclass(frozen=True)
class TypeSpec(Node):
    type: BuiltinType


@dataclass(frozen=True)
class Declaration(Node):
    var: Var
    type_spec: TypeSpec


@dataclass(frozen=True)
class Parameter(Node):
    var: Var
    type_spec: TypeSpec


@dataclass(frozen=True)
class IntegerLiteral(Node):
    value: int


@dataclass(frozen=True)
class RealLiteral(Node):
    value: float


@dataclass(frozen=True)
class BinaryOp(Node):
    left: Node
    op: str  # '+', '-', '*', 'DIV' or '/'
    right: Node


@dataclass(frozen=True)
class UnaryOp(Node):
    op: str  # '+' or '-'
    operand: Node


@dataclass(frozen=True)
class NoOp(Node):
    pass


@dataclass(frozen=True)
class Assign(Node):
    target: Var
    value: Node


@dataclass(frozen=True)
class Compound(Node):
    children: Tuple[Node, ...]


@dataclass(frozen=True)
class Block(Node):
    declarations: Tuple[Node, ...]  # Declaration and Procedure nodes
    compound_statement: Compound


@dataclass(frozen=True)
class Procedure(Node):
    name: str
    params: Tuple[Parameter, ...]
    block: Block


@dataclass(frozen=True)
class Program(Node):
    name: str
    block: Block


NODE_TYPES: Tuple[type, ...] = (
    Program, Block, Declaration, TypeSpec, IntegerLiteral, RealLiteral,
    BinaryOp, UnaryOp, Compound, Assign, Var, Procedure, Parameter, NoOp,
)


def _format_real(value: float) -> str:
    if not math.isfinite(value):
        raise ValueError(f"to_source: {value!r} has no literal form")
    text = repr(value)
    # The lexer only reads plain digit runs, never exponents.
    if 'e' in text or 'E' in text:
        text = format(Decimal(text), 'f')
    if '.' not in text:
        text += '.0'
    return text


def to_source(node: Node) -> str:
    """Render an expression subtree as source text.

    Every operator application is parenthesized, so lexing and parsing the
    result again yields a structurally equal subtree.
    """
    if isinstance(node, IntegerLiteral):
        return str(node.value)
    if isinstance(node, RealLiteral):
        return _format_real(node.value)
    if isinstance(node, Var):
        return node.name
    if isinstance(node, UnaryOp):
        return f"({node.op}{to_source(node.operand)})"
    if isinstance(node, BinaryOp):
        return f"({to_source(node.left)} {node.op} {to_source(node.right)})"
    raise TypeError(f"to_source: {type(node).__name__} is not an expression node")
