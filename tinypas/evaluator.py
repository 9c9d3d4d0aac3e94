"""Tree-walking evaluation of an analyzed AST."""

from __future__ import annotations

import logging
from typing import Optional

from .ast import (
    Assign, BinaryOp, Block, Compound, Declaration, IntegerLiteral, Node,
    NoOp, Parameter, Procedure, Program, RealLiteral, TypeSpec, UnaryOp, Var,
)
from .environment import RuntimeEnvironment
from .errors import UnknownOperator
from .types import NIL, Int, Real, RuntimeValue
from .visitor import NodeVisitor

logger = logging.getLogger(__name__)


class Evaluator(NodeVisitor):
    """Computes a `RuntimeValue` for each node.

    Assignments are the only side effect; they are recorded in the
    evaluator's `RuntimeEnvironment`. Declarations and procedures have
    already been checked by the semantic pass and evaluate to Nil.
    """

    def __init__(self, environment: Optional[RuntimeEnvironment] = None, debug_level: int = 0):
        self.environment = environment if environment is not None else RuntimeEnvironment()
        self.debug_level = debug_level

    def visit(self, node: Node) -> RuntimeValue:
        value = super().visit(node)
        if self.debug_level >= 3:
            logger.debug("eval %s -> %s", type(node).__name__, value)
        return value

    def visit_program(self, node: Program) -> RuntimeValue:
        self.visit(node.block)
        return NIL

    def visit_block(self, node: Block) -> RuntimeValue:
        for declaration in node.declarations:
            self.visit(declaration)
        return self.visit(node.compound_statement)

    def visit_declaration(self, node: Declaration) -> RuntimeValue:
        return NIL

    def visit_typespec(self, node: TypeSpec) -> RuntimeValue:
        return NIL

    def visit_procedure(self, node: Procedure) -> RuntimeValue:
        # Declared only; there are no call statements to run the body.
        return NIL

    def visit_parameter(self, node: Parameter) -> RuntimeValue:
        return NIL

    def visit_compound(self, node: Compound) -> RuntimeValue:
        for child in node.children:
            self.visit(child)
        return NIL

    def visit_noop(self, node: NoOp) -> RuntimeValue:
        return NIL

    def visit_assign(self, node: Assign) -> RuntimeValue:
        value = self.visit(node.value)
        self.environment.set(node.target.name, value)
        if self.debug_level >= 2:
            logger.debug("assign %s = %s", node.target.name, value)
        return NIL

    def visit_var(self, node: Var) -> RuntimeValue:
        return self.environment.get(node.name)

    def visit_integerliteral(self, node: IntegerLiteral) -> RuntimeValue:
        return Int(node.value)

    def visit_realliteral(self, node: RealLiteral) -> RuntimeValue:
        return Real(node.value)

    def visit_unaryop(self, node: UnaryOp) -> RuntimeValue:
        operand = self.visit(node.operand)
        if node.op == '+':
            return +operand
        if node.op == '-':
            return -operand
        raise UnknownOperator(node.op)

    def visit_binaryop(self, node: BinaryOp) -> RuntimeValue:
        left = self.visit(node.left)
        right = self.visit(node.right)
        op = node.op
        if op == '+':
            return left + right
        if op == '-':
            return left - right
        if op == '*':
            return left * right
        if op == 'DIV':
            return left.div(right)
        if op == '/':
            return left / right
        raise UnknownOperator(op)
