"""Semantic pass: builds symbol tables and checks declare-before-use.

The analyzer walks the tree once in pre-order without changing it. It
stops at the first problem by raising a `SemanticError`.
"""

from __future__ import annotations

import logging
from typing import Optional

from .ast import (
    Assign, BinaryOp, Block, Compound, Declaration, IntegerLiteral, Node,
    NoOp, Parameter, Procedure, Program, RealLiteral, TypeSpec, UnaryOp, Var,
)
from .errors import DuplicateDeclaration, UndeclaredVariable, UnknownType
from .symbols import BuiltinTypeSymbol, ProcedureSymbol, SymbolTable, VariableSymbol
from .visitor import NodeVisitor

logger = logging.getLogger(__name__)

GLOBAL_SCOPE_NAME = 'global'


class SemanticAnalyzer(NodeVisitor):
    def __init__(self, debug_level: int = 0):
        self.debug_level = debug_level
        self.global_scope: Optional[SymbolTable] = None
        self.current_scope: Optional[SymbolTable] = None

    def analyze(self, node: Node) -> SymbolTable:
        """Check a Program, or a bare expression against an empty global scope."""
        if not isinstance(node, Program):
            self.enter_scope(GLOBAL_SCOPE_NAME)
        self.visit(node)
        return self.global_scope

    def visit(self, node: Node) -> None:
        if self.debug_level >= 3:
            logger.debug("check %s", type(node).__name__)
        super().visit(node)

    def enter_scope(self, name: str) -> SymbolTable:
        level = self.current_scope.scope_level + 1 if self.current_scope is not None else 1
        scope = SymbolTable(name, level, self.current_scope)
        if self.global_scope is None:
            self.global_scope = scope
        self.current_scope = scope
        if self.debug_level >= 2:
            logger.debug("ENTER scope %s", name)
        return scope

    def leave_scope(self) -> None:
        scope = self.current_scope
        if self.debug_level >= 2:
            logger.debug("%s", scope)
            logger.debug("LEAVE scope %s", scope.scope_name)
        self.current_scope = scope.enclosing_scope

    def resolve_type(self, node: TypeSpec) -> BuiltinTypeSymbol:
        symbol = self.current_scope.builtin(str(node.type))
        if symbol is None:
            raise UnknownType(str(node.type))
        return symbol

    def declare(self, var: Var, type_spec: TypeSpec) -> VariableSymbol:
        if self.current_scope.lookup(var.name, current_scope_only=True) is not None:
            raise DuplicateDeclaration(var.name)
        symbol = VariableSymbol(var.name, self.resolve_type(type_spec))
        self.current_scope.insert(symbol)
        if self.debug_level >= 2:
            logger.debug("insert %s into %s", symbol, self.current_scope.scope_name)
        return symbol

    def check_declared(self, var: Var) -> None:
        if not isinstance(self.current_scope.lookup(var.name), VariableSymbol):
            raise UndeclaredVariable(var.name)

    def visit_program(self, node: Program) -> None:
        self.enter_scope(GLOBAL_SCOPE_NAME)
        self.visit(node.block)
        self.leave_scope()

    def visit_block(self, node: Block) -> None:
        for declaration in node.declarations:
            self.visit(declaration)
        self.visit(node.compound_statement)

    def visit_declaration(self, node: Declaration) -> None:
        self.declare(node.var, node.type_spec)

    def visit_procedure(self, node: Procedure) -> None:
        if self.current_scope.lookup(node.name, current_scope_only=True) is not None:
            raise DuplicateDeclaration(node.name)
        # The symbol goes in first so the body can see its own name.
        self.current_scope.insert(ProcedureSymbol(node.name))
        enclosing = self.current_scope
        self.enter_scope(node.name)
        params = tuple(self.declare(param.var, param.type_spec) for param in node.params)
        enclosing.insert(ProcedureSymbol(node.name, params))
        self.visit(node.block)
        self.leave_scope()

    def visit_parameter(self, node: Parameter) -> None:
        self.declare(node.var, node.type_spec)

    def visit_typespec(self, node: TypeSpec) -> None:
        self.resolve_type(node)

    def visit_compound(self, node: Compound) -> None:
        for child in node.children:
            self.visit(child)

    def visit_assign(self, node: Assign) -> None:
        self.check_declared(node.target)
        self.visit(node.value)

    def visit_var(self, node: Var) -> None:
        self.check_declared(node)

    def visit_binaryop(self, node: BinaryOp) -> None:
        self.visit(node.left)
        self.visit(node.right)

    def visit_unaryop(self, node: UnaryOp) -> None:
        self.visit(node.operand)

    def visit_integerliteral(self, node: IntegerLiteral) -> None:
        pass

    def visit_realliteral(self, node: RealLiteral) -> None:
        pass

    def visit_noop(self, node: NoOp) -> None:
        pass
