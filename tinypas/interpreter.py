"""Interpreter facade for the Pascal subset.

This module ties the pipeline together: the source text is lexed and
parsed into an AST, the semantic pass validates every declaration and
variable reference, and only then is the tree evaluated. Each call gets
its own lexer, parser, symbol tables and runtime environment, so
interpreting one program never leaks state into the next.
"""

from __future__ import annotations

import logging
from typing import Optional

from .ast import Node, Program
from .environment import RuntimeEnvironment
from .errors import NestingTooDeep
from .evaluator import Evaluator
from .parser import parse_expression, parse_program
from .semantic import SemanticAnalyzer
from .symbols import SymbolTable
from .types import RuntimeValue

logger = logging.getLogger(__name__)


class Interpreter:
    """Runs programs through the semantic pass and the evaluator."""
    def __init__(self, debug_level: int = 0):
        self.debug_level = debug_level
        self.environment: Optional[RuntimeEnvironment] = None
        self.global_scope: Optional[SymbolTable] = None

    def debug(self, msg: str, *args):
        if self.debug_level > 0:
            logger.debug(msg, *args)

    def interpret(self, source: str) -> RuntimeValue:
        """Interpret program text and return the program's value."""
        self.debug("parse program")
        return self.run(parse_program(source))

    def calculate(self, source: str) -> RuntimeValue:
        """Evaluate a single expression with no variables in scope."""
        self.debug("parse expression")
        return self.run(parse_expression(source))

    def run(self, node: Node) -> RuntimeValue:
        """Check and evaluate an already parsed Program or expression."""
        self.debug("semantic pass")
        try:
            self.global_scope = SemanticAnalyzer(self.debug_level).analyze(node)
        except RecursionError:
            raise NestingTooDeep('semantic') from None
        self.environment = RuntimeEnvironment()
        if isinstance(node, Program):
            self.debug("evaluate program %s", node.name)
        else:
            self.debug("evaluate expression")
        try:
            result = Evaluator(self.environment, self.debug_level).visit(node)
        except RecursionError:
            raise NestingTooDeep('runtime') from None
        self.debug("result %s", result)
        for name, value in self.environment.items():
            self.debug("  %s = %s", name, value)
        return result


def interpret(source: str, debug_level: int = 0) -> RuntimeValue:
    """Convenience function to interpret a program from a source string."""
    return Interpreter(debug_level=debug_level).interpret(source)


def calculate(source: str) -> RuntimeValue:
    """Convenience function to evaluate a standalone expression."""
    return Interpreter().calculate(source)
