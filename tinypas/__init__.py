# Pascal subset interpreter package
# This package provides a lexer, parser, semantic pass and evaluator for a
# small Pascal-like teaching language.
from .ast import to_source
from .errors import (
    InterpretError, LexError, ParseError, SemanticError, ExecutionError,
    UnknownCharacter, UnterminatedComment, DuplicateDeclaration,
    UndeclaredVariable, UnknownType, UninitializedVariable, TypeMismatch,
    DivisionByZero, UnknownOperator, NumberOutOfRange, ArithmeticOverflow,
    NestingTooDeep,
)
from .interpreter import Interpreter, calculate, interpret
from .parser import parse_program
from .types import NIL, Int, Nil, Real, RuntimeValue

__all__ = [
    'interpret',
    'calculate',
    'Interpreter',
    'parse_program',
    'to_source',
    'RuntimeValue',
    'Nil',
    'Int',
    'Real',
    'NIL',
    'InterpretError',
    'LexError',
    'ParseError',
    'SemanticError',
    'ExecutionError',
    'UnknownCharacter',
    'UnterminatedComment',
    'DuplicateDeclaration',
    'UndeclaredVariable',
    'UnknownType',
    'UninitializedVariable',
    'TypeMismatch',
    'DivisionByZero',
    'UnknownOperator',
    'NumberOutOfRange',
    'ArithmeticOverflow',
    'NestingTooDeep',
]
