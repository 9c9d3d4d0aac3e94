from typing import Any, Optional


class InterpretError(Exception):
    """Base exception for every failure raised while interpreting a program.

    `stage` names the pipeline stage that failed; `token` is the offending
    token when the stage has one to point at.
    """
    stage = 'interpret'

    def __init__(self, message: str, token: Optional[Any] = None):
        super().__init__(f"{type(self).__name__}: {message}")
        self.message = message
        self.token = token


class LexError(InterpretError):
    stage = 'lex'


class UnknownCharacter(LexError):
    def __init__(self, char: str, line: int, column: int):
        super().__init__(f"unexpected character {char!r} at {line}:{column}")
        self.char = char
        self.line = line
        self.column = column


class UnterminatedComment(LexError):
    def __init__(self, line: int, column: int):
        super().__init__(f"comment opened at {line}:{column} is never closed")
        self.line = line
        self.column = column


class ParseError(InterpretError):
    stage = 'parse'

    def __init__(self, expected: str, found: Any):
        where = ''
        if getattr(found, 'line', 0):
            where = f" at {found.line}:{found.column}"
        super().__init__(f"expected {expected}{where}, got {found}", token=found)
        self.expected = expected
        self.found = found


class SemanticError(InterpretError):
    stage = 'semantic'

    def __init__(self, message: str, name: str):
        super().__init__(message)
        self.name = name


class DuplicateDeclaration(SemanticError):
    def __init__(self, name: str):
        super().__init__(f"duplicate declaration of '{name}'", name)


class UndeclaredVariable(SemanticError):
    def __init__(self, name: str):
        super().__init__(f"undeclared variable '{name}'", name)


class UnknownType(SemanticError):
    def __init__(self, name: str):
        super().__init__(f"unknown type '{name}'", name)


class ExecutionError(InterpretError):
    """Errors raised while evaluating an already validated tree."""
    stage = 'runtime'


class UninitializedVariable(ExecutionError):
    def __init__(self, name: str):
        super().__init__(f"variable '{name}' is used before it is assigned")
        self.name = name


class TypeMismatch(ExecutionError):
    def __init__(self, operator: str, left: Any, right: Any):
        super().__init__(f"unsupported operands for {operator}: {left} and {right}")
        self.operator = operator
        self.left = left
        self.right = right


class DivisionByZero(ExecutionError):
    def __init__(self, operator: str):
        super().__init__(f"division by zero in {operator}")
        self.operator = operator


class UnknownOperator(ExecutionError):
    def __init__(self, operator: str):
        super().__init__(f"unknown operator {operator}")
        self.operator = operator


class NumberOutOfRange(LexError):
    def __init__(self, lexeme: str, line: int, column: int):
        shown = lexeme if len(lexeme) <= 20 else f"{lexeme[:17]}..."
        super().__init__(f"numeric literal {shown} at {line}:{column} is out of range")
        self.line = line
        self.column = column


class ArithmeticOverflow(ExecutionError):
    def __init__(self, operator: str):
        super().__init__(f"result of {operator} is too large for a REAL")
        self.operator = operator


class NestingTooDeep(InterpretError):
    """The tree is nested deeper than the stage can walk."""

    def __init__(self, stage: str):
        super().__init__(f"program is nested too deeply for the {stage} stage")
        self.stage = stage
