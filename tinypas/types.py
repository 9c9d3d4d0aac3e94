"""Type definitions and runtime values for the Pascal subset.

`BuiltinType` enumerates the primitive types a declaration may name.
`RuntimeValue` and its variants `Nil`, `Int` and `Real` are the tagged
results the evaluator produces. Arithmetic is only defined between like
variants; `Nil` behaves as an identity element for every binary operator.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from .errors import ArithmeticOverflow, DivisionByZero, TypeMismatch


class BuiltinType(Enum):
    INTEGER = 'INTEGER'
    REAL = 'REAL'

    def __str__(self) -> str:
        return self.value


def _to_float(value: int, operator: str) -> float:
    try:
        return float(value)
    except OverflowError:
        raise ArithmeticOverflow(operator) from None


class RuntimeValue:
    """Common arithmetic for the tagged runtime values."""

    def _combine(self, other: Any, operator: str,
                 int_op: Callable[[int, int], int],
                 real_op: Callable[[float, float], float]) -> RuntimeValue:
        if not isinstance(other, RuntimeValue):
            return NotImplemented
        if isinstance(self, Nil):
            return other
        if isinstance(other, Nil):
            return self
        if type(self) is not type(other):
            raise TypeMismatch(operator, self, other)
        if isinstance(self, Int):
            return Int(int_op(self.value, other.value))
        return Real(real_op(self.value, other.value))

    def __add__(self, other: Any) -> RuntimeValue:
        return self._combine(other, '+', lambda a, b: a + b, lambda a, b: a + b)

    def __sub__(self, other: Any) -> RuntimeValue:
        return self._combine(other, '-', lambda a, b: a - b, lambda a, b: a - b)

    def __mul__(self, other: Any) -> RuntimeValue:
        return self._combine(other, '*', lambda a, b: a * b, lambda a, b: a * b)

    def __truediv__(self, other: Any) -> RuntimeValue:
        if not isinstance(other, RuntimeValue):
            return NotImplemented
        if isinstance(self, Nil) or isinstance(other, Nil):
            result = other if isinstance(self, Nil) else self
            return Real(_to_float(result.value, '/')) if isinstance(result, Int) else result
        if type(self) is not type(other):
            raise TypeMismatch('/', self, other)
        if other.value == 0:
            raise DivisionByZero('/')
        try:
            return Real(self.value / other.value)
        except OverflowError:
            raise ArithmeticOverflow('/') from None

    def div(self, other: RuntimeValue) -> RuntimeValue:
        """Integer division truncating toward zero (the DIV operator)."""
        if isinstance(self, Nil):
            return other
        if isinstance(other, Nil):
            return self
        if not (isinstance(self, Int) and isinstance(other, Int)):
            raise TypeMismatch('DIV', self, other)
        if other.value == 0:
            raise DivisionByZero('DIV')
        quotient = abs(self.value) // abs(other.value)
        if (self.value < 0) != (other.value < 0):
            quotient = -quotient
        return Int(quotient)

    def __neg__(self) -> RuntimeValue:
        if isinstance(self, Int):
            return Int(-self.value)
        if isinstance(self, Real):
            return Real(-self.value)
        return self

    def __pos__(self) -> RuntimeValue:
        return self


@dataclass(frozen=True)
class Nil(RuntimeValue):
    def __str__(self) -> str:
        return 'Nil'


@dataclass(frozen=True)
class Int(RuntimeValue):
    value: int

    def __str__(self) -> str:
        try:
            return f"Int({self.value})"
        except ValueError:
            # Too many digits for int-to-str conversion.
            return f"Int(<{self.value.bit_length()}-bit integer>)"


@dataclass(frozen=True)
class Real(RuntimeValue):
    value: float

    def __str__(self) -> str:
        return f"Real({self.value})"


NIL = Nil()

