"""Symbols and scoped symbol tables used by the semantic pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple, Union

from .types import BuiltinType


@dataclass(frozen=True)
class BuiltinTypeSymbol:
    type: BuiltinType

    @property
    def name(self) -> str:
        return self.type.value

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class VariableSymbol:
    name: str
    type: BuiltinTypeSymbol

    def __str__(self) -> str:
        return f"{self.name}: {self.type}"


@dataclass(frozen=True)
class ProcedureSymbol:
    name: str
    params: Tuple[VariableSymbol, ...] = ()

    def __str__(self) -> str:
        params = '; '.join(str(p) for p in self.params)
        return f"PROCEDURE {self.name}({params})"


Symbol = Union[BuiltinTypeSymbol, VariableSymbol, ProcedureSymbol]


class SymbolTable:
    """Name to symbol mapping for one scope.

    Each table is seeded with the builtin type symbols. Lookups fall back
    to the enclosing scope unless `current_scope_only` is set.
    """

    def __init__(self, scope_name: str, scope_level: int,
                 enclosing_scope: Optional['SymbolTable'] = None):
        self.scope_name = scope_name
        self.scope_level = scope_level
        self.enclosing_scope = enclosing_scope
        self.builtins: Dict[str, BuiltinTypeSymbol] = {}
        self.symbols: Dict[str, Symbol] = {}
        self._initialise_builtins()

    def _initialise_builtins(self) -> None:
        for builtin in BuiltinType:
            self.builtins[builtin.value] = BuiltinTypeSymbol(builtin)

    def builtin(self, name: str) -> Optional[BuiltinTypeSymbol]:
        return self.builtins.get(name)

    def insert(self, symbol: Symbol) -> None:
        self.symbols[symbol.name] = symbol

    def lookup(self, name: str, current_scope_only: bool = False) -> Optional[Symbol]:
        if name in self.symbols:
            return self.symbols[name]
        if name in self.builtins:
            return self.builtins[name]
        if current_scope_only or self.enclosing_scope is None:
            return None
        return self.enclosing_scope.lookup(name)

    def __contains__(self, name: str) -> bool:
        return self.lookup(name) is not None

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.symbols.values())

    def __len__(self) -> int:
        return len(self.symbols)

    def __str__(self) -> str:
        enclosing = self.enclosing_scope.scope_name if self.enclosing_scope is not None else None
        lines = [
            f"Scope {self.scope_name}, Level {self.scope_level}, Enclosing {enclosing}",
            'Builtin types',
        ]
        lines += [f"  {name}" for name in self.builtins]
        lines.append('User symbols')
        lines += [f"  {name} -> {symbol}" for name, symbol in self.symbols.items()]
        return '\n'.join(lines)
