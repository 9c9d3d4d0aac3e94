from typing import Dict, ItemsView

from .errors import UninitializedVariable
from .types import RuntimeValue


class RuntimeEnvironment:
    """Flat mapping from variable names to their current runtime values.

    Procedures are never called, so a single scope is enough at run time.
    Reading a name that has not been assigned yet is an error.
    """
    def __init__(self):
        self.values: Dict[str, RuntimeValue] = {}

    def get(self, name: str) -> RuntimeValue:
        if name in self.values:
            return self.values[name]
        raise UninitializedVariable(name)

    def set(self, name: str, value: RuntimeValue):
        self.values[name] = value

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def __len__(self) -> int:
        return len(self.values)

    def items(self) -> ItemsView[str, RuntimeValue]:
        return self.values.items()

    def as_dict(self) -> Dict[str, RuntimeValue]:
        return dict(self.values)

    def __str__(self) -> str:
        return '\n'.join(f"{name} = {value}" for name, value in self.values.items())
