from typing import Dict

from bscript.errors import BScriptError, ErrorVal
from bscript.types import Value, check_value


class Environment:
    """Variable bindings for one run. There is a single flat scope."""
    def __init__(self):
        self.values: Dict[str, Value] = {}

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def __len__(self) -> int:
        return len(self.values)

    def get(self, name: str) -> Value:
        if name in self.values:
            return self.values[name]
        raise BScriptError(ErrorVal('UndefinedVariableError', f'use of undefined variable {name}'))

    def set(self, name: str, value: Value):
        # Redeclaring a name overwrites it
        check_value(value)
        self.values[name] = value

    def as_dict(self) -> Dict[str, Value]:
        return dict(self.values)
