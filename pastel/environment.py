from typing import Dict, Optional

from pastel.types import Value, default_value


class Environment:
    """The single global scope of a Pastel program.

    Names are added by :meth:`declare` only; assignment through :meth:`set`
    overwrites an existing entry. Entries are never removed.
    """
    def __init__(self):
        self.values: Dict[str, Value] = {}

    def declare(self, name: str, type_name: str) -> Value:
        value = default_value(type_name)
        self.values[name] = value
        return value

    def exists(self, name: str) -> bool:
        return name in self.values

    def get(self, name: str) -> Optional[Value]:
        return self.values.get(name)

    def set(self, name: str, value: Value) -> None:
        self.values[name] = value
