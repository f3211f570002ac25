from typing import Dict, List


class VariableStore:
    """Named integer counters. Absent names read as 0."""

    DEFAULT = 0

    def __init__(self):
        # Insertion-ordered; listing order is not meaningful to programs
        self._values: Dict[str, int] = {}

    def get(self, name: str) -> int:
        return self._values.get(name, self.DEFAULT)

    def increment(self, name: str) -> int:
        value = self.get(name) + 1
        self._values[name] = value
        return value

    def decrement(self, name: str) -> int:
        # No floor at zero: negative counters are kept as-is
        value = self.get(name) - 1
        self._values[name] = value
        return value

    def ensure(self, name: str):
        """Create the variable with the default value if it is absent."""
        self._values.setdefault(name, self.DEFAULT)

    def clear(self, name: str):
        """Remove the variable; later reads see the default again."""
        self._values.pop(name, None)

    def reset(self):
        self._values.clear()

    def snapshot(self) -> Dict[str, int]:
        return dict(self._values)

    def format_lines(self) -> List[str]:
        return [f"{name}= {value}" for name, value in self._values.items()]

    def __contains__(self, name) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self):
        return f"VariableStore({self._values!r})"
