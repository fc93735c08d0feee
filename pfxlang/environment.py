"""Variable environment.

One flat namespace per script run. Names are only ever added or rebound by
``let``; nothing is removed.
"""

from pfxlang.exceptions import UndefinedIdentifierException
from pfxlang.values import Value


class Environment:
    """Mapping of variable names to values for a single run."""

    def __init__(self, file: str | None = None):
        self.vars: dict[str, Value] = {}
        self.file = file

    def lookup(self, name: str, line: int | None = None) -> Value:
        """
        Return the value bound to ``name``.

        Raises:
            UndefinedIdentifierException: If ``name`` was never bound.
        """
        if name not in self.vars:
            raise UndefinedIdentifierException(name, line, self.file)
        return self.vars[name]

    def bind(self, name: str, value: Value) -> None:
        """Create or overwrite the binding for ``name``."""
        self.vars[name] = value

    def __contains__(self, name: object) -> bool:
        return name in self.vars
