from __future__ import annotations

from typing import Any, Dict, Optional

from lox.errors import LoxRuntimeError
from lox.tokens import Token


class Environment:
    """A scope mapping names to values, linked to its enclosing scope.

    A stored value of ``None`` means the variable was declared without an
    initializer. Lookups and assignments walk outward through ``parent``
    until the name is found; a child scope never owns its parent.
    """
    def __init__(self, parent: Optional['Environment'] = None):
        self.parent = parent
        self.values: Dict[str, Any] = {}

    def child(self) -> 'Environment':
        return Environment(parent=self)

    def define(self, name: str, value: Any):
        # redefinition in the same scope is allowed
        self.values[name] = value

    def get(self, name: Token) -> Any:
        env: Optional[Environment] = self
        while env is not None:
            if name.lexeme in env.values:
                return env.values[name.lexeme]
            env = env.parent
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    def assign(self, name: Token, value: Any):
        env: Optional[Environment] = self
        while env is not None:
            if name.lexeme in env.values:
                env.values[name.lexeme] = value
                return
            env = env.parent
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    @property
    def depth(self) -> int:
        """Number of enclosing scopes above this one."""
        depth = 0
        env = self.parent
        while env is not None:
            depth += 1
            env = env.parent
        return depth
