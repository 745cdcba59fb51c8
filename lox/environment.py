from typing import Any, Dict, Optional

from lox.errors import LoxRuntimeError
from lox.tokens import Token


class Environment:
    """Represents a scope frame mapping variable names to values.

    Frames form a chain through `enclosing`; lookups and assignments walk it
    from the innermost frame outwards. A frame only points at its parent,
    never at its children.
    """
    def __init__(self, enclosing: Optional['Environment'] = None):
        self.enclosing = enclosing
        self.values: Dict[str, Any] = {}

    def define(self, name: str, value: Any):
        # redefinition in the same frame silently replaces the old binding
        self.values[name] = value

    def get(self, name: Token) -> Any:
        env: Optional[Environment] = self
        while env is not None:
            if name.lexeme in env.values:
                return env.values[name.lexeme]
            env = env.enclosing
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    def assign(self, name: Token, value: Any):
        env: Optional[Environment] = self
        while env is not None:
            if name.lexeme in env.values:
                env.values[name.lexeme] = value
                return
            env = env.enclosing
        raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    @property
    def depth(self) -> int:
        """Number of frames between this one and the global frame."""
        depth = 0
        env = self.enclosing
        while env is not None:
            depth += 1
            env = env.enclosing
        return depth
