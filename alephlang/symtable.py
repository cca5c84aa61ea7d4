"""Nested scopes of named symbols."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from .values import AlephError, Kind, Value, format_value

CAPACITY = 9997
"""The most symbols a single scope can hold."""


@dataclass
class Symbol:
    """A named slot in a scope: a variable value or a function definition."""

    name: str
    value: Optional[Value] = None
    kind: Optional[Kind] = None
    body: Any = None
    params: Any = None
    is_function: bool = False


class ScopeStack:
    """A stack of scopes, searched from the innermost outwards.

    The stack starts with no scope at all; call :meth:`enter` (or use
    :meth:`scope`) before adding symbols.
    """

    def __init__(self) -> None:
        self._scopes: List[Dict[str, Symbol]] = []

    @property
    def depth(self) -> int:
        """Number of scopes currently open."""
        return len(self._scopes)

    def enter(self) -> None:
        """Open a new innermost scope."""
        self._scopes.append({})

    def exit(self) -> None:
        """Close the innermost scope, discarding its symbols."""
        if not self._scopes:
            raise AlephError("cannot leave the global scope: no scope is open")
        self._scopes.pop()

    @contextmanager
    def scope(self) -> Iterator["ScopeStack"]:
        """Open a scope for the duration of a with block."""
        self.enter()
        try:
            yield self
        finally:
            self.exit()

    def add(self, name: str) -> Symbol:
        """Create a symbol in the innermost scope.

        Raises AlephError when no scope is open, when the name already
        exists in the innermost scope, or when the scope is full.
        """
        if not self._scopes:
            raise AlephError("no current scope to add a symbol to")
        current = self._scopes[-1]
        if name in current:
            raise AlephError(f"redefinition of {name!r} in the same scope")
        if len(current) >= CAPACITY:
            raise AlephError("symbol table full")
        symbol = Symbol(name)
        current[name] = symbol
        return symbol

    def find(self, name: str) -> Optional[Symbol]:
        """The innermost symbol with this name, or None."""
        for table in reversed(self._scopes):
            symbol = table.get(name)
            if symbol is not None:
                return symbol
        return None

    def lookup(self, name: str) -> Symbol:
        """The symbol with this name, created in the innermost scope if absent."""
        symbol = self.find(name)
        if symbol is None:
            symbol = self.add(name)
        return symbol

    def dump(self) -> str:
        """A readable listing of every scope, innermost first."""
        parts = ["\n--- Pila de Tablas de Simbolos ---\n"]
        for level, table in enumerate(reversed(self._scopes)):
            parts.append(f"\nAmbito Nivel tope - {level}:\n")
            parts.append("---------------------\n")
            if not table:
                parts.append("  (Vacio)\n")
            for symbol in table.values():
                parts.append(f"  - Simbolo: '{symbol.name}'\n")
                parts.append("    Valor: ")
                if symbol.is_function:
                    parts.append("<FUNCTION>")
                elif symbol.value is not None:
                    parts.append(format_value(symbol.value))
                else:
                    parts.append("<sin valor>")
                parts.append("\n")
        parts.append("\n----------------------------------\n")
        return "".join(parts)