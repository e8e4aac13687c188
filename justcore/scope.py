"""Nested scopes of variable bindings."""

from __future__ import annotations

from dataclasses import dataclass

from .table import Table


@dataclass(frozen=True)
class Binding:
    """A name bound to a value, optionally exported to the environment."""

    export: bool
    name: str
    value: str

    @property
    def key(self) -> str:
        return self.name


class Scope:
    """Bindings of one scope, falling back to a parent scope on lookup."""

    def __init__(self, parent: Scope | None = None) -> None:
        self.parent = parent
        self._bindings: Table[Binding] = Table()

    def child(self) -> Scope:
        """Return a new empty scope whose parent is this one."""
        return Scope(self)

    def bind(self, export: bool, name: str, value: str) -> None:
        self._bindings.insert(Binding(export, name, value))

    def bound(self, name: str) -> bool:
        """Return whether ``name`` is bound in this scope itself."""
        return name in self._bindings

    def value(self, name: str) -> str | None:
        """Look ``name`` up here and then in each enclosing scope."""
        scope: Scope | None = self
        while scope is not None:
            binding = scope._bindings.get(name)
            if binding is not None:
                return binding.value
            scope = scope.parent
        return None

    def bindings(self) -> list[Binding]:
        """Return this scope's own bindings in name order."""
        return self._bindings.values()

    def names(self) -> list[str]:
        """Return the names bound in this scope itself, in order."""
        return self._bindings.keys()