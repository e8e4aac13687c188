"""A mapping of items by their own key, iterated in key order."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from operator import attrgetter
from typing import Generic, TypeVar

V = TypeVar("V")


class Table(Generic[V]):
    """Items indexed by a key taken from each item, kept in sorted key order."""

    def __init__(
        self,
        values: Iterable[V] = (),
        *,
        key: Callable[[V], str] = attrgetter("key"),
    ) -> None:
        self._key = key
        self._map: dict[str, V] = {}
        for value in values:
            self.insert(value)

    def insert(self, value: V) -> None:
        """Add ``value``, replacing any item with the same key."""
        self._map[self._key(value)] = value

    def get(self, key: str) -> V | None:
        return self._map.get(key)

    def keys(self) -> list[str]:
        return sorted(self._map)

    def values(self) -> list[V]:
        return [self._map[key] for key in self.keys()]

    def items(self) -> list[tuple[str, V]]:
        return [(key, self._map[key]) for key in self.keys()]

    def pop(self) -> V | None:
        """Remove and return the item with the smallest key, if any."""
        if not self._map:
            return None
        return self._map.pop(min(self._map))

    def remove(self, key: str) -> V | None:
        """Remove and return the item with ``key``, if any."""
        return self._map.pop(key, None)

    def __getitem__(self, key: str) -> V:
        return self._map[key]

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __len__(self) -> int:
        return len(self._map)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self._map == other._map

    def __repr__(self) -> str:
        return f"Table({self.values()!r})"