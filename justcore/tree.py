"""S-expression trees for describing expected parse results."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class Tree:
    """Either an atom holding text or a list of child trees."""

    value: str | tuple[Tree, ...]

    @property
    def is_atom(self) -> bool:
        return isinstance(self.value, str)

    @classmethod
    def atom(cls, text: str) -> Tree:
        return cls(str(text))

    @classmethod
    def list(cls, children: Iterable[Tree | str]) -> Tree:
        return cls(tuple(_to_tree(child) for child in children))

    @classmethod
    def string(cls, contents: str) -> Tree:
        """Return an atom holding ``contents`` in double quotes."""
        return cls.atom(f'"{contents}"')

    def _children(self) -> tuple[Tree, ...]:
        return (self,) if self.is_atom else self.value

    def push(self, tree: Tree | str) -> Tree:
        """Return a list of this tree's children followed by ``tree``."""
        return Tree(self._children() + (_to_tree(tree),))

    def extend(self, tail: Iterable[Tree | str]) -> Tree:
        """Return a list of this tree's children followed by ``tail``."""
        return Tree(self._children() + tuple(_to_tree(child) for child in tail))

    def push_mut(self, tree: Tree | str) -> None:
        """Like ``push``, but change this tree in place."""
        self.value = self.push(tree).value

    def __str__(self) -> str:
        if self.is_atom:
            return self.value
        return "(" + " ".join(str(child) for child in self.value) + ")"


def _to_tree(value: Tree | str) -> Tree:
    return value if isinstance(value, Tree) else Tree.atom(value)