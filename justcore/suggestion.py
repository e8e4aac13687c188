"""Did-you-mean suggestions for misspelled names."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Suggestion:
    """A suggested name, and the recipe it aliases if it is an alias."""

    name: str
    target: str | None = None

    def __str__(self) -> str:
        text = f"Did you mean `{self.name}`"
        if self.target is not None:
            text += f", an alias for `{self.target}`"
        return text + "?"