"""String literals as written and as evaluated."""

from __future__ import annotations

from dataclasses import dataclass

from .string_kind import StringKind


@dataclass(frozen=True)
class StringLiteral:
    """A string literal: its kind, its raw source text and its cooked value."""

    kind: StringKind
    raw: str
    cooked: str

    def __str__(self) -> str:
        delimiter = self.kind.delimiter()
        return f"{delimiter}{self.raw}{delimiter}"