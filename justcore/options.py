"""Verbosity and colour options."""

from __future__ import annotations

from enum import Enum


class Verbosity(Enum):
    """How much is printed while running."""

    QUIET = 0
    TACITURN = 1
    LOQUACIOUS = 2
    GRANDILOQUENT = 3

    @classmethod
    def from_flag_occurrences(cls, occurrences: int) -> Verbosity:
        """Map the number of verbose flags given to a verbosity."""
        if occurrences == 0:
            return cls.TACITURN
        if occurrences == 1:
            return cls.LOQUACIOUS
        return cls.GRANDILOQUENT

    def quiet(self) -> bool:
        return self is Verbosity.QUIET

    def loud(self) -> bool:
        return not self.quiet()

    def loquacious(self) -> bool:
        return self in (Verbosity.LOQUACIOUS, Verbosity.GRANDILOQUENT)

    def grandiloquent(self) -> bool:
        return self is Verbosity.GRANDILOQUENT


class UseColor(Enum):
    """When to colour output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"