"""Kinds of quoted strings and backticks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from .token_kind import TokenKind


class StringDelimiter(IntEnum):
    """The quote character that delimits a string."""

    BACKTICK = 0
    QUOTE_DOUBLE = 1
    QUOTE_SINGLE = 2


_DELIMITER_CHARS = {
    StringDelimiter.BACKTICK: "`",
    StringDelimiter.QUOTE_DOUBLE: '"',
    StringDelimiter.QUOTE_SINGLE: "'",
}


@dataclass(frozen=True, order=True)
class StringKind:
    """A string's delimiter and whether it is an indented (tripled) string."""

    delimiter_type: StringDelimiter
    indented: bool

    # Indented kinds come first so that tripled delimiters match before
    # their single-character prefixes.
    ALL: ClassVar[tuple[StringKind, ...]]

    def delimiter(self) -> str:
        """Return the opening and closing delimiter text."""
        char = _DELIMITER_CHARS[self.delimiter_type]
        return char * 3 if self.indented else char

    def delimiter_len(self) -> int:
        return len(self.delimiter())

    def token_kind(self) -> TokenKind:
        if self.delimiter_type is StringDelimiter.BACKTICK:
            return TokenKind.BACKTICK
        return TokenKind.STRING_TOKEN

    def unterminated_error_message(self) -> str:
        """Return the error message for a string of this kind left open."""
        if self.delimiter_type is StringDelimiter.BACKTICK:
            return "Unterminated backtick"
        return "Unterminated string"

    def processes_escape_sequences(self) -> bool:
        return self.delimiter_type is StringDelimiter.QUOTE_DOUBLE

    @classmethod
    def from_token_start(cls, token_start: str) -> StringKind | None:
        """Return the kind whose delimiter ``token_start`` begins with."""
        return next(
            (kind for kind in cls.ALL if token_start.startswith(kind.delimiter())),
            None,
        )


StringKind.ALL = tuple(
    StringKind(delimiter, indented)
    for delimiter in StringDelimiter
    for indented in (True, False)
)