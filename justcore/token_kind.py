"""Kinds of lexical tokens."""

from __future__ import annotations

from enum import Enum


class TokenKind(Enum):
    """A token kind; its value is the human-readable name used in errors."""

    ASTERISK = "'*'"
    AT = "'@'"
    BACKTICK = "backtick"
    BANG_EQUALS = "'!='"
    BRACE_L = "'{'"
    BRACE_R = "'}'"
    BRACKET_L = "'['"
    BRACKET_R = "']'"
    COLON = "':'"
    COLON_EQUALS = "':='"
    COMMA = "','"
    COMMENT = "comment"
    DEDENT = "dedent"
    DOLLAR = "'$'"
    EOF = "end of file"
    EOL = "end of line"
    EQUALS = "'='"
    EQUALS_EQUALS = "'=='"
    IDENTIFIER = "identifier"
    INDENT = "indent"
    INTERPOLATION_END = "'}}'"
    INTERPOLATION_START = "'{{'"
    PAREN_L = "'('"
    PAREN_R = "')'"
    PLUS = "'+'"
    STRING_TOKEN = "string"
    TEXT = "command text"
    UNSPECIFIED = "unspecified"
    WHITESPACE = "whitespace"

    def __str__(self) -> str:
        return self.value

    def _position(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TokenKind):
            return NotImplemented
        return self._position() < other._position()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TokenKind):
            return NotImplemented
        return self._position() <= other._position()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TokenKind):
            return NotImplemented
        return self._position() > other._position()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TokenKind):
            return NotImplemented
        return self._position() >= other._position()