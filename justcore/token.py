"""Lexical tokens and the source excerpts shown with errors."""

from __future__ import annotations

from dataclasses import dataclass

from wcwidth import wcwidth

from .token_kind import TokenKind


def _source_lines(src: str) -> list[str]:
    """Split ``src`` into lines without terminators; no empty final line."""
    parts = src.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _char_width(c: str) -> int:
    """Return the display width of ``c``, or 0 for non-printable characters."""
    return max(wcwidth(c), 0)


@dataclass(frozen=True)
class Token:
    """A token: a span of the source text with its position and kind.

    Offsets, lengths and columns are counted in characters; ``line`` is
    zero-based.
    """

    offset: int
    length: int
    line: int
    column: int
    src: str
    kind: TokenKind

    def lexeme(self) -> str:
        """Return the text of the source that this token spans."""
        return self.src[self.offset : self.offset + self.length]

    def render_context(self, prefix: str = "", suffix: str = "") -> str:
        """Return the source line of this token with a caret line under it.

        ``prefix`` and ``suffix`` wrap the carets, for example to colour them.
        Tabs are shown as four spaces.
        """
        width = self.length or 1
        line_number = self.line + 1
        lines = _source_lines(self.src)

        if self.line >= len(lines):
            if self.offset != len(self.src):
                return f"internal error: Error has invalid line number: {line_number}"
            return ""

        space_column = 0
        space_width = 0
        shown = []
        for i, c in enumerate(lines[self.line]):
            if c == "\t":
                shown.append("    ")
                char_width = 4
            else:
                shown.append(c)
                char_width = _char_width(c)
            if i < self.column:
                space_column += char_width
            elif i < self.column + width:
                space_width += char_width

        pad = " " * len(str(line_number))
        carets = "^" * max(space_width, 1)
        return (
            f"{pad} |\n"
            f"{line_number} | {''.join(shown)}\n"
            f"{pad} | {' ' * space_column}{prefix}{carets}{suffix}"
        )