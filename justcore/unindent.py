"""Strip the common leading indentation from a block of text."""

from __future__ import annotations

import os
import re

_INDENTATION = re.compile(r"[ \t]*")
_BLANK_CHARS = frozenset(" \t\r\n")


def _split_lines(text: str) -> list[str]:
    """Split ``text`` into lines, keeping each line's trailing newline."""
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def indentation(line: str) -> str:
    """Return the leading run of spaces and tabs of ``line``."""
    return _INDENTATION.match(line).group()


def blank(line: str) -> bool:
    """Return True if ``line`` holds only spaces, tabs and line endings."""
    return all(c in _BLANK_CHARS for c in line)


def common(a: str, b: str) -> str:
    """Return the longest common prefix of ``a`` and ``b``."""
    return os.path.commonprefix([a, b])


def unindent(text: str) -> str:
    """Remove the indentation shared by all non-blank lines of ``text``.

    A blank first or last line is dropped; blank lines in between become
    bare newlines.
    """
    lines = _split_lines(text)

    shared: str | None = None
    for line in lines:
        if blank(line):
            continue
        line_indentation = indentation(line)
        shared = line_indentation if shared is None else common(shared, line_indentation)
    prefix_length = len(shared or "")

    last = len(lines) - 1
    pieces = []
    for i, line in enumerate(lines):
        if blank(line):
            pieces.append("\n" if 0 < i < last else "")
        else:
            pieces.append(line[prefix_length:])
    return "".join(pieces)