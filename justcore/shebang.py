"""Parsing of `#!` interpreter lines."""

from __future__ import annotations

import re
from dataclasses import dataclass

_ARGUMENT_SEPARATOR = re.compile(r"[ \t]")
_PATH_SEPARATOR = re.compile(r"[/\\]")


@dataclass(frozen=True)
class Shebang:
    """An interpreter and its optional single argument."""

    interpreter: str
    argument: str | None = None

    @classmethod
    def parse(cls, line: str) -> Shebang | None:
        """Parse ``line``; return None if it is not a usable shebang line."""
        if not line.startswith("#!"):
            return None
        first_line = line[2:].split("\n", 1)[0].strip()
        pieces = _ARGUMENT_SEPARATOR.split(first_line, maxsplit=1)
        interpreter = pieces[0]
        if not interpreter:
            return None
        argument = pieces[1] if len(pieces) > 1 else None
        return cls(interpreter, argument)

    def interpreter_filename(self) -> str:
        """Return the final path component of the interpreter."""
        return _PATH_SEPARATOR.split(self.interpreter)[-1]

    def script_filename(self, recipe: str) -> str:
        """Return the file name to write the recipe's script to."""
        filename = self.interpreter_filename()
        if filename in ("cmd", "cmd.exe"):
            return f"{recipe}.bat"
        if filename in ("powershell", "powershell.exe"):
            return f"{recipe}.ps1"
        return recipe

    def include_shebang_line(self) -> bool:
        """Return whether the shebang line belongs in the written script."""
        return self.interpreter_filename() not in ("cmd", "cmd.exe")