"""How the justfile is to be searched for."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class FromInvocationDirectory:
    """Search upwards from the invocation directory; run where the justfile is."""


@dataclass(frozen=True)
class FromSearchDirectory:
    """Search upwards from ``search_directory``; run where the justfile is."""

    search_directory: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "search_directory", Path(self.search_directory))


@dataclass(frozen=True)
class WithJustfile:
    """Use the given justfile and run in the directory containing it."""

    justfile: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "justfile", Path(self.justfile))


@dataclass(frozen=True)
class WithJustfileAndWorkingDirectory:
    """Use the given justfile and the given working directory."""

    justfile: Path
    working_directory: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "justfile", Path(self.justfile))
        object.__setattr__(self, "working_directory", Path(self.working_directory))


SearchConfig = Union[
    FromInvocationDirectory,
    FromSearchDirectory,
    WithJustfile,
    WithJustfileAndWorkingDirectory,
]