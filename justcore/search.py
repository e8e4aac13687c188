"""Locating the justfile and the directory to run recipes in."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .search_config import (
    FromInvocationDirectory,
    FromSearchDirectory,
    SearchConfig,
    WithJustfile,
    WithJustfileAndWorkingDirectory,
)
from .search_error import (
    JustfileHadNoParentError,
    MultipleCandidatesError,
    NotFoundError,
    SearchIoError,
)

FILENAME = "justfile"
PROJECT_ROOT_CHILDREN = (".bzr", ".git", ".hg", ".svn", "_darcs")


def _ancestors(directory: Path) -> Iterator[Path]:
    yield directory
    yield from directory.parents


def _list_directory(directory: Path) -> list[str]:
    try:
        return os.listdir(directory)
    except OSError as io_error:
        raise SearchIoError(directory, io_error) from io_error


def _is_justfile_name(name: str) -> bool:
    return name.isascii() and name.lower() == FILENAME


def find_justfile(directory: Path) -> Path:
    """Return the justfile in ``directory`` or its nearest ancestor holding one.

    The file name is matched ignoring ASCII case.
    """
    for ancestor in _ancestors(Path(directory)):
        candidates = [
            ancestor / name for name in _list_directory(ancestor) if _is_justfile_name(name)
        ]
        if len(candidates) == 1:
            return candidates[0]
        if candidates:
            raise MultipleCandidatesError(candidates)
    raise NotFoundError()


def clean(invocation_directory: Path, path: Path) -> Path:
    """Join ``path`` onto ``invocation_directory`` and resolve `..` lexically.

    A `..` that cannot go further up is dropped.
    """
    joined = Path(invocation_directory) / path
    root = joined.anchor
    parts = joined.parts[1:] if root else joined.parts
    if root == "//" and os.name != "nt":
        root = "/"

    stack: list[str] = []
    for part in parts:
        if part == "..":
            if stack:
                stack.pop()
        else:
            stack.append(part)

    return Path(root).joinpath(*stack) if root else Path(*stack)


def project_root(directory: Path) -> Path:
    """Return the nearest ancestor holding a version-control marker.

    If none holds one, ``directory`` itself is returned.
    """
    directory = Path(directory)
    for ancestor in _ancestors(directory):
        if any(name in PROJECT_ROOT_CHILDREN for name in _list_directory(ancestor)):
            return ancestor
    return directory


def _working_directory_from_justfile(justfile: Path) -> Path:
    parent = justfile.parent
    if parent == justfile:
        raise JustfileHadNoParentError(justfile)
    return parent


@dataclass(frozen=True)
class Search:
    """The justfile to use and the directory to run its recipes in."""

    justfile: Path
    working_directory: Path

    @classmethod
    def _from_justfile(cls, justfile: Path) -> Search:
        return cls(justfile, _working_directory_from_justfile(justfile))

    @classmethod
    def _explicit(
        cls, search_config: SearchConfig, invocation_directory: Path
    ) -> Search | None:
        match search_config:
            case WithJustfile(justfile=justfile):
                return cls._from_justfile(clean(invocation_directory, justfile))
            case WithJustfileAndWorkingDirectory(
                justfile=justfile, working_directory=working_directory
            ):
                return cls(
                    clean(invocation_directory, justfile),
                    clean(invocation_directory, working_directory),
                )
        return None

    @classmethod
    def find(cls, search_config: SearchConfig, invocation_directory: Path) -> Search:
        """Locate an existing justfile as ``search_config`` directs."""
        invocation_directory = Path(invocation_directory)
        match search_config:
            case FromInvocationDirectory():
                return cls._from_justfile(find_justfile(invocation_directory))
            case FromSearchDirectory(search_directory=search_directory):
                start = clean(invocation_directory, search_directory)
                return cls._from_justfile(find_justfile(start))
        explicit = cls._explicit(search_config, invocation_directory)
        if explicit is None:
            raise TypeError(f"unknown search configuration: {search_config!r}")
        return explicit

    @classmethod
    def init(cls, search_config: SearchConfig, invocation_directory: Path) -> Search:
        """Choose where a new justfile should be created."""
        invocation_directory = Path(invocation_directory)
        match search_config:
            case FromInvocationDirectory():
                working_directory = project_root(invocation_directory)
                return cls(working_directory / FILENAME, working_directory)
            case FromSearchDirectory(search_directory=search_directory):
                start = clean(invocation_directory, search_directory)
                working_directory = project_root(start)
                return cls(working_directory / FILENAME, working_directory)
        explicit = cls._explicit(search_config, invocation_directory)
        if explicit is None:
            raise TypeError(f"unknown search configuration: {search_config!r}")
        return explicit