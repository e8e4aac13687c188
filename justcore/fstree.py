"""Building trees of files and directories on disk."""

from __future__ import annotations

import tempfile
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path
from typing import Union

Entries = Mapping[str, Union[str, "Entries"]]


def _instantiate_entry(path: Path, entry: str | Entries) -> None:
    if isinstance(entry, str):
        with open(path, "w", encoding="utf-8", newline="") as file:
            file.write(entry)
    else:
        path.mkdir()
        instantiate(path, entry)


def instantiate(base: Path, entries: Entries) -> None:
    """Create ``entries`` under ``base``.

    A string value becomes a file with that content; a mapping becomes a
    directory holding its own entries.
    """
    base = Path(base)
    for name, entry in entries.items():
        _instantiate_entry(base / name, entry)


@contextmanager
def tmptree(entries: Entries) -> Iterator[Path]:
    """Create ``entries`` in a fresh temporary directory and yield its path.

    The directory is removed on exit.
    """
    with tempfile.TemporaryDirectory(prefix="just-test-tempdir") as directory:
        path = Path(directory)
        instantiate(path, entries)
        yield path