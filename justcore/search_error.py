"""Errors raised while looking for a justfile."""

from __future__ import annotations

from pathlib import Path

from .formatting import and_ticked


class SearchError(Exception):
    """A justfile could not be located."""


class MultipleCandidatesError(SearchError):
    """More than one file in a directory could be the justfile."""

    def __init__(self, candidates: list[Path]) -> None:
        self.candidates = [Path(candidate) for candidate in candidates]
        directory = self.candidates[0].parent
        names = and_ticked(candidate.name for candidate in self.candidates)
        super().__init__(f"Multiple candidate justfiles found in `{directory}`: {names}")


class SearchIoError(SearchError):
    """A directory could not be read during the search."""

    def __init__(self, directory: Path, io_error: OSError) -> None:
        self.directory = Path(directory)
        self.io_error = io_error
        super().__init__(f"I/O error reading directory `{self.directory}`: {io_error}")


class NotFoundError(SearchError):
    """No justfile exists in the directory or any of its ancestors."""

    def __init__(self) -> None:
        super().__init__("No justfile found")


class JustfileHadNoParentError(SearchError):
    """The justfile path has no parent to use as working directory."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"Justfile path had no parent: {self.path}")