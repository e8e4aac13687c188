"""Small text helpers used when building messages."""

from __future__ import annotations

from collections.abc import Iterable

_WHITESPACE_SYMBOLS = str.maketrans({"\t": "␉", " ": "␠"})


def show_whitespace(text: str) -> str:
    """Replace spaces and tabs with visible symbols."""
    return text.translate(_WHITESPACE_SYMBOLS)


def count(noun: str, n: int) -> str:
    """Return ``noun``, pluralised unless ``n`` is one."""
    return noun if n == 1 else f"{noun}s"


def tick(value: object) -> str:
    """Enclose ``value`` in backticks."""
    return f"`{value}`"


def _join(items: Iterable[object], conjunction: str) -> str:
    ticked = [tick(item) for item in items]
    if len(ticked) <= 1:
        return "".join(ticked)
    if len(ticked) == 2:
        return f"{ticked[0]} {conjunction} {ticked[1]}"
    return f"{', '.join(ticked[:-1])}, {conjunction} {ticked[-1]}"


def and_ticked(items: Iterable[object]) -> str:
    """Join ticked items into an English list with 'and'."""
    return _join(items, "and")


def or_ticked(items: Iterable[object]) -> str:
    """Join ticked items into an English list with 'or'."""
    return _join(items, "or")