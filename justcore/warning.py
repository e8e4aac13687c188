"""Warnings shown to the user while loading a justfile."""

from __future__ import annotations

_SETTING_HINT = "    set dotenv-load := {}"

_DOTENV_LOAD_MESSAGE = "\n".join(
    [
        "A `.env` file was loaded without the `dotenv-load` setting; "
        "a future release will stop doing this by default.",
        "To keep loading `.env` files and hide this warning, add:",
        "",
        _SETTING_HINT.format("true"),
        "",
        "To stop loading `.env` files and hide this warning, add:",
        "",
        _SETTING_HINT.format("false"),
    ]
)


class DotenvLoadWarning(UserWarning):
    """A `.env` file was loaded without `dotenv-load` being set."""

    def __init__(self) -> None:
        super().__init__(_DOTENV_LOAD_MESSAGE)

    def __str__(self) -> str:
        return _DOTENV_LOAD_MESSAGE

    def render(self) -> str:
        """Return the warning as shown to the user."""
        return f"warning: {self}"