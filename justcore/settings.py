"""Justfile settings and the shell they select."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from .string_literal import StringLiteral


class ShellConfig(Protocol):
    """The parts of the run configuration that choose a shell."""

    shell: str
    shell_args: list[str]
    shell_present: bool


@dataclass(frozen=True)
class Shell:
    """A shell set in the justfile: a command and its arguments."""

    command: StringLiteral
    arguments: tuple[StringLiteral, ...] = ()


@dataclass
class Settings:
    """Settings collected from a justfile's `set` statements."""

    dotenv_load: bool | None = None
    export: bool = False
    positional_arguments: bool = False
    shell: Shell | None = field(default=None)

    def _uses_own_shell(self, config: ShellConfig) -> bool:
        return self.shell is not None and not config.shell_present

    def shell_binary(self, config: ShellConfig) -> str:
        """Return the shell to run, preferring one given on the command line."""
        if self._uses_own_shell(config):
            return self.shell.command.cooked
        return config.shell

    def shell_arguments(self, config: ShellConfig) -> list[str]:
        """Return the arguments passed to the shell before the command."""
        if self._uses_own_shell(config):
            return [argument.cooked for argument in self.shell.arguments]
        return list(config.shell_args)

    def shell_command(self, config: ShellConfig) -> list[str]:
        """Return the shell's argument vector, binary first."""
        return [self.shell_binary(config), *self.shell_arguments(config)]