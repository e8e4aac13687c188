"""Errors raised while running recipes and evaluating a justfile."""

from __future__ import annotations

import os
from abc import ABCMeta, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field

from .formatting import and_ticked, count, or_ticked, tick
from .suggestion import Suggestion
from .token import Token

EXIT_FAILURE = 1


@dataclass(frozen=True)
class OutputError:
    """Why running a command for its output failed.

    At most one field is set; with none set the failure is unknown.
    """

    code: int | None = None
    signal: int | None = None
    io_error: OSError | None = None
    utf8_error: UnicodeDecodeError | None = None

    def __post_init__(self) -> None:
        causes = (self.code, self.signal, self.io_error, self.utf8_error)
        if sum(cause is not None for cause in causes) > 1:
            raise ValueError("an output error has at most one cause")


def _launch_failure(io_error: OSError) -> str | None:
    if isinstance(io_error, FileNotFoundError):
        return "could not find"
    if isinstance(io_error, PermissionError):
        return "could not run"
    return None


def _with_suggestion(text: str, suggestion: Suggestion | None) -> str:
    return text if suggestion is None else f"{text}\n{suggestion}"


class RunError(Exception, metaclass=ABCMeta):
    """An error raised while running a justfile."""

    def code(self) -> int:
        """Return the exit status the program should end with."""
        return EXIT_FAILURE

    @abstractmethod
    def message(self) -> str:
        """Return the error message, without the source excerpt."""

    def context(self) -> Token | None:
        """Return the token in the source that the error points at, if any."""
        return None

    def __str__(self) -> str:
        token = self.context()
        text = self.message()
        if token is not None:
            text += token.render_context()
        return text


@dataclass(eq=False)
class ArgumentCountMismatchError(RunError):
    recipe: str
    parameters: Sequence[object]
    found: int
    min: int
    max: int

    def message(self) -> str:
        got = f"Recipe `{self.recipe}` got {self.found} {count('argument', self.found)}"
        if self.min == self.max:
            only = "only " if self.min < self.found else ""
            text = f"{got} but {only}takes {self.min}"
        elif self.found < self.min:
            text = f"{got} but takes at least {self.min}"
        elif self.found > self.max:
            text = f"{got} but takes at most {self.max}"
        else:
            text = ""
        usage = "".join(f" {parameter}" for parameter in self.parameters)
        return f"{text}\nusage:\n    just {self.recipe}{usage}"


@dataclass(eq=False)
class BacktickError(RunError):
    token: Token
    output_error: OutputError

    def code(self) -> int:
        if self.output_error.code is not None:
            return self.output_error.code
        return EXIT_FAILURE

    def context(self) -> Token | None:
        return self.token

    def message(self) -> str:
        error = self.output_error
        if error.code is not None:
            return f"Backtick failed with exit code {error.code}\n"
        if error.signal is not None:
            return f"Backtick was terminated by signal {error.signal}\n"
        if error.io_error is not None:
            failure = _launch_failure(error.io_error)
            if failure is None:
                return (
                    "Backtick could not be run because of an IO error while launching "
                    f"`sh`:\n{error.io_error}"
                )
            return f"Backtick could not be run because just {failure} `sh`:\n{error.io_error}"
        if error.utf8_error is not None:
            return f"Backtick succeeded but stdout was not utf8: {error.utf8_error}\n"
        return "Backtick failed for an unknown reason\n"


@dataclass(eq=False)
class CodeError(RunError):
    recipe: str
    line_number: int | None
    exit_code: int

    def code(self) -> int:
        return self.exit_code

    def message(self) -> str:
        if self.line_number is not None:
            return (
                f"Recipe `{self.recipe}` failed on line {self.line_number} "
                f"with exit code {self.exit_code}"
            )
        return f"Recipe `{self.recipe}` failed with exit code {self.exit_code}"


@dataclass(eq=False)
class CommandInvocationError(RunError):
    binary: str | bytes | os.PathLike
    arguments: Sequence[str | bytes | os.PathLike]
    io_error: OSError

    def message(self) -> str:
        words = " ".join(tick(os.fsdecode(word)) for word in (self.binary, *self.arguments))
        return f"Failed to invoke {words}: {self.io_error}"


@dataclass(eq=False)
class CygpathError(RunError):
    recipe: str
    output_error: OutputError

    def message(self) -> str:
        error = self.output_error
        subject = f"recipe `{self.recipe}` shebang interpreter path"
        if error.code is not None:
            return f"Cygpath failed with exit code {error.code} while translating {subject}"
        if error.signal is not None:
            return f"Cygpath terminated by signal {error.signal} while translating {subject}"
        if error.io_error is not None:
            failure = _launch_failure(error.io_error)
            if failure is None:
                return f"Could not run `cygpath` executable:\n{error.io_error}"
            verb = "find" if failure == "could not find" else "run"
            return f"Could not {verb} `cygpath` executable to translate {subject}:\n{error.io_error}"
        if error.utf8_error is not None:
            return (
                f"Cygpath successfully translated {subject}, but output was not utf8: "
                f"{error.utf8_error}"
            )
        return f"Cygpath experienced an unknown failure while translating {subject}"


@dataclass(eq=False)
class DotenvError(RunError):
    dotenv_error: Exception

    def message(self) -> str:
        return f"Failed to load .env: {self.dotenv_error}\n"


@dataclass(eq=False)
class EvalUnknownVariableError(RunError):
    variable: str
    suggestion: Suggestion | None = None

    def message(self) -> str:
        text = f"Justfile does not contain variable `{self.variable}`."
        return _with_suggestion(text, self.suggestion)


@dataclass(eq=False)
class FunctionCallError(RunError):
    function: Token
    error_message: str

    def context(self) -> Token | None:
        return self.function

    def message(self) -> str:
        return f"Call to function `{self.function.lexeme()}` failed: {self.error_message}\n"


@dataclass(eq=False)
class InternalError(RunError):
    error_message: str

    def message(self) -> str:
        return (
            "Internal runtime error, this may indicate a bug in just: "
            f"{self.error_message} consider filing an issue"
        )


@dataclass(eq=False)
class RecipeIoError(RunError):
    recipe: str
    io_error: OSError

    def message(self) -> str:
        failure = _launch_failure(self.io_error)
        if failure is None:
            reason = "of an IO error while launching `sh`"
        else:
            reason = f"just {failure} `sh`"
        return f"Recipe `{self.recipe}` could not be run because {reason}:{self.io_error}\n"


@dataclass(eq=False)
class ShebangError(RunError):
    recipe: str
    command: str
    argument: str | None
    io_error: OSError

    def message(self) -> str:
        line = self.command if self.argument is None else f"{self.command} {self.argument}"
        return f"Recipe `{self.recipe}` with shebang `#!{line}` execution error: {self.io_error}"


@dataclass(eq=False)
class SignalError(RunError):
    recipe: str
    line_number: int | None
    signal: int

    def message(self) -> str:
        if self.line_number is not None:
            return (
                f"Recipe `{self.recipe}` was terminated on line {self.line_number} "
                f"by signal {self.signal}"
            )
        return f"Recipe `{self.recipe}` was terminated by signal {self.signal}"


@dataclass(eq=False)
class TmpdirIoError(RunError):
    recipe: str
    io_error: OSError

    def message(self) -> str:
        return (
            f"Recipe `{self.recipe}` could not be run because of an IO error while trying "
            "to create a temporary directory or write a file to that directory`:"
            f"{self.io_error}\n"
        )


@dataclass(eq=False)
class UnknownOverridesError(RunError):
    overrides: Sequence[str]

    def message(self) -> str:
        return (
            f"{count('Variable', len(self.overrides))} {and_ticked(self.overrides)} "
            "overridden on the command line but not present in justfile"
        )


@dataclass(eq=False)
class UnknownRecipesError(RunError):
    recipes: Sequence[str]
    suggestion: Suggestion | None = None

    def message(self) -> str:
        text = (
            f"Justfile does not contain {count('recipe', len(self.recipes))} "
            f"{or_ticked(self.recipes)}."
        )
        return _with_suggestion(text, self.suggestion)


@dataclass(eq=False)
class UnknownError(RunError):
    recipe: str
    line_number: int | None = None

    def message(self) -> str:
        if self.line_number is not None:
            return (
                f"Recipe `{self.recipe}` failed on line {self.line_number} "
                "for an unknown reason"
            )
        return f"Recipe `{self.recipe}` failed for an unknown reason"


@dataclass(eq=False)
class NoRecipesError(RunError):
    recipes: tuple[str, ...] = field(default=(), repr=False)

    def message(self) -> str:
        return "Justfile contains no recipes.\n"


@dataclass(eq=False)
class DefaultRecipeRequiresArgumentsError(RunError):
    recipe: str
    min_arguments: int

    def message(self) -> str:
        return (
            f"Recipe `{self.recipe}` cannot be used as default recipe since it requires "
            f"at least {self.min_arguments} {count('argument', self.min_arguments)}.\n"
        )