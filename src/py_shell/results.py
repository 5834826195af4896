"""Command results — the values every command execution produces.

A command never prints.  Instead it hands back one or more
``CommandResult`` values and lets the output aggregator decide where the
text goes.  This mirrors how a real shell sees a child process: a stream
of bytes on stdout, or a diagnostic on stderr.

Key ideas:
    - **One result per atomic unit of work** — one builtin call, or one
      external invocation for one operand.  ``cat a b`` yields two
      results, each independently a success or a failure.
    - **Errors are values** — a failing command is a result carrying a
      ``CommandError``, not an exception.  The interpreter loop never
      aborts because a command failed.
    - **Exit is a variant, not a side effect** — the ``exit`` builtin
      returns ``Terminate(code)`` and the REPL acts on it.  Handlers stay
      testable because nothing inside them ends the process.
"""

from dataclasses import dataclass
from typing import TypeAlias
from enum import StrEnum


class ErrorKind(StrEnum):
    """Categories of command failure."""

    COMMAND_NOT_FOUND = "command_not_found"
    MISSING_OPERAND = "missing_operand"
    PATH_NOT_FOUND = "path_not_found"
    HOME_DIRECTORY_UNAVAILABLE = "home_directory_unavailable"
    WORKING_DIRECTORY_UNAVAILABLE = "working_directory_unavailable"
    FILE_NOT_FOUND = "file_not_found"
    EXTERNAL_LAUNCH_FAILURE = "external_launch_failure"
    REDIRECTION_TARGET_UNWRITABLE = "redirection_target_unwritable"


@dataclass(frozen=True)
class CommandError:
    """Why a command failed, plus the message shown to the user.

    Attributes:
        kind: The failure category.
        message: The text written to stderr (no trailing newline).

    """

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        """Return the user-facing message."""
        return self.message


@dataclass(frozen=True)
class CommandResult:
    """The outcome of one atomic unit of execution.

    Attributes:
        output: Text the command wrote to stdout.
        has_output: True when the command succeeded (even with empty output).
        error: The failure, or None on success.

    """

    output: str = ""
    has_output: bool = False
    error: CommandError | None = None

    def __post_init__(self) -> None:
        """Reject results that claim to be both a success and a failure."""
        if self.error is not None and self.has_output:
            msg = f"a failed result cannot carry output: {self.error.kind}"
            raise ValueError(msg)

    @classmethod
    def success(cls, output: str = "") -> "CommandResult":
        """Build a successful result carrying *output*."""
        return cls(output=output, has_output=True)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "CommandResult":
        """Build a failed result of the given *kind*."""
        return cls(error=CommandError(kind=kind, message=message))

    @property
    def ok(self) -> bool:
        """Return True for a success."""
        return self.error is None and self.has_output


@dataclass(frozen=True)
class Terminate:
    """Ask the interpreter loop to stop with an exit status.

    Attributes:
        code: The process exit status.

    """

    code: int


# What a builtin handler, and the dispatcher, hand back.
Outcome: TypeAlias = list[CommandResult] | Terminate
