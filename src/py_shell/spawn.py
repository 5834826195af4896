"""Process spawning — run an external program to completion.

The dispatcher does not care *how* a program runs, only what came back:
an exit status and the captured stdout/stderr text.  ``ProcessRunner`` is
that contract; ``SubprocessRunner`` is the real implementation on top of
``subprocess.run``.

Tests substitute a recording runner so dispatch logic can be checked
without spawning anything.

Design choices:
    - **Blocking** — the shell waits for the child to exit; there are no
      background jobs.
    - **stdin is inherited** — only stdout and stderr are captured.
    - **``argv[0]`` is the name the user typed**, while the program
      actually launched is the resolved path.
    - **Launch failures raise ``SpawnError``** — a non-zero exit is *not*
      an exception, it is reported through ``SpawnResult.returncode``.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from py_shell.env import Environment


class SpawnError(Exception):
    """Raised when a program could not be launched at all."""


@dataclass(frozen=True)
class SpawnResult:
    """What a finished child process left behind.

    Attributes:
        returncode: The exit status (0 means success).
        stdout: Captured standard output.
        stderr: Captured standard error.

    """

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        """Return True when the program exited with status 0."""
        return self.returncode == 0


class ProcessRunner(Protocol):
    """Anything that can run a program and capture its output."""

    def run(self, program: Path, argv: list[str]) -> SpawnResult:
        """Run *program* with *argv* and wait for it to finish."""
        ...


class SubprocessRunner:
    """Run programs with ``subprocess.run``, capturing their output."""

    def __init__(self, *, env: Environment | None = None) -> None:
        """Create a runner.

        Args:
            env: Environment passed to children.  None inherits ``os.environ``.

        """
        self._env = env

    def run(self, program: Path, argv: list[str]) -> SpawnResult:
        """Run *program* and wait for it to exit.

        Args:
            program: Resolved path of the executable.
            argv: The full argument vector, ``argv[0]`` included.

        Returns:
            The exit status and captured text.

        Raises:
            SpawnError: If the program could not be started.

        """
        try:
            completed = subprocess.run(  # noqa: S603
                argv,
                executable=program,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                env=self._env.as_dict() if self._env is not None else None,
                check=False,
            )
        except OSError as e:
            raise SpawnError(e.strerror or str(e)) from e
        return SpawnResult(
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
