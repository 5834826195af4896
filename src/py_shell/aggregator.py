"""Output aggregation — merge results and write them where they belong.

A single command line can produce several results (``cat a b c`` gives
three).  The aggregator folds them into exactly two payloads:

- **stdout** — the outputs of every success, concatenated in order.
- **stderr** — the messages of every failure, one per line.

Each payload has exactly one trailing newline trimmed.  On a console
stream one newline is written back, so visible output always ends with a
single newline.  In a redirect file the trimmed payload is written as-is.

Redirect targets are created or truncated, never appended to.  An empty
payload causes no I/O at all — not even creating the target file.  A
target that cannot be opened is reported on the console's stderr.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from py_shell.logging import Logger, LogLevel
from py_shell.results import CommandError, CommandResult, ErrorKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from py_shell.redirection import RedirectionDescriptor

_SOURCE = "aggregator"


def merge_output(results: Iterable[CommandResult]) -> str:
    """Concatenate successful outputs and trim one trailing newline."""
    payload = "".join(r.output for r in results if r.ok)
    return payload.removesuffix("\n")


def merge_errors(results: Iterable[CommandResult]) -> str:
    """Join failure messages one per line, without a trailing newline."""
    payload = "".join(f"{r.error.message}\n" for r in results if r.error is not None)
    return payload.removesuffix("\n")


class OutputAggregator:
    """Write merged command output to the console or to files."""

    def __init__(
        self,
        *,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        logger: Logger | None = None,
    ) -> None:
        """Create an aggregator.

        Args:
            stdout: Console output stream (defaults to ``sys.stdout``).
            stderr: Console error stream (defaults to ``sys.stderr``).
            logger: Audit log; a private one is created if omitted.

        """
        self._stdout = stdout if stdout is not None else sys.stdout
        self._stderr = stderr if stderr is not None else sys.stderr
        self._logger = logger if logger is not None else Logger()

    def emit(self, results: list[CommandResult], descriptor: RedirectionDescriptor) -> None:
        """Write the merged payloads of *results*.

        Args:
            results: The results of one command line, in order.
            descriptor: Where stdout and stderr are redirected, if anywhere.

        """
        output = merge_output(results)
        errors = merge_errors(results)

        if output:
            self._deliver(output, descriptor.stdout_path, self._stdout)
        if errors:
            self._deliver(errors, descriptor.stderr_path, self._stderr)

    def _deliver(self, payload: str, path: str | None, stream: TextIO) -> None:
        """Write *payload* to *path* if given, else to *stream*."""
        if path is None:
            stream.write(payload + "\n")
            stream.flush()
            return
        try:
            # Undecodable input bytes arrive as surrogate escapes; write them back as-is.
            data = payload.encode("utf-8", errors="surrogateescape")
            Path(path).write_bytes(data)
        except (OSError, UnicodeError) as e:
            reason = e.strerror if isinstance(e, OSError) and e.strerror else e
            error = CommandError(
                kind=ErrorKind.REDIRECTION_TARGET_UNWRITABLE,
                message=f"py-shell: {path}: {reason}",
            )
            self._logger.log(LogLevel.ERROR, f"{error.kind}: {error}", source=_SOURCE)
            self._stderr.write(f"{error}\n")
            self._stderr.flush()
