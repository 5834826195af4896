"""Interactive REPL (Read-Eval-Print Loop) for the shell.

The REPL is the thin I/O wrapper around ``Shell``:

    1. **Read** — print the prompt and read one line.
    2. **Eval** — pass the line to ``shell.execute()``, which also prints.
    3. **Loop** — repeat until ``exit`` returns ``Terminate``.

Ctrl+D ends the session with status 0; Ctrl+C ends it with 130.

``run()`` takes its line reader as a parameter so the loop can be driven
from tests without a terminal.
"""

import sys
from collections.abc import Callable

from py_shell.shell import Shell

# Conventional exit status for a session ended by SIGINT.
_INTERRUPTED_STATUS = 130


def run(*, shell: Shell | None = None, read_line: Callable[[str], str] = input) -> int:
    """Run the interactive loop until ``exit`` or end of input.

    Args:
        shell: The shell to drive; a default one is created if omitted.
        read_line: Prompt-and-read function (``input`` by default).

    Returns:
        The exit status for the process.

    """
    if shell is None:
        shell = Shell()

    try:
        while True:
            try:
                line = read_line(shell.config.prompt)
            except EOFError:
                # Ctrl+D: graceful exit
                print()  # noqa: T201
                return 0

            terminate = shell.execute(line)
            if terminate is not None:
                return terminate.code

    except KeyboardInterrupt:
        print("\nInterrupted.")  # noqa: T201
        return _INTERRUPTED_STATUS


def main() -> None:
    """Console entry point for ``py-shell``."""
    sys.exit(run())
