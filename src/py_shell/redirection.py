"""I/O redirection — separate ``>``, ``1>`` and ``2>`` from real arguments.

``echo hi > out.txt`` is not an ``echo`` with three arguments: the
``> out.txt`` part tells the shell where the output goes.  The resolver
finds those operators in the token list, records the target paths in a
``RedirectionDescriptor``, and reports how many leading tokens are real
arguments.

Rules:
    - ``>`` and ``1>`` redirect stdout; ``2>`` redirects stderr.
    - An operator with no token after it is not a redirection — it stays
      a literal argument.
    - Everything from the leftmost recognised operator onward is cut
      from the argument list.
    - When the same stream is redirected twice, the leftmost operator
      wins.  The scan runs right-to-left and each hit overwrites the
      last, so the leftmost is simply the one seen last.
    - Targets are always truncated, never appended to.
"""

from dataclasses import dataclass

STDOUT_OPERATORS = frozenset([">", "1>"])
STDERR_OPERATORS = frozenset(["2>"])


@dataclass(frozen=True)
class RedirectionDescriptor:
    """Where a command's output streams should go.

    Attributes:
        stdout_path: File receiving stdout, or None for the console.
        stderr_path: File receiving stderr, or None for the console.

    """

    stdout_path: str | None = None
    stderr_path: str | None = None


def resolve_redirections(args: list[str]) -> tuple[int, RedirectionDescriptor]:
    """Find redirection operators in *args*.

    Args:
        args: Argument tokens, command name already removed.

    Returns:
        A tuple of (boundary, descriptor).  The command's effective
        arguments are ``args[: boundary + 1]``; a boundary of ``-1``
        means no arguments survive.

    """
    last = len(args) - 1
    boundary = last
    stdout_path: str | None = None
    stderr_path: str | None = None

    for i in range(last, -1, -1):
        token = args[i]
        if i == last:
            # Nothing follows, so an operator here is a literal argument.
            continue
        if token in STDOUT_OPERATORS:
            stdout_path = args[i + 1]
        elif token in STDERR_OPERATORS:
            stderr_path = args[i + 1]
        else:
            continue
        boundary = min(boundary, i - 1)

    return boundary, RedirectionDescriptor(stdout_path=stdout_path, stderr_path=stderr_path)


def split_redirections(args: list[str]) -> tuple[list[str], RedirectionDescriptor]:
    """Return the effective arguments and the descriptor for *args*."""
    boundary, descriptor = resolve_redirections(args)
    return args[: boundary + 1], descriptor
