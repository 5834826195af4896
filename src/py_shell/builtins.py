"""Builtin commands — the handlers the shell implements itself.

Some commands cannot be external programs.  ``cd`` must change the
shell's *own* working directory, and ``exit`` must stop the shell's own
loop.  Others (``echo``, ``pwd``, ``cat``) are builtins for convenience.

Every handler has the same shape: it takes the argument list and the
dispatcher, and returns a list of ``CommandResult`` (or ``Terminate``).
Handlers never print and never touch redirection — the output
aggregator does that uniformly for builtins and programs alike.

Per-operand builtins (``cat``, ``type``) return one result per argument,
so ``cat present missing`` yields the content of one file *and* an error
for the other.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from py_shell.commands import Builtin, CommandRegistry, External
from py_shell.results import CommandResult, ErrorKind, Outcome, Terminate

if TYPE_CHECKING:
    from py_shell.dispatcher import Dispatcher


def _cmd_exit(args: list[str], _dispatcher: Dispatcher) -> Outcome:
    """Ask the shell to exit with the given status (0 by default)."""
    if not args:
        return Terminate(code=0)
    try:
        return Terminate(code=int(args[0]))
    except ValueError:
        return Terminate(code=1)


def _cmd_echo(args: list[str], _dispatcher: Dispatcher) -> Outcome:
    """Echo arguments back as output."""
    return [CommandResult.success(" ".join(args) + "\n")]


def _cmd_type(args: list[str], dispatcher: Dispatcher) -> Outcome:
    """Describe how each name would be interpreted."""
    if not args:
        return [CommandResult.failure(ErrorKind.MISSING_OPERAND, "type: missing operand")]

    results: list[CommandResult] = []
    for name in args:
        match dispatcher.resolve(name):
            case Builtin():
                results.append(CommandResult.success(f"{name} is a shell builtin\n"))
            case External(path=path):
                results.append(CommandResult.success(f"{name} is {path}\n"))
            case None:
                results.append(
                    CommandResult.failure(ErrorKind.COMMAND_NOT_FOUND, f"{name}: not found")
                )
    return results


def _cmd_pwd(_args: list[str], _dispatcher: Dispatcher) -> Outcome:
    """Print the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError:
        return [
            CommandResult.failure(
                ErrorKind.WORKING_DIRECTORY_UNAVAILABLE,
                "pwd: current directory could not be found",
            )
        ]
    return [CommandResult.success(cwd + "\n")]


def _home_directory(dispatcher: Dispatcher) -> str | None:
    """Return ``HOME`` from the configuration, else the OS user's home."""
    if dispatcher.config.home:
        return dispatcher.config.home
    try:
        return str(Path.home())
    except RuntimeError:
        return None


def _cmd_cd(args: list[str], dispatcher: Dispatcher) -> Outcome:
    """Change the shell's working directory."""
    if not args:
        return [CommandResult.failure(ErrorKind.MISSING_OPERAND, "cd: missing operand")]

    target = args[0]
    if target == "~" or target.startswith("~/"):
        home = _home_directory(dispatcher)
        if home is None:
            return [
                CommandResult.failure(
                    ErrorKind.HOME_DIRECTORY_UNAVAILABLE, "cd: home directory could not be found"
                )
            ]
        target = home + target[1:]

    try:
        os.chdir(target)
    except FileNotFoundError:
        return [
            CommandResult.failure(
                ErrorKind.PATH_NOT_FOUND, f"cd: {target}: No such file or directory"
            )
        ]
    except OSError as e:
        return [CommandResult.failure(ErrorKind.PATH_NOT_FOUND, f"cd: {target}: {e.strerror}")]
    return [CommandResult.success()]


def _read_file(path: str) -> CommandResult:
    """Read one ``cat`` operand."""
    try:
        content = Path(path).read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        return CommandResult.failure(
            ErrorKind.FILE_NOT_FOUND, f"cat: {path}: No such file or directory"
        )
    except OSError as e:
        return CommandResult.failure(ErrorKind.FILE_NOT_FOUND, f"cat: {path}: {e.strerror}")
    if content and not content.endswith("\n"):
        content += "\n"
    return CommandResult.success(content)


def _cmd_cat(args: list[str], _dispatcher: Dispatcher) -> Outcome:
    """Print the contents of each file operand."""
    if not args:
        return [CommandResult.failure(ErrorKind.MISSING_OPERAND, "cat: missing operand")]
    return [_read_file(path) for path in args]


def default_registry() -> CommandRegistry:
    """Build the table of builtin commands."""
    return CommandRegistry(
        {
            "exit": _cmd_exit,
            "echo": _cmd_echo,
            "type": _cmd_type,
            "pwd": _cmd_pwd,
            "cd": _cmd_cd,
            "cat": _cmd_cat,
        }
    )
