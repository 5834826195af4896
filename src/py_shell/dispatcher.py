"""The dispatcher — decide how a command runs and collect its results.

Given a command name and its (already de-redirected) arguments, the
dispatcher resolves the name to a ``Command`` and runs it:

1. **Builtin** — call the handler; it returns one or more results, or
   ``Terminate`` for ``exit``.
2. **External, per-operand** — programs like ``head`` whose operands are
   independent get one invocation per operand.  Leading options (and the
   values of options such as ``-n``) are repeated on every invocation.
   A failure on one operand does not stop the others.
3. **External** — one invocation with the full argument vector.
4. **Unresolved** — a single ``COMMAND_NOT_FOUND`` result, and nothing
   else happens.

Builtins always shadow programs of the same name on the search path.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from py_shell.commands import Builtin, Command, CommandRegistry, External
from py_shell.logging import Logger, LogLevel
from py_shell.results import CommandResult, ErrorKind, Outcome
from py_shell.spawn import ProcessRunner, SpawnError, SubprocessRunner

if TYPE_CHECKING:
    from pathlib import Path

    from py_shell.config import ShellConfig
    from py_shell.env import Environment

_SOURCE = "dispatcher"


def split_options(args: list[str], value_options: frozenset[str]) -> tuple[list[str], list[str]]:
    """Split *args* into leading options and the operands after them.

    Options are the leading words starting with ``-`` (a lone ``-`` is an
    operand).  A word in *value_options* also takes the word after it.
    ``--`` ends the options and is kept with them.

    Args:
        args: The argument vector, without the command name.
        value_options: Options whose value is the following word.

    Returns:
        A ``(options, operands)`` pair.

    """
    i = 0
    while i < len(args):
        word = args[i]
        if word == "--":
            i += 1
            break
        if not word.startswith("-") or word == "-":
            break
        i += 2 if word in value_options else 1
    i = min(i, len(args))
    return args[:i], args[i:]


class Dispatcher:
    """Resolve command names and execute them."""

    def __init__(
        self,
        *,
        config: ShellConfig,
        registry: CommandRegistry,
        env: Environment | None = None,
        runner: ProcessRunner | None = None,
        logger: Logger | None = None,
    ) -> None:
        """Create a dispatcher.

        Args:
            config: Session configuration (search path, per-operand set).
            registry: The builtin command table.
            env: Environment handed to child processes by the default runner.
            runner: Process runner; defaults to ``SubprocessRunner``.
            logger: Audit log; a private one is created if omitted.

        """
        self._config = config
        self._registry = registry
        self._runner: ProcessRunner = runner if runner is not None else SubprocessRunner(env=env)
        self._logger = logger if logger is not None else Logger()

    @property
    def config(self) -> ShellConfig:
        """Return the session configuration."""
        return self._config

    @property
    def registry(self) -> CommandRegistry:
        """Return the builtin command table."""
        return self._registry

    def resolve(self, name: str) -> Command | None:
        """Resolve *name* to a builtin or an external program.

        Args:
            name: The command name as typed.

        Returns:
            The resolved command, or None if nothing matched.

        """
        builtin = self._registry.lookup(name)
        if builtin is not None:
            return builtin
        path = self._config.search_path.find(name)
        if path is None:
            return None
        return External(
            name=name,
            path=path,
            per_operand=name in self._config.per_operand_commands,
        )

    def dispatch(self, name: str, args: list[str]) -> Outcome:
        """Run command *name* with *args*.

        Args:
            name: The command name.
            args: Arguments with redirections already removed.

        Returns:
            The ordered results, or ``Terminate`` if the command asked
            the shell to exit.

        """
        match self.resolve(name):
            case None:
                self._logger.log(LogLevel.DEBUG, f"{name}: unresolved", source=_SOURCE)
                outcome: Outcome = [
                    CommandResult.failure(ErrorKind.COMMAND_NOT_FOUND, f"{name}: command not found")
                ]
            case Builtin(handler=handler):
                self._logger.log(LogLevel.DEBUG, f"{name}: builtin", source=_SOURCE)
                outcome = handler(args, self)
            case External(path=path, per_operand=True) if args:
                self._logger.log(LogLevel.DEBUG, f"{name}: {path} (per operand)", source=_SOURCE)
                options, operands = split_options(args, self._config.value_options)
                if operands:
                    outcome = [self._spawn(name, path, [*options, op]) for op in operands]
                else:
                    outcome = [self._spawn(name, path, options)]
            case External(path=path):
                self._logger.log(LogLevel.DEBUG, f"{name}: {path}", source=_SOURCE)
                outcome = [self._spawn(name, path, args)]

        if isinstance(outcome, list):
            for result in outcome:
                if result.error is not None:
                    self._logger.log(
                        LogLevel.WARNING,
                        f"{result.error.kind}: {result.error.message}",
                        source=_SOURCE,
                    )
        return outcome

    def _spawn(self, name: str, path: Path, args: list[str]) -> CommandResult:
        """Run one external invocation and convert it into a result."""
        self._logger.log(LogLevel.INFO, f"spawn {path} {args}", source=_SOURCE)
        try:
            spawned = self._runner.run(path, [name, *args])
        except SpawnError as e:
            return CommandResult.failure(ErrorKind.EXTERNAL_LAUNCH_FAILURE, f"{name}: {e}")

        if not spawned.ok:
            message = spawned.stderr.rstrip("\n")
            if not message:
                message = f"{name}: exited with status {spawned.returncode}"
            return CommandResult.failure(ErrorKind.EXTERNAL_LAUNCH_FAILURE, message)
        return CommandResult.success(spawned.stdout)
