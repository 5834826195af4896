"""The shell — command interpreter for one line of input.

The shell wires the pipeline together::

    raw line → tokenize → split_redirections → Dispatcher → OutputAggregator

It reads nothing and loops over nothing: ``execute()`` handles exactly
one line and returns.  The REPL owns the read loop.

Design choices:
    - **Exit is a return value.**  ``execute()`` returns ``Terminate``
      when ``exit`` runs, and ``None`` otherwise.  The caller decides
      what stopping means, so tests can exercise ``exit`` safely.
    - **Streams are injected.**  The console streams default to
      ``sys.stdout``/``sys.stderr`` but tests pass ``io.StringIO``.
    - **Collaborators are built once.**  The configuration and builtin
      registry are fixed for the shell's lifetime.
"""

from typing import TextIO

from py_shell.aggregator import OutputAggregator
from py_shell.builtins import default_registry
from py_shell.commands import CommandRegistry
from py_shell.config import ShellConfig
from py_shell.dispatcher import Dispatcher
from py_shell.env import Environment
from py_shell.logging import Logger, LogLevel
from py_shell.redirection import split_redirections
from py_shell.results import Terminate
from py_shell.spawn import ProcessRunner
from py_shell.tokenizer import tokenize


class Shell:
    """Command interpreter: one input line in, output effects out."""

    def __init__(
        self,
        *,
        config: ShellConfig | None = None,
        env: Environment | None = None,
        registry: CommandRegistry | None = None,
        runner: ProcessRunner | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        """Create a shell.

        Args:
            config: Session configuration; built from *env* if omitted.
            env: Environment snapshot; ``os.environ`` is copied if omitted.
            registry: Builtin table; ``default_registry()`` if omitted.
            runner: Process runner for external programs.
            stdout: Console output stream.
            stderr: Console error stream.

        """
        self._env = env if env is not None else Environment.from_os()
        self._config = config if config is not None else ShellConfig.from_environment(self._env)
        self._logger = Logger()
        self._dispatcher = Dispatcher(
            config=self._config,
            registry=registry if registry is not None else default_registry(),
            env=self._env,
            runner=runner,
            logger=self._logger,
        )
        self._aggregator = OutputAggregator(stdout=stdout, stderr=stderr, logger=self._logger)

    @property
    def config(self) -> ShellConfig:
        """Return the session configuration."""
        return self._config

    @property
    def logger(self) -> Logger:
        """Return the shell's audit log."""
        return self._logger

    @property
    def dispatcher(self) -> Dispatcher:
        """Return the dispatcher (for command resolution)."""
        return self._dispatcher

    def execute(self, line: str) -> Terminate | None:
        """Parse and execute one line of input.

        Args:
            line: The raw input line, without its terminator.

        Returns:
            ``Terminate`` if the line ran ``exit``, otherwise None.

        """
        self._logger.start_line(line)
        tokens = tokenize(line)
        if not tokens:
            return None

        name, *rest = tokens
        args, descriptor = split_redirections(rest)
        outcome = self._dispatcher.dispatch(name, args)

        if isinstance(outcome, Terminate):
            self._logger.log(LogLevel.INFO, f"exit with status {outcome.code}", source="shell")
            return outcome

        self._aggregator.emit(outcome, descriptor)
        return None
