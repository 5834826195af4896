"""Shell configuration — settings resolved once at startup.

The configuration is an immutable value built from an ``Environment``
and passed explicitly to the pieces that need it.  Nothing consults
ambient global state after startup.
"""

from dataclasses import dataclass, field

from py_shell.env import Environment
from py_shell.search import SearchPath

DEFAULT_PROMPT = "$ "

# External commands whose operands are independent: each is run once per
# operand, with the leading options repeated on every run.  ``cat`` only
# applies when the registry has no ``cat`` builtin.
DEFAULT_PER_OPERAND_COMMANDS: frozenset[str] = frozenset(["cat", "head", "tail"])

# Options of the per-operand commands that consume the next word.
DEFAULT_VALUE_OPTIONS: frozenset[str] = frozenset(["-n", "-c"])


@dataclass(frozen=True)
class ShellConfig:
    """Immutable settings for one shell session.

    Attributes:
        search_path: Directories searched for external programs.
        home: The home directory used by ``cd ~``, if known.
        prompt: The prompt string printed before each line.
        per_operand_commands: External commands run once per operand.
        value_options: Options of those commands that take a value.

    """

    search_path: SearchPath = field(default_factory=SearchPath)
    home: str | None = None
    prompt: str = DEFAULT_PROMPT
    per_operand_commands: frozenset[str] = DEFAULT_PER_OPERAND_COMMANDS
    value_options: frozenset[str] = DEFAULT_VALUE_OPTIONS

    @classmethod
    def from_environment(cls, env: Environment) -> "ShellConfig":
        """Build a configuration from ``PATH``, ``HOME`` and ``PS1``.

        Args:
            env: The environment to read.

        Returns:
            A new configuration.

        """
        return cls(
            search_path=SearchPath.parse(env.get("PATH")),
            home=env.get("HOME") or None,
            prompt=env.get("PS1") or DEFAULT_PROMPT,
        )
