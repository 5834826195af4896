"""Environment variables — the shell's view of ``KEY=VALUE`` configuration.

Every Unix process inherits an environment from its parent.  The shell
reads a few well-known variables from it:

- ``PATH`` — where to look for external programs.
- ``HOME`` — where ``cd ~`` goes.
- ``PS1`` — the prompt string.

Key design properties:
    - **Snapshot, not a live view** — ``Environment.from_os()`` copies
      ``os.environ`` once at startup.  Nothing else in the package reads
      ``os.environ`` directly, so tests can hand the shell any
      environment they like.
    - **Passed down to children** — external programs receive this
      environment, not whatever ``os.environ`` happens to hold.
    - **Strings only** — both keys and values are strings.
"""

import os


class Environment:
    """A key-value store for environment variables.

    Each instance is an independent copy — modifying the source mapping
    after construction does not affect it.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        """Create an environment, optionally pre-populated.

        Args:
            initial: Starting variables (copied, not referenced).

        """
        self._vars: dict[str, str] = dict(initial) if initial else {}

    @classmethod
    def from_os(cls) -> "Environment":
        """Snapshot the current process environment."""
        return cls(initial=dict(os.environ))

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for *key*, or *default* if not set."""
        return self._vars.get(key, default)

    def items(self) -> list[tuple[str, str]]:
        """Return all (key, value) pairs."""
        return list(self._vars.items())

    def as_dict(self) -> dict[str, str]:
        """Return a plain dict copy, suitable for ``subprocess``."""
        return dict(self._vars)

    def __len__(self) -> int:
        """Return the number of variables."""
        return len(self._vars)
