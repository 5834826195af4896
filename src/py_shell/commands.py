"""Commands — what a command name can resolve to.

A name typed at the prompt is either a **builtin** (implemented inside
the shell) or an **external** program found on the search path.  The
two variants are plain frozen dataclasses and ``Command`` is their
union, so the dispatcher decides with a single ``match``.

The ``CommandRegistry`` is the static table of builtins.  It is built
once and cannot be modified afterwards.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from pathlib import Path

    from py_shell.dispatcher import Dispatcher
    from py_shell.results import Outcome

# A builtin handler: receives the resolved args and the dispatcher that
# invoked it (for lookups such as ``type`` and ``cd ~``).
Handler: TypeAlias = "Callable[[list[str], Dispatcher], Outcome]"


@dataclass(frozen=True)
class Builtin:
    """A command implemented by the shell itself."""

    name: str
    handler: Handler


@dataclass(frozen=True)
class External:
    """A program found on the search path.

    Attributes:
        name: The name as typed (used as ``argv[0]``).
        path: The resolved executable.
        per_operand: Run once per argument instead of once overall.

    """

    name: str
    path: Path
    per_operand: bool = False


Command: TypeAlias = Builtin | External


class CommandRegistry(Mapping[str, Handler]):
    """Read-only mapping of builtin names to handlers."""

    def __init__(self, handlers: Mapping[str, Handler]) -> None:
        """Freeze *handlers* into a registry.

        Args:
            handlers: Builtin name to handler (copied).

        """
        self._handlers = MappingProxyType(dict(handlers))

    def __getitem__(self, name: str) -> Handler:
        """Return the handler registered under *name*."""
        return self._handlers[name]

    def __iter__(self) -> Iterator[str]:
        """Iterate over builtin names."""
        return iter(self._handlers)

    def __len__(self) -> int:
        """Return the number of builtins."""
        return len(self._handlers)

    def lookup(self, name: str) -> Builtin | None:
        """Return the ``Builtin`` for *name*, or None."""
        handler = self._handlers.get(name)
        if handler is None:
            return None
        return Builtin(name=name, handler=handler)
