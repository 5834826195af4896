"""Shell audit log — a structured record of what the interpreter did.

Every line the shell handles leaves a trail: the raw input, which
command a name resolved to, which programs were spawned, which commands
failed, and which redirect targets could not be written.  The log is an
in-memory buffer, inspectable by the caller and by tests; nothing in it
is ever printed on its own.

Entries are grouped by input line.  ``Logger.start_line`` opens a new
line number and every entry logged after it carries that number, so
``logger.filter(line=3)`` answers "what happened for the third line?".

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — a single record (level, message, source, line).
- **Logger** — an append-only log with per-line grouping and filtering.
"""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels for log entries."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The component that generated the event (e.g. "dispatcher").
        line: The input line number, or 0 outside any line.

    """

    level: LogLevel
    message: str
    source: str
    line: int = 0

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``, with ``#line`` when known."""
        where = f"{self.source}#{self.line}" if self.line else self.source
        return f"[{self.level.name}] {where}: {self.message}"


class Logger:
    """Append-only log buffer grouped by input line."""

    def __init__(self) -> None:
        """Create an empty logger."""
        self._entries: list[LogEntry] = []
        self._line = 0

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in chronological order."""
        return list(self._entries)

    @property
    def line(self) -> int:
        """Return the current input line number (0 before the first)."""
        return self._line

    def start_line(self, text: str) -> int:
        """Open a new input line and record its raw *text*.

        Returns:
            The new line number, counting from 1.

        """
        self._line += 1
        self.log(LogLevel.DEBUG, f"input {text!r}", source="shell")
        return self._line

    def log(self, level: LogLevel, message: str, *, source: str) -> None:
        """Append a new entry stamped with the current line number.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            source: Component that generated the event.

        """
        self._entries.append(
            LogEntry(level=level, message=message, source=source, line=self._line)
        )

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
        line: int | None = None,
    ) -> list[LogEntry]:
        """Return entries matching every given criterion.

        Args:
            min_level: If set, only entries at or above this level.
            source: If set, only entries from this component.
            line: If set, only entries for this input line.

        """
        return [
            e
            for e in self._entries
            if (min_level is None or e.level >= min_level)
            and (source is None or e.source == source)
            and (line is None or e.line == line)
        ]
