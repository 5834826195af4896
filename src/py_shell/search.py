"""Search path — find external programs the way ``execvp`` does.

``PATH=/usr/local/bin:/usr/bin:/bin`` is an ordered list of directories.
To run ``ls`` the shell checks each directory in turn and takes the
first one holding an executable file called ``ls``.

The separator is ``:`` on POSIX and ``;`` on Windows; it defaults to
``os.pathsep`` but can be given explicitly.

Details:
    - Empty entries (``/bin::/usr/bin``) are skipped.
    - A name containing a path separator (``./run.sh``, ``/bin/ls``) is
      never searched for; it resolves to itself if it is executable.
"""

import os
from dataclasses import dataclass
from pathlib import Path


def _is_executable(candidate: Path) -> bool:
    return candidate.is_file() and os.access(candidate, os.X_OK)


@dataclass(frozen=True)
class SearchPath:
    """An ordered list of directories searched for executables.

    Attributes:
        directories: Directories in search order.

    """

    directories: tuple[Path, ...] = ()

    @classmethod
    def parse(cls, value: str | None, separator: str = os.pathsep) -> "SearchPath":
        """Build a search path from a ``PATH``-style string.

        Args:
            value: The raw variable value (None or empty gives no directories).
            separator: Entry separator, ``:`` on POSIX and ``;`` on Windows.

        Returns:
            A new ``SearchPath``.

        """
        if not value:
            return cls()
        return cls(directories=tuple(Path(entry) for entry in value.split(separator) if entry))

    def find(self, name: str) -> Path | None:
        """Return the first executable called *name*, or None.

        Args:
            name: A bare program name, or a path to a program.

        Returns:
            The path of the executable, or None if nothing matched.

        """
        if not name:
            return None
        if os.sep in name or (os.altsep is not None and os.altsep in name):
            direct = Path(name)
            return direct if _is_executable(direct) else None
        for directory in self.directories:
            candidate = directory / name
            if _is_executable(candidate):
                return candidate
        return None
