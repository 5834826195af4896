"""py-shell — an interactive command interpreter.

The interpreter reads a line, tokenizes it with shell quoting rules,
splits off ``>``/``1>``/``2>`` redirections, runs a builtin or an
external program from ``PATH``, and writes the merged output to the
console or to files.

Re-exports the main entry points so callers can write::

    from py_shell import Shell, tokenize
"""

from py_shell.redirection import RedirectionDescriptor, split_redirections
from py_shell.results import CommandResult, ErrorKind, Terminate
from py_shell.shell import Shell
from py_shell.tokenizer import tokenize

__all__ = [
    "CommandResult",
    "ErrorKind",
    "RedirectionDescriptor",
    "Shell",
    "Terminate",
    "split_redirections",
    "tokenize",
]
