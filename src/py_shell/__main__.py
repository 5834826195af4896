"""Allow ``python -m py_shell``."""

from py_shell.repl import main

main()
