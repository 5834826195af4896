"""Tokenizer — turn a raw input line into argument tokens.

This is the first stage of every command: ``echo 'hello  world' a\\ b``
must become ``["echo", "hello  world", "a b"]`` before anything else can
happen.  The rules follow the POSIX shell:

- **Unquoted** — whitespace separates tokens and a backslash escapes the
  next character, whatever it is.
- **Single quotes** — everything is literal, backslashes included.
- **Double quotes** — literal, except ``\\"``, ``\\\\`` and ``\\$``, which
  drop the backslash.  Any other backslash is kept as-is.

Quoted and unquoted spans glue together: ``a'b c'd`` is one token,
``ab cd``.  Tokens carry no memory of how they were quoted.

Design choices:
    - **One forward pass with an explicit state enum.**  A cursor walks
      the line once; the ``QuoteState`` decides what each character means.
    - **An unterminated quote closes silently at end of input**, keeping
      whatever was accumulated.  ``echo 'abc`` yields ``["echo", "abc"]``.
    - **``''`` is a real, empty token.**  A separate ``started`` flag
      tracks whether a token exists, independent of its content.
"""

from enum import StrEnum

# Characters that end a token when unquoted.
_WHITESPACE = frozenset(" \t")

# Characters a backslash may escape inside double quotes.
_DOUBLE_QUOTE_ESCAPABLE = frozenset('"\\$')


class QuoteState(StrEnum):
    """Which quoting context the cursor is currently in."""

    UNQUOTED = "unquoted"
    SINGLE = "single"
    DOUBLE = "double"


def tokenize(line: str) -> list[str]:
    """Split *line* into tokens, resolving quotes and escapes.

    Args:
        line: One line of input, without its line terminator.

    Returns:
        The tokens in left-to-right order.  Empty input gives an empty list.

    """
    tokens: list[str] = []
    current: list[str] = []
    started = False
    state = QuoteState.UNQUOTED
    i = 0
    length = len(line)

    while i < length:
        char = line[i]
        i += 1

        if state is QuoteState.SINGLE:
            if char == "'":
                state = QuoteState.UNQUOTED
            else:
                current.append(char)
            continue

        if state is QuoteState.DOUBLE:
            if char == '"':
                state = QuoteState.UNQUOTED
            elif char == "\\" and i < length and line[i] in _DOUBLE_QUOTE_ESCAPABLE:
                current.append(line[i])
                i += 1
            else:
                current.append(char)
            continue

        # Unquoted
        if char in _WHITESPACE:
            if started:
                tokens.append("".join(current))
                current.clear()
                started = False
            continue

        if char == "\\":
            # A trailing backslash has nothing to escape and is dropped.
            if i < length:
                current.append(line[i])
                started = True
                i += 1
            continue

        started = True
        if char == "'":
            state = QuoteState.SINGLE
        elif char == '"':
            state = QuoteState.DOUBLE
        else:
            current.append(char)

    if started:
        tokens.append("".join(current))
    return tokens
