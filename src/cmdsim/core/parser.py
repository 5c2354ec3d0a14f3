"""Command-line parsing: raw input string to :class:`ParsedCommand`.

Tokenisation rules
------------------
* Runs of whitespace are collapsed; empty tokens are never produced.
* The first token is the command name (``""`` for empty input).
* A later token starting with ``--`` sets the flag named by the rest of
  the token.  Flags are boolean only: ``--name=value`` sets the flag
  ``"name=value"``.
* Every other token is a positional argument, kept in input order.
"""

from __future__ import annotations

from cmdsim.core.models import ParsedCommand

FLAG_PREFIX: str = "--"


def tokenize(text: str) -> list[str]:
    """Split *text* on whitespace, dropping empty tokens."""
    return text.split()


def parse_command(text: str) -> ParsedCommand:
    """Parse one command line.

    >>> parse_command("hello --verbose world")
    ParsedCommand(name='hello', flags=frozenset({'verbose'}), positional_args=('world',))
    """
    tokens = tokenize(text)
    if not tokens:
        return ParsedCommand(name="")

    name, *rest = tokens
    flags: set[str] = set()
    positional: list[str] = []

    for token in rest:
        if token.startswith(FLAG_PREFIX):
            flags.add(token[len(FLAG_PREFIX):])
        else:
            positional.append(token)

    return ParsedCommand(
        name=name,
        flags=frozenset(flags),
        positional_args=tuple(positional),
    )
