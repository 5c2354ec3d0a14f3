"""Domain models for cmdsim.

All models are **frozen** dataclasses, immutable value objects with no
I/O and no dependencies on external packages.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from cmdsim.core.protocols import Handler


# ---------------------------------------------------------------------------
# Parsed command line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedCommand:
    """A single command line split into its parts."""

    name: str
    """First token of the input, or ``""`` for empty input."""

    flags: frozenset[str] = frozenset()
    """Names of ``--`` flags; presence means the flag is set."""

    positional_args: tuple[str, ...] = ()
    """Non-flag tokens after the name, in input order."""


# ---------------------------------------------------------------------------
# Handler table
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandInfo:
    """Name and one-line description of a registered command."""

    name: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class CommandEntry:
    """A handler bound to its command name."""

    name: str
    handler: Handler
    description: str = ""

    @property
    def info(self) -> CommandInfo:
        return CommandInfo(name=self.name, description=self.description)


@dataclass(frozen=True, slots=True)
class HandlerTable:
    """Read-only mapping from command name to :class:`CommandEntry`.

    The entries are copied into a :class:`types.MappingProxyType` on
    construction, so neither the caller's dict nor the table can be
    changed afterwards.
    """

    entries: Mapping[str, CommandEntry] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def get(self, name: str) -> Handler | None:
        """Return the handler registered under *name*, or ``None``."""
        entry = self.entries.get(name)
        return entry.handler if entry is not None else None

    def describe(self, name: str) -> str | None:
        """Return the description of *name*, or ``None`` if unregistered."""
        entry = self.entries.get(name)
        return entry.description if entry is not None else None

    def listing(self) -> tuple[CommandInfo, ...]:
        """All commands sorted by name."""
        return tuple(self.entries[name].info for name in self)

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.entries))

    def __len__(self) -> int:
        return len(self.entries)
