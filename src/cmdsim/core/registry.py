"""Builder for :class:`~cmdsim.core.models.HandlerTable`.

Handlers are registered explicitly at startup.  The registry is the
only mutable piece; :meth:`CommandRegistry.build` hands out immutable
snapshots.
"""

from __future__ import annotations

from cmdsim.core.models import CommandEntry, HandlerTable
from cmdsim.core.protocols import Handler
from cmdsim.exceptions import DuplicateCommandError


class CommandRegistry:
    """Collect ``name → handler`` registrations and build a table.

    Usage::

        table = (
            CommandRegistry()
            .register("hello", say_hello, "Prints a hello message.")
            .build()
        )
    """

    def __init__(self) -> None:
        self._entries: dict[str, CommandEntry] = {}

    def register(
        self,
        name: str,
        handler: Handler,
        description: str = "",
    ) -> CommandRegistry:
        """Register *handler* under *name*.

        Raises
        ------
        DuplicateCommandError
            If *name* is already registered.
        TypeError
            If *handler* is not callable.
        """
        if not callable(handler):
            raise TypeError(f"Handler for {name!r} is not callable: {handler!r}")
        if name in self._entries:
            raise DuplicateCommandError(name)
        self._entries[name] = CommandEntry(name=name, handler=handler, description=description)
        return self

    def names(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def build(self) -> HandlerTable:
        """Return an immutable snapshot of the current registrations."""
        return HandlerTable(entries=self._entries)
