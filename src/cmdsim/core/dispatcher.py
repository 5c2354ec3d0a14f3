"""Core dispatcher: resolve a parsed command and invoke its handler.

The dispatcher is the failure boundary around handler invocation.  It
never lets a lookup miss or a handler exception escape to its caller;
both are converted into a :class:`~cmdsim.exceptions.CmdsimError`
subclass and published on an :class:`~cmdsim.core.protocols.ErrorChannel`.

Guarantees
----------
* One lookup and at most one handler call per :meth:`Dispatcher.dispatch`.
* No retries, no timeouts.
* ``KeyboardInterrupt`` and ``SystemExit`` are not handler failures and
  propagate unchanged.
"""

from __future__ import annotations

import logging

from cmdsim.core.models import HandlerTable, ParsedCommand
from cmdsim.core.protocols import ErrorChannel
from cmdsim.exceptions import CmdsimError, HandlerExecutionError, UnknownCommandError

logger = logging.getLogger(__name__)


class LoggingErrorChannel:
    """Error channel that writes each report to the module logger."""

    def report(self, error: CmdsimError) -> None:
        logger.error("%s", error)


class Dispatcher:
    """Dispatch parsed commands against an immutable handler table.

    Parameters
    ----------
    table:
        The handler table built once at startup.
    channel:
        Where recovered errors are reported.  Defaults to
        :class:`LoggingErrorChannel`.
    """

    def __init__(
        self,
        table: HandlerTable,
        channel: ErrorChannel | None = None,
    ) -> None:
        self._table: HandlerTable = table
        self._channel: ErrorChannel = channel if channel is not None else LoggingErrorChannel()

    @property
    def table(self) -> HandlerTable:
        return self._table

    def dispatch(self, command: ParsedCommand) -> None:
        """Look up *command* and run its handler.

        Reports :class:`UnknownCommandError` when the name is not
        registered and :class:`HandlerExecutionError` when the handler
        raises.  Returns normally in every case.
        """
        handler = self._table.get(command.name)
        if handler is None:
            logger.debug("No handler registered for %r", command.name)
            self._channel.report(UnknownCommandError(command.name))
            return

        logger.debug(
            "Dispatching %r flags=%s args=%s",
            command.name,
            sorted(command.flags),
            list(command.positional_args),
        )
        try:
            handler(command.flags, command.positional_args)
        except Exception as exc:
            logger.debug("Handler for %r failed", command.name, exc_info=True)
            error = HandlerExecutionError(str(exc), cause=exc)
            error.__cause__ = exc
            self._channel.report(error)
            return

        logger.debug("Command %r completed", command.name)


def dispatch(
    command: ParsedCommand,
    table: HandlerTable,
    channel: ErrorChannel | None = None,
) -> None:
    """Functional shorthand for ``Dispatcher(table, channel).dispatch(command)``."""
    Dispatcher(table, channel).dispatch(command)
