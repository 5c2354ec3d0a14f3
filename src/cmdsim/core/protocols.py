"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols, never on the concrete
handlers or error sinks wired in by the CLI layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from cmdsim.exceptions import CmdsimError


class Handler(Protocol):
    """Contract for anything registered under a command name.

    Plain functions and callable objects both satisfy this protocol
    structurally.
    """

    def __call__(
        self,
        flags: frozenset[str],
        positional_args: tuple[str, ...],
    ) -> None:
        """Run the command.

        Parameters
        ----------
        flags:
            Names of the ``--`` flags present on the command line.
        positional_args:
            Every non-flag token after the command name, in input order.

        Any exception raised here is caught by the dispatcher and
        reported as a :class:`~cmdsim.exceptions.HandlerExecutionError`.
        """
        ...  # pragma: no cover


class ErrorChannel(Protocol):
    """Sink receiving the errors the dispatcher recovers from."""

    def report(self, error: CmdsimError) -> None:
        """Publish *error* as a human-readable message."""
        ...  # pragma: no cover
