"""Error channel that prints recovered dispatch errors on stderr."""

from __future__ import annotations

from cmdsim.cli.console import console
from cmdsim.exceptions import CmdsimError


class ConsoleErrorChannel:
    """Render each reported error as a single plain line on stderr.

    Produces exactly ``Unknown command: <name>`` or
    ``Error executing command: <message>``.
    """

    def report(self, error: CmdsimError) -> None:
        console.print_plain(str(error))
