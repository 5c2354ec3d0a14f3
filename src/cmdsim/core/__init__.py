"""Core layer: parsing, handler table and dispatch.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from cmdsim.core.dispatcher import Dispatcher, LoggingErrorChannel, dispatch
from cmdsim.core.models import CommandEntry, CommandInfo, HandlerTable, ParsedCommand
from cmdsim.core.parser import parse_command
from cmdsim.core.protocols import ErrorChannel, Handler
from cmdsim.core.registry import CommandRegistry

__all__: list[str] = [
    "CommandEntry",
    "CommandInfo",
    "CommandRegistry",
    "Dispatcher",
    "ErrorChannel",
    "Handler",
    "HandlerTable",
    "LoggingErrorChannel",
    "ParsedCommand",
    "dispatch",
    "parse_command",
]
