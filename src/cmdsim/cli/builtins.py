"""Builtin command handlers and handler-table wiring.

Each builtin is created by a factory that receives the listing of every
command in the final table, so ``help`` can describe the table it lives
in without the table ever being mutated.

Output goes to stdout via :data:`cmdsim.cli.console.out`, printed
verbatim.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from cmdsim.cli.console import out
from cmdsim.core.models import CommandInfo, HandlerTable
from cmdsim.core.protocols import Handler
from cmdsim.core.registry import CommandRegistry
from cmdsim.exceptions import ConfigError, HelpTopicError, ScenarioFailedError
from cmdsim.infra.config_loader import ScenarioConfig, SimulatorConfig

PROG: str = "cmdsim"

HandlerFactory = Callable[[Sequence[CommandInfo]], Handler]


# ---------------------------------------------------------------------------
# help
# ---------------------------------------------------------------------------

class HelpHandler:
    """Lists the available commands, or describes one of them."""

    def __init__(self, listing: Sequence[CommandInfo], *, prog: str = PROG) -> None:
        self._listing: tuple[CommandInfo, ...] = tuple(sorted(listing, key=lambda i: i.name))
        self._prog = prog

    def render(self, topic: str | None = None) -> list[str]:
        """Return the help text as lines."""
        if topic is not None:
            info = next((i for i in self._listing if i.name == topic), None)
            if info is None:
                raise HelpTopicError(f"No help for unknown command: {topic}")
            return [f"{info.name}  {info.description}".rstrip()]

        lines = [f"{self._prog} [command]", "", "Available commands:"]
        width = max((len(i.name) for i in self._listing), default=0)
        for info in self._listing:
            lines.append(f"  {info.name:<{width}}  {info.description}".rstrip())
        return lines

    def __call__(self, flags: frozenset[str], positional_args: tuple[str, ...]) -> None:
        topic = positional_args[0] if positional_args else None
        for line in self.render(topic):
            out.print_plain(line)


# ---------------------------------------------------------------------------
# hello / echo
# ---------------------------------------------------------------------------

def hello(flags: frozenset[str], positional_args: tuple[str, ...]) -> None:
    """Print ``Hello, <name>!``; ``--shout`` upper-cases it."""
    name = " ".join(positional_args) or "world"
    message = f"Hello, {name}!"
    if "shout" in flags:
        message = message.upper()
    out.print_plain(message)


def echo(flags: frozenset[str], positional_args: tuple[str, ...]) -> None:
    """Print the arguments back; ``--upper`` upper-cases them."""
    text = " ".join(positional_args)
    if "upper" in flags:
        text = text.upper()
    out.print_plain(text)


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------

class ScenarioHandler:
    """Replays canned output from the configuration.

    If the scenario defines an ``error`` the handler fails with it after
    printing, which the dispatcher reports as an execution error.
    ``--quiet`` suppresses the output lines.
    """

    def __init__(self, scenario: ScenarioConfig) -> None:
        self.scenario = scenario

    def __call__(self, flags: frozenset[str], positional_args: tuple[str, ...]) -> None:
        if "quiet" not in flags:
            for line in self.scenario.output:
                out.print_plain(line)
        if self.scenario.error is not None:
            raise ScenarioFailedError(self.scenario.error)


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

BUILTIN_HANDLERS: dict[str, HandlerFactory] = {
    "help": HelpHandler,
    "hello": lambda _listing: hello,
    "echo": lambda _listing: echo,
}
"""Builtin handler key → factory.  Keys are what ``commands`` entries name."""


def build_handler_table(
    config: SimulatorConfig,
    *,
    builtins: dict[str, HandlerFactory] | None = None,
) -> HandlerTable:
    """Build the immutable handler table described by *config*.

    Raises
    ------
    ConfigError
        If a command names a handler key that is not a builtin.
    """
    factories = BUILTIN_HANDLERS if builtins is None else builtins

    listing = [CommandInfo(c.name, c.description) for c in config.commands]
    listing += [CommandInfo(s.name, s.description) for s in config.scenarios]

    registry = CommandRegistry()
    for command in config.commands:
        factory = factories.get(command.handler)
        if factory is None:
            raise ConfigError(
                f"Command {command.name!r} uses unknown handler {command.handler!r}",
                hint=f"Available handlers: {', '.join(sorted(factories))}",
            )
        registry.register(command.name, factory(listing), command.description)

    for scenario in config.scenarios:
        registry.register(scenario.name, ScenarioHandler(scenario), scenario.description)

    return registry.build()
