"""CLI application entry point for cmdsim.

Flow
----
1. argparse consumes cmdsim's own options (``--config``, ``--debug``,
   ``--version``) that appear before the command name.  Unrecognised
   leading options are not errors: they start the command line.
2. Every remaining token is joined with single spaces and parsed into a
   :class:`~cmdsim.core.models.ParsedCommand`.
3. The configuration is loaded and turned into a handler table.
4. The dispatcher runs the command, reporting lookup misses and handler
   failures on stderr.

:func:`cli` is the **process error boundary**.  Dispatch errors never
reach it; it only sees configuration problems and the unexpected.
"""

from __future__ import annotations

import argparse
import logging
import sys

from cmdsim.cli import exit_codes
from cmdsim.cli.console import console, escape_markup
from cmdsim.exceptions import CmdsimError
from cmdsim.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    ``add_help`` is off: ``help`` is an ordinary command served by
    whatever the configuration registers under that name.
    """
    parser = argparse.ArgumentParser(
        prog="cmdsim",
        description="Command-line tool simulator.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        default=None,
        help="JSON configuration file (default: $CMDSIM_CONFIG or ./config.json).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log parsing and dispatch details to stderr.",
    )
    parser.add_argument(
        "tokens",
        nargs=argparse.REMAINDER,
        help="Command name followed by its flags and arguments.",
    )
    return parser


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run one command.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.  :data:`~cmdsim.cli.exit_codes.SUCCESS`
        also covers reported unknown-command and handler errors.
    """
    from cmdsim.cli.builtins import build_handler_table
    from cmdsim.cli.error_channel import ConsoleErrorChannel
    from cmdsim.cli.logging_setup import configure_logging
    from cmdsim.core.dispatcher import Dispatcher
    from cmdsim.core.parser import parse_command
    from cmdsim.infra.config_loader import load_config

    parser = _build_parser()
    args, leading = parser.parse_known_args(argv)

    configure_logging(debug=args.debug)

    line = " ".join([*leading, *args.tokens])
    command = parse_command(line)
    logger.debug("Parsed %r into %r", line, command)

    config = load_config(args.config)
    table = build_handler_table(config)
    logger.debug("Registered commands: %s", ", ".join(table) or "(none)")

    Dispatcher(table, ConsoleErrorChannel()).dispatch(command)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except CmdsimError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}", highlight=False)
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}", highlight=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
