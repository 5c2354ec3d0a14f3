"""Route the ``cmdsim`` loggers through Rich on stderr."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from cmdsim.cli.console import get_rich_console

ROOT_LOGGER_NAME: str = "cmdsim"


def configure_logging(*, debug: bool = False) -> logging.Logger:
    """Attach a single ``RichHandler`` to the ``cmdsim`` logger.

    Calling it again replaces the handler instead of stacking a second
    one.  Records do not propagate to the root logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=get_rich_console(stderr=True),
        show_path=debug,
        rich_tracebacks=debug,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False
    return logger
