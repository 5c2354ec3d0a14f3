"""Rich console helpers for the CLI layer.

Handler output goes to stdout; errors and log records go to stderr.
Consoles are created per call so they always bind to the current
``sys.stdout``/``sys.stderr`` (which test capture replaces).
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape


def get_rich_console(*, stderr: bool = True) -> Console:
    """Create a Rich console targeting stderr (default) or stdout."""
    return Console(stderr=stderr)


def escape_markup(text: str) -> str:
    """Escape Rich markup in *text* so it renders literally."""
    return escape(text)


class _ConsoleProxy:
    """``print``-compatible proxy that renders through a fresh Rich console."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object, **kwargs: Any) -> None:
        get_rich_console(stderr=self._stderr).print(*objects, **kwargs)

    def print_plain(self, text: str) -> None:
        """Print *text* verbatim: no markup, no highlighting, no wrapping."""
        self.print(text, markup=False, highlight=False, soft_wrap=True)


console = _ConsoleProxy(stderr=True)
out = _ConsoleProxy(stderr=False)
