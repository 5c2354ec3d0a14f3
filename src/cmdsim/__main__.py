"""Allow ``python -m cmdsim`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m cmdsim`` behaves identically to the ``cmdsim`` console
script.
"""

from __future__ import annotations

from cmdsim.cli.app import cli

if __name__ == "__main__":
    cli()
