"""Exit-code constants used by the CLI layer.

Reported dispatch errors (unknown command, failing handler) still end
the process with :data:`SUCCESS`; the other codes are reserved for
failures outside dispatch.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit, including recovered dispatch errors."""

GENERAL_ERROR: int = 1
"""A known CmdsimError escaped dispatch (e.g. a broken config file)."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
