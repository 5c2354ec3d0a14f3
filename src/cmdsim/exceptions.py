"""Custom exception hierarchy for cmdsim.

Every error condition the application knows about derives from
:class:`CmdsimError` so the CLI error boundary and the dispatcher's
error channel can render a clean one-line message instead of a stack
trace.

Hierarchy
---------
CmdsimError
├── UnknownCommandError
├── HandlerExecutionError
├── DuplicateCommandError
├── ConfigError
│   └── ConfigNotFoundError
└── HandlerError
    ├── HelpTopicError
    └── ScenarioFailedError
"""

from __future__ import annotations


class CmdsimError(Exception):
    """Base exception for all cmdsim errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Dispatch ---------------------------------------------------------------

class UnknownCommandError(CmdsimError):
    """Raised when a command name has no entry in the handler table."""

    def __init__(self, name: str, *, hint: str | None = None) -> None:
        super().__init__(f"Unknown command: {name}", hint=hint)
        self.name: str = name


class HandlerExecutionError(CmdsimError):
    """Raised when a registered handler fails during invocation.

    The message is the underlying failure's message; the original
    exception is kept in :attr:`cause`.
    """

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(f"Error executing command: {message}")
        self.message: str = message
        self.cause: BaseException | None = cause


class DuplicateCommandError(CmdsimError):
    """Raised when a command name is registered twice."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Command already registered: {name}")
        self.name: str = name


# --- Configuration ----------------------------------------------------------

class ConfigError(CmdsimError):
    """Raised when the configuration file cannot be read or is malformed."""


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly requested configuration file is missing."""

    def __init__(self, path: str, *, hint: str | None = None) -> None:
        super().__init__(f"Configuration file not found: {path}", hint=hint)
        self.path: str = path


# --- Handlers ---------------------------------------------------------------

class HandlerError(CmdsimError):
    """Base class for failures raised by the builtin handlers."""


class HelpTopicError(HandlerError):
    """Raised when ``help`` is asked about a command that does not exist."""


class ScenarioFailedError(HandlerError):
    """Raised by a scenario configured to simulate a failing command."""

