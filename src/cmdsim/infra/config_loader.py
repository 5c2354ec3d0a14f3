"""Infrastructure: locating and loading the JSON configuration file.

The configuration names which builtin handler serves each command and
defines scenarios, i.e. commands whose behaviour is entirely described
by the file.  This module only reads and validates; wiring handlers is
done by the CLI layer.

Rules
-----
* Every I/O, decoding or schema failure is re-raised as a
  :class:`~cmdsim.exceptions.ConfigError` subclass.
* Document shape is checked by ``jsonschema`` against :data:`CONFIG_SCHEMA`.
* No user-facing output.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError

from cmdsim.exceptions import ConfigError, ConfigNotFoundError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR: str = "CMDSIM_CONFIG"
DEFAULT_CONFIG_NAME: str = "config.json"


# ---------------------------------------------------------------------------
# Typed configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandConfig:
    """A command served by a builtin handler."""

    name: str
    handler: str
    """Key of the builtin handler (e.g. ``"hello"``)."""

    description: str = ""


@dataclass(frozen=True, slots=True)
class ScenarioConfig:
    """A command whose output is given verbatim by the configuration."""

    name: str
    output: tuple[str, ...] = ()
    description: str = ""
    error: str | None = None
    """When set, the scenario fails with this message after printing."""


@dataclass(frozen=True, slots=True)
class SimulatorConfig:
    commands: tuple[CommandConfig, ...]
    scenarios: tuple[ScenarioConfig, ...] = ()
    source: Path | None = None
    """File the configuration was read from; ``None`` for the default."""


DEFAULT_CONFIG = SimulatorConfig(
    commands=(
        CommandConfig(name="help", handler="help", description="Displays this help message."),
        CommandConfig(name="hello", handler="hello", description="Prints a hello message."),
    ),
)


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------

def resolve_config_path(
    explicit: str | os.PathLike[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> tuple[Path | None, bool]:
    """Decide which configuration file to read.

    Order: *explicit* path, then ``$CMDSIM_CONFIG``, then
    ``./config.json`` when it exists.

    Returns
    -------
    tuple[Path | None, bool]
        The chosen path (``None`` means "use the default
        configuration") and whether the path was explicitly requested.
        A missing explicitly requested file is an error; a missing
        implicit one is not.
    """
    env = os.environ if environ is None else environ
    if explicit is not None:
        return Path(explicit), True

    from_env = env.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env), True

    candidate = (cwd if cwd is not None else Path.cwd()) / DEFAULT_CONFIG_NAME
    if candidate.is_file():
        return candidate, False
    return None, False


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> SimulatorConfig:
    """Resolve, read and validate the configuration.

    Raises
    ------
    ConfigNotFoundError
        If an explicitly requested file does not exist.
    ConfigError
        If the file cannot be read, is not valid JSON, or has the
        wrong shape.
    """
    resolved, explicit = resolve_config_path(path, environ=environ, cwd=cwd)
    if resolved is None:
        logger.debug("No configuration file found; using builtin defaults")
        return DEFAULT_CONFIG

    if explicit and not resolved.is_file():
        raise ConfigNotFoundError(
            str(resolved),
            hint=f"Pass an existing file with --config or unset {CONFIG_ENV_VAR}.",
        )

    logger.debug("Loading configuration from %s", resolved)
    try:
        text = resolved.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration file {resolved}: {exc}") from exc

    return parse_config(text, source=resolved)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["commands"],
    "properties": {
        "commands": {
            "type": "object",
            "additionalProperties": {
                "oneOf": [
                    {"type": "string", "minLength": 1},
                    {
                        "type": "object",
                        "required": ["handler"],
                        "properties": {
                            "handler": {"type": "string", "minLength": 1},
                            "description": {"type": "string"},
                        },
                    },
                ],
            },
        },
        "scenarios": {
            "type": "object",
            "additionalProperties": {
                "oneOf": [
                    {"type": "string"},
                    {
                        "type": "object",
                        "properties": {
                            "output": {
                                "oneOf": [
                                    {"type": "string"},
                                    {"type": "array", "items": {"type": "string"}},
                                ],
                            },
                            "description": {"type": "string"},
                            "error": {"type": "string"},
                        },
                    },
                ],
            },
        },
    },
}
"""JSON Schema (draft 7) every configuration document must satisfy."""

_VALIDATOR = Draft7Validator(CONFIG_SCHEMA)


def parse_config(text: str, *, source: Path | None = None) -> SimulatorConfig:
    """Decode and validate a JSON configuration document.

    Raises
    ------
    ConfigError
        If *text* is not JSON or does not match :data:`CONFIG_SCHEMA`.
    """
    label = str(source) if source is not None else "<config>"
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(
            f"Invalid JSON in {label}: {exc.msg} (line {exc.lineno}, column {exc.colno})",
        ) from exc

    validate_document(document, label=label)

    commands = tuple(_command_config(name, value) for name, value in document["commands"].items())
    scenarios = tuple(
        _scenario_config(name, value) for name, value in document.get("scenarios", {}).items()
    )

    clashes = sorted({c.name for c in commands} & {s.name for s in scenarios})
    if clashes:
        raise ConfigError(
            f"{label}: names defined as both command and scenario: {', '.join(clashes)}",
        )

    return SimulatorConfig(commands=commands, scenarios=scenarios, source=source)


def validate_document(document: Any, *, label: str = "<config>") -> None:
    """Check *document* against :data:`CONFIG_SCHEMA`.

    Every violation is listed in the error message with its location.
    """
    errors = sorted(_VALIDATOR.iter_errors(document), key=lambda e: [str(p) for p in e.path])
    if not errors:
        return

    def _format_error(err: ValidationError) -> str:
        path_str = "/".join(str(p) for p in err.path) if err.path else "<root>"
        return f"{err.message} (at {path_str})"

    raise ConfigError(
        f"{label}: " + "; ".join(_format_error(e) for e in errors),
        hint='Expected {"commands": {name: handler | {"handler", "description"}}, '
        '"scenarios": {name: output | {"output", "description", "error"}}}; '
        "see config.example.json.",
    )


def _command_config(name: str, value: str | dict[str, Any]) -> CommandConfig:
    if isinstance(value, str):
        return CommandConfig(name=name, handler=value)
    return CommandConfig(
        name=name,
        handler=value["handler"],
        description=value.get("description", ""),
    )


def _scenario_config(name: str, value: str | dict[str, Any]) -> ScenarioConfig:
    if isinstance(value, str):
        return ScenarioConfig(name=name, output=(value,))
    output = value.get("output", ())
    return ScenarioConfig(
        name=name,
        output=(output,) if isinstance(output, str) else tuple(output),
        description=value.get("description", ""),
        error=value.get("error"),
    )
