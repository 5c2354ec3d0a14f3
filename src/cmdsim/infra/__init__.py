"""Infrastructure layer: external system integration.

Reads the configuration file from disk.  Raw ``OSError``, JSON
decoding and schema validation errors are re-raised here as
:class:`~cmdsim.exceptions.ConfigError` subclasses.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from cmdsim.infra.config_loader import (
    CONFIG_SCHEMA,
    DEFAULT_CONFIG,
    CommandConfig,
    ScenarioConfig,
    SimulatorConfig,
    load_config,
    parse_config,
    resolve_config_path,
    validate_document,
)

__all__: list[str] = [
    "CONFIG_SCHEMA",
    "DEFAULT_CONFIG",
    "CommandConfig",
    "ScenarioConfig",
    "SimulatorConfig",
    "load_config",
    "parse_config",
    "resolve_config_path",
    "validate_document",
]
