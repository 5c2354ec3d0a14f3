"""Single source of truth for the cmdsim version string."""

__version__: str = "0.1.0"
