"""Shared pytest fixtures and configuration for the cmdsim test suite.

Guidelines
----------
* No network access and no dependence on the caller's working directory.
* Output assertions go through ``capsys``; handlers print to stdout,
  errors go to stderr.
* The ``cmdsim`` logger is restored after every test because the CLI
  reconfigures it.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from cmdsim.exceptions import CmdsimError


class RecordingChannel:
    """Error channel that keeps every reported error for inspection."""

    def __init__(self) -> None:
        self.errors: list[CmdsimError] = []

    def report(self, error: CmdsimError) -> None:
        self.errors.append(error)


@pytest.fixture
def channel() -> RecordingChannel:
    return RecordingChannel()


@pytest.fixture(autouse=True)
def _isolate_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path,
) -> Iterator[None]:
    """Run every test in an empty directory with no config env var."""
    monkeypatch.delenv("CMDSIM_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)

    logger = logging.getLogger("cmdsim")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a JSON document (or raw text) to a file and return its path."""

    def _write(document: Any, name: str = "cmdsim.json") -> Path:
        path = tmp_path / name
        text = document if isinstance(document, str) else json.dumps(document)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
