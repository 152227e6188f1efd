"""Shared pytest fixtures for typedconf tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from typedconf.convert.records import clear_descriptor_cache


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write YAML text to a file under tmp_path and return its path."""

    def _write(text: str, name: str = "config.yml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _fresh_descriptors() -> Generator[None]:
    """Derived record descriptors must not leak between tests."""
    yield
    clear_descriptor_cache()


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None]:
    """Drop handlers installed by configure_logging and restore log levels."""
    root = logging.getLogger()
    level = root.level
    package_level = logging.getLogger("typedconf").level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    logging.getLogger("typedconf").setLevel(package_level)
