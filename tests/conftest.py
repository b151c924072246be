"""
Pytest configuration and fixtures for Monkey tests.
"""

import io

import pytest
from rich.console import Console

from monkey.core.config import MonkeyConfig, set_config


@pytest.fixture(autouse=True)
def reset_config():
    """Drop any global config a test installed."""
    yield
    set_config(None)


@pytest.fixture
def config():
    """Provide a default config, independent of the environment."""
    return MonkeyConfig()


@pytest.fixture
def console():
    """Provide a Rich console that records into a string buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def source_file(tmp_path):
    """Write Monkey source to a temporary file and return its path."""

    def _write(text: str, name: str = "input.mk"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
