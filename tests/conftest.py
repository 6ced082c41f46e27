"""Pytest configuration and fixtures for grade-eval tests."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from grade_eval.core.config import CONFIG_FILENAME, Config


@pytest.fixture
def default_config() -> Config:
    """Config with built-in defaults."""
    return Config()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Factory fixture writing YAML content to tmp_path/grade-eval.yaml.

    Usage:
        def test_something(write_config):
            path = write_config("precision: 3\\n")
    """

    def _write(content: str, name: str = CONFIG_FILENAME) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def restore_root_log_level():
    """Restore the root logger level after CLI runs change it."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
