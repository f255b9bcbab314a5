"""
Pytest configuration for predicate tests.
"""

import logging

import pytest

from predicates.config import Config, reload_config
from predicates.utils.logger import setup_logger


@pytest.fixture(autouse=True)
def plain_config(monkeypatch):
    """Fresh config per test: plain-text rendering, default diff algorithm."""
    monkeypatch.setenv("PREDICATES_COLOR", "never")
    monkeypatch.delenv("PREDICATES_DIFF_ALGORITHM", raising=False)
    monkeypatch.delenv("PREDICATES_LOG_DIR", raising=False)
    monkeypatch.delenv("PREDICATES_LOG_LEVEL", raising=False)
    config = reload_config()
    setup_logger(config.log.level)
    yield config
    # Next access reloads; the test may have left invalid values in the env
    Config._instance = None


@pytest.fixture
def eval_log(caplog):
    """Capture soft-failure records from the evaluation channel."""
    caplog.set_level(logging.DEBUG, logger="predicates.eval")
    return caplog


@pytest.fixture
def hello_file(tmp_path):
    """Reference file containing "hello\\n"."""
    path = tmp_path / "ref.txt"
    path.write_bytes(b"hello\n")
    return path


@pytest.fixture
def write_file(tmp_path):
    """Factory writing bytes to a named file under tmp_path."""
    def _write(name: str, content: bytes):
        path = tmp_path / name
        path.write_bytes(content)
        return path
    return _write
