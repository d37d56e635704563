"""Pytest configuration and fixtures

Provides shared fixtures for all tests: a clean environment, settings,
an in-process web server and a logger that records what it is given.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from secpipe_demo.config import Settings, load_settings, reset_settings  # noqa: E402
from secpipe_demo.expression import ArithmeticEvaluator  # noqa: E402
from secpipe_demo.logger import Logger  # noqa: E402
from secpipe_demo.web_server import SecpipeWebServer  # noqa: E402

_ENV_VARS = [
    "PORT",
    "SECPIPE_HOST",
    "SECPIPE_PORT",
    "SECPIPE_REFLECT_ESCAPE_HTML",
]


class RecordingLogger(Logger):
    """Logger that keeps every call for later assertions."""

    def __init__(self):
        self.records: List[Tuple[str, str, Dict[str, Any]]] = []

    def _record(self, level: str, message: str, **kwargs: Any) -> None:
        self.records.append((level, message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._record("debug", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._record("info", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._record("warning", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._record("error", message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._record("critical", message, **kwargs)

    def messages(self, level: str) -> List[str]:
        return [message for lvl, message, _ in self.records if lvl == level]


@pytest.fixture(scope="function", autouse=True)
def clean_environment(monkeypatch):
    """
    Remove service variables from the environment for each test

    Tests that need a variable set it with monkeypatch.setenv. Cached
    settings are dropped before and after so nothing leaks between tests.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()

    yield

    reset_settings()


@pytest.fixture
def settings() -> Settings:
    """Default settings (no environment overrides)."""
    return load_settings()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture(scope="session")
def evaluator() -> ArithmeticEvaluator:
    return ArithmeticEvaluator()


@pytest.fixture
def server(settings, evaluator, recording_logger) -> SecpipeWebServer:
    """Web server built from default settings."""
    return SecpipeWebServer(settings=settings, evaluator=evaluator, logger=recording_logger)


@pytest.fixture
def escaping_server(monkeypatch, evaluator, recording_logger) -> SecpipeWebServer:
    """Web server with HTML escaping enabled on /reflect."""
    monkeypatch.setenv("SECPIPE_REFLECT_ESCAPE_HTML", "true")
    settings = load_settings()
    return SecpipeWebServer(settings=settings, evaluator=evaluator, logger=recording_logger)
