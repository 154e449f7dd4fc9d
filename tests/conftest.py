"""Pytest configuration and fixtures."""

import logging
import sys
from collections.abc import Callable
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest
import structlog
from fastapi.testclient import TestClient
from structlog.testing import CapturingLogger, LogCapture
from structlog.typing import FilteringBoundLogger

from reqlog.app import create_app
from reqlog.config import Settings


def make_sink(capture: LogCapture, min_level: int = logging.DEBUG) -> FilteringBoundLogger:
    """Build an isolated structlog sink recording into capture.

    Nothing global is configured, so tests never share records.
    """
    return structlog.wrap_logger(
        CapturingLogger(),
        processors=[capture],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
    )


@pytest.fixture
def log_capture() -> LogCapture:
    """Fresh record capture per test."""
    return LogCapture()


@pytest.fixture
def sink(log_capture: LogCapture) -> FilteringBoundLogger:
    """Sink letting DEBUG and above through."""
    return make_sink(log_capture)


@pytest.fixture
def sink_factory(log_capture: LogCapture) -> Callable[[int], FilteringBoundLogger]:
    """Build sinks with a chosen minimum level sharing log_capture."""
    return lambda min_level: make_sink(log_capture, min_level)


@pytest.fixture
def settings() -> Settings:
    """Create test settings."""
    return Settings(
        host="127.0.0.1",
        port=8000,
        debug=True,
    )


@pytest.fixture
def client(settings: Settings) -> TestClient:
    """Create test client with configured app."""
    app = create_app(settings)
    return TestClient(app)
