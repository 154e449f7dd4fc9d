"""Process-wide logging configuration tests."""

import logging
from collections.abc import Iterator

import pytest
import structlog

from reqlog.logging import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


def test_json_renderer_by_default() -> None:
    configure_logging(logging.WARNING)

    config = structlog.get_config()
    assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)
    assert logging.getLogger("uvicorn.access").disabled is True


def test_console_renderer() -> None:
    configure_logging(logging.DEBUG, "console")

    config = structlog.get_config()
    assert isinstance(config["processors"][-1], structlog.dev.ConsoleRenderer)


def test_threshold_filters_records(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(logging.WARNING)
    log = structlog.get_logger()

    log.info("hidden")
    log.warning("shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert '"event": "shown"' in out
