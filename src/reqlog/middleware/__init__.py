"""Request logging middleware and its configuration."""
from reqlog.middleware.capture import ResponseCapture
from reqlog.middleware.config import LoggerConfig, LoggerConfigBuilder
from reqlog.middleware.logging import (
    RequestLoggingMiddleware,
    level_for_status,
    logger,
    logger_with_config,
    logger_with_level,
    standard_level,
)

__all__ = [
    "LoggerConfig",
    "LoggerConfigBuilder",
    "RequestLoggingMiddleware",
    "ResponseCapture",
    "level_for_status",
    "logger",
    "logger_with_config",
    "logger_with_level",
    "standard_level",
]
