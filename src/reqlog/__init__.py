"""Structured per-request logging for ASGI applications."""
from reqlog.middleware import (
    LoggerConfig,
    LoggerConfigBuilder,
    RequestLoggingMiddleware,
    logger,
    logger_with_config,
    logger_with_level,
)

__all__ = [
    "LoggerConfig",
    "LoggerConfigBuilder",
    "RequestLoggingMiddleware",
    "logger",
    "logger_with_config",
    "logger_with_level",
]
