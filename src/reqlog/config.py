"""Service configuration loaded from environment variables."""
import logging
from typing import Literal

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from reqlog.middleware.config import LoggerConfig, LoggerConfigBuilder

LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

LevelName = Literal["debug", "info", "warning", "error", "critical"]


class Settings(BaseSettings):
    """Service configuration loaded from environment variables.

    Attributes:
        host: Bind address for the HTTP server.
        port: Port number for the HTTP server.
        debug: Lower the sink threshold to DEBUG and expose API docs.
        log_format: Renderer for log output, JSON or console.
        component: Component name bound to every request record.
        log_level: Fixed level for request records.
        include_request_headers: Attach request headers to request records.
        level_from_status: Derive the record level from the status code.
        excluded_paths_raw: Comma-separated paths that are not logged.
    """

    model_config = SettingsConfigDict(
        env_prefix="REQLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    log_format: Literal["json", "console"] = "json"

    component: str = "router"
    log_level: LevelName = "info"
    include_request_headers: bool = False
    level_from_status: bool = False
    excluded_paths_raw: str = "/api/v1/health/live"

    @computed_field
    @property
    def excluded_paths(self) -> list[str]:
        """Parse excluded paths from comma-separated string.

        Returns:
            List of request paths skipped by the logging middleware.
        """
        return [
            path.strip()
            for path in self.excluded_paths_raw.split(",")
            if path.strip()
        ]

    @property
    def sink_level(self) -> int:
        """Minimum level the process-wide sink lets through."""
        return logging.DEBUG if self.debug else logging.INFO

    def logger_config(self) -> LoggerConfig:
        """Build the request logging configuration from these settings.

        Returns:
            Frozen LoggerConfig for RequestLoggingMiddleware.
        """
        builder = LoggerConfigBuilder().with_logging_level(LEVELS[self.log_level])
        if self.include_request_headers:
            builder.with_request_headers_included()
        if self.level_from_status:
            builder.with_status_derived_level()
        return builder.with_excluded_paths(*self.excluded_paths).build()
