"""Request logging configuration and its builder."""
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict


class LoggerConfig(BaseModel):
    """Immutable request logging configuration.

    Attributes:
        level: Level used for every record unless level_from_status is set.
        include_request_headers: Attach the inbound headers to each record.
        level_from_status: Derive the level from the response status code.
        excluded_paths: Request paths passed through without a record.
    """

    model_config = ConfigDict(frozen=True)

    level: int = logging.INFO
    include_request_headers: bool = False
    level_from_status: bool = False
    excluded_paths: frozenset[str] = frozenset()


class LoggerConfigBuilder:
    """Fluent builder for LoggerConfig.

    Each modifier updates the staged values and returns the builder so
    calls can be chained. Inputs are not validated.
    """

    def __init__(self) -> None:
        self._staged: dict[str, Any] = {
            "level": logging.INFO,
            "include_request_headers": False,
            "level_from_status": False,
            "excluded_paths": frozenset(),
        }

    def with_logging_level(self, level: int) -> "LoggerConfigBuilder":
        """Log every request at a fixed level.

        Args:
            level: Stdlib logging level, e.g. logging.DEBUG.

        Returns:
            This builder.
        """
        self._staged["level"] = level
        return self

    def with_request_headers_included(self) -> "LoggerConfigBuilder":
        """Attach serialized request headers to each record."""
        self._staged["include_request_headers"] = True
        return self

    def with_status_derived_level(self) -> "LoggerConfigBuilder":
        """Pick the level from the status code: 5xx error, 4xx warning."""
        self._staged["level_from_status"] = True
        return self

    def with_excluded_paths(self, *paths: str) -> "LoggerConfigBuilder":
        """Skip logging for the given request paths.

        Args:
            paths: Exact request paths, e.g. "/api/v1/health/live".

        Returns:
            This builder.
        """
        self._staged["excluded_paths"] = self._staged["excluded_paths"] | frozenset(paths)
        return self

    def build(self) -> LoggerConfig:
        """Freeze the staged values.

        Returns:
            A LoggerConfig snapshot that later builder calls do not affect.
        """
        return LoggerConfig.model_construct(**self._staged)
