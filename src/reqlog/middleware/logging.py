"""Request logging middleware."""
import json
import logging
import time
from collections.abc import Callable
from functools import partial

from starlette.datastructures import Headers
from starlette.types import ASGIApp, Receive, Scope, Send
from structlog.typing import FilteringBoundLogger

from reqlog.middleware.capture import ResponseCapture
from reqlog.middleware.config import LoggerConfig, LoggerConfigBuilder

REQUEST_ID_KEY = "request_id"

# Levels structlog can emit, highest first.
STANDARD_LEVELS = (
    logging.CRITICAL,
    logging.ERROR,
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
)

Transform = Callable[[ASGIApp], ASGIApp]

DEFAULT_CONFIG = LoggerConfigBuilder().build()


def level_for_status(status_code: int) -> int:
    """Map a response status to a log level.

    Args:
        status_code: Final HTTP status of the response.

    Returns:
        logging.ERROR for 5xx, logging.WARNING for 4xx, logging.INFO otherwise.
    """
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


def standard_level(level: int) -> int:
    """Floor a level to the nearest one structlog can emit.

    Args:
        level: Any integer level, e.g. 25 or a custom FATAL alias.

    Returns:
        The highest standard level at or below level, DEBUG at the bottom.
    """
    for known in STANDARD_LEVELS:
        if level >= known:
            return known
    return logging.DEBUG


def request_url(scope: Scope, headers: Headers) -> str:
    """Rebuild the absolute request URL as "<scheme>://<host><target>".

    Args:
        scope: ASGI HTTP scope.
        headers: Request headers parsed from the scope.

    Returns:
        Absolute URL including the query string when one was sent.
    """
    scheme = scope.get("scheme") or "http"
    host = headers.get("host")
    if not host:
        server = scope.get("server")
        if not server:
            host = ""
        elif server[1] is None:
            host = server[0]
        else:
            host = f"{server[0]}:{server[1]}"

    raw_path = scope.get("raw_path")
    target = raw_path.decode("latin-1") if raw_path else scope.get("path", "/")
    query = scope.get("query_string", b"")
    if query:
        target = f"{target}?{query.decode('latin-1')}"

    return f"{scheme}://{host}{target}"


def serialize_headers(headers: Headers) -> str:
    """Render request headers as a JSON object of name to value list."""
    grouped: dict[str, list[str]] = {}
    for key, value in headers.items():
        grouped.setdefault(key, []).append(value)
    return json.dumps(grouped, sort_keys=True)


class RequestLoggingMiddleware:
    """ASGI middleware emitting one structured record per HTTP request.

    The wrapped application sees the original scope and receive channel;
    its send channel is replaced with a ResponseCapture that forwards
    every message unchanged. The record is emitted after the application
    returns or raises, and exceptions are re-raised untouched.
    """

    def __init__(
        self,
        app: ASGIApp,
        name: str,
        sink: FilteringBoundLogger,
        config: LoggerConfig | None = None,
    ) -> None:
        """Initialize middleware with its sink and configuration.

        Args:
            app: Inner ASGI application.
            name: Component name bound to every record.
            sink: structlog logger receiving the records.
            config: Logging behavior. Defaults to constant INFO, no headers.
        """
        self.app = app
        self.name = name
        self.config = config if config is not None else DEFAULT_CONFIG
        self._log = sink.bind(component=name)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["path"] in self.config.excluded_paths:
            await self.app(scope, receive, send)
            return

        start = time.perf_counter_ns()
        capture = ResponseCapture(send)
        failed = False
        try:
            await self.app(scope, receive, capture)
        except BaseException:
            failed = True
            raise
        finally:
            duration = max(time.perf_counter_ns() - start, 1)
            status_code = capture.status_code
            if failed and not capture.started:
                status_code = 500
            self._emit(scope, status_code, capture.bytes_written, duration)

    def _level(self, status_code: int) -> int:
        if self.config.level_from_status:
            return level_for_status(status_code)
        return self.config.level

    def _emit(self, scope: Scope, status_code: int, nbytes: int, duration: int) -> None:
        headers = Headers(scope=scope)
        fields: dict[str, object] = {
            "method": scope["method"],
            "status": status_code,
            "bytes": nbytes,
            "duration": duration,
        }

        request_id = (scope.get("state") or {}).get(REQUEST_ID_KEY)
        if request_id is not None:
            fields["request_id"] = str(request_id)

        if self.config.include_request_headers:
            fields["request_headers"] = serialize_headers(headers)

        level = standard_level(self._level(status_code))
        self._log.log(level, request_url(scope, headers), **fields)


def logger_with_config(
    name: str, sink: FilteringBoundLogger, config: LoggerConfig
) -> Transform:
    """Build a transform wrapping an app in RequestLoggingMiddleware.

    Args:
        name: Component name bound to every record.
        sink: structlog logger receiving the records.
        config: Logging behavior shared by every request.

    Returns:
        Callable taking the inner app and returning the wrapped app.
    """
    return partial(RequestLoggingMiddleware, name=name, sink=sink, config=config)


def logger(name: str, sink: FilteringBoundLogger) -> Transform:
    """Wrap with the default configuration: always INFO, no headers."""
    return logger_with_config(name, sink, DEFAULT_CONFIG)


def logger_with_level(name: str, sink: FilteringBoundLogger, level: int) -> Transform:
    """Wrap with a fixed record level and no headers."""
    return logger_with_config(
        name, sink, LoggerConfigBuilder().with_logging_level(level).build()
    )
