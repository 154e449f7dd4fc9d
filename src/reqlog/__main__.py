"""Entry point for the demo server."""

import contextlib

import structlog
import uvicorn

from reqlog.app import create_app
from reqlog.config import Settings
from reqlog.logging import configure_logging

logger = structlog.get_logger()


def main() -> None:
    """Entry point for python -m reqlog."""
    settings = Settings()
    configure_logging(settings.sink_level, settings.log_format)

    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level="warning",
        access_log=False,
    )
    server = uvicorn.Server(config)

    logger.info("server_startup", host=settings.host, port=settings.port)
    with contextlib.suppress(KeyboardInterrupt):
        server.run()
    logger.info("server_shutdown")


if __name__ == "__main__":
    main()
