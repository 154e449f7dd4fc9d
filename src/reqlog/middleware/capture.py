"""Pass-through ASGI send wrapper that observes the response."""
from starlette.types import Message, Send

DEFAULT_STATUS = 200


class ResponseCapture:
    """Forward every message to the real send while recording metadata.

    Attributes:
        bytes_written: Total body bytes passed through.
        started: Whether the response start message has been sent.
    """

    def __init__(self, send: Send) -> None:
        """Wrap the server's send callable.

        Args:
            send: ASGI send callable of the current request.
        """
        self._send = send
        self._status: int | None = None
        self.bytes_written = 0

    @property
    def started(self) -> bool:
        return self._status is not None

    @property
    def status_code(self) -> int:
        """First status sent, or 200 if the app never sent one."""
        return self._status if self._status is not None else DEFAULT_STATUS

    async def __call__(self, message: Message) -> None:
        if message["type"] == "http.response.start":
            # Headers go out once; a repeated start keeps the first status.
            if self._status is None:
                self._status = message["status"]
        elif message["type"] == "http.response.body":
            self.bytes_written += len(message.get("body", b""))
        await self._send(message)
