"""
app/api/middleware.py

Request body size guard for upload endpoints.

The declared ``Content-Length`` is checked before the app sees the
request. Bodies without (or with an understated) length are counted as
they stream in; crossing the limit raises ``PayloadTooLargeError`` from
``receive()``, which surfaces wherever the controller reads the body.
"""

from __future__ import annotations

from typing import Iterable

from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from app.core.constants import MSG_PAYLOAD_TOO_LARGE
from app.core.exceptions import PayloadTooLargeError
from app.core.logger import get_logger

logger = get_logger(__name__)


class BodySizeLimitMiddleware:
    """
    Rejects oversized bodies with 413 ``{"message": "File is too large"}``.

    Args:
        app       : The wrapped ASGI application.
        max_bytes : Largest accepted body, in bytes.
        paths     : Request paths the limit applies to.
    """

    def __init__(self, app: ASGIApp, max_bytes: int, paths: Iterable[str]) -> None:
        self.app = app
        self.max_bytes = max_bytes
        self.paths = frozenset(paths)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["path"] not in self.paths:
            await self.app(scope, receive, send)
            return

        declared = _content_length(scope)
        if declared is not None and declared > self.max_bytes:
            logger.warning(
                "Rejected %s — Content-Length %d exceeds %d.",
                scope["path"],
                declared,
                self.max_bytes,
            )
            response = JSONResponse(status_code=413, content={"message": MSG_PAYLOAD_TOO_LARGE})
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_bytes:
                    raise PayloadTooLargeError(
                        f"request body exceeded {self.max_bytes} byte(s)"
                    )
            return message

        await self.app(scope, limited_receive, send)


def _content_length(scope: Scope) -> int | None:
    for name, value in scope.get("headers", []):
        if name == b"content-length":
            try:
                return int(value)
            except ValueError:
                return None
    return None
