""" Request/response tracing for debug sessions.

    :class:`DebugTransport` wraps another :class:`httpx.BaseTransport` and
    logs every exchange verbatim, including the authentication header
    embedded in the request body. It must only ever be enabled by an
    explicit opt-in, such as a session with ``debug=True``.
"""

from __future__ import annotations

from typing import Optional

import httpx
from loguru import logger


def _dump_headers(headers: httpx.Headers) -> str:
    return "\n".join(f"{name}: {value}" for name, value in headers.items())


def dump_request(request: httpx.Request) -> str:
    body = request.read().decode("utf-8", errors="replace")
    return f"{request.method} {request.url}\n{_dump_headers(request.headers)}\n\n{body}"


def dump_response(response: httpx.Response) -> str:
    body = response.read().decode("utf-8", errors="replace")
    return f"{response.status_code} {response.reason_phrase}\n{_dump_headers(response.headers)}\n\n{body}"


class DebugTransport(httpx.BaseTransport):
    """Log requests and responses passing through a wrapped transport."""

    def __init__(self, transport: Optional[httpx.BaseTransport] = None):
        if transport is None:
            transport = httpx.HTTPTransport()
        self.transport = transport

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        logger.debug("->>>Request:\n{}", dump_request(request))

        try:
            response = self.transport.handle_request(request)
        except Exception as e:
            logger.debug("Error: {!r}", e)
            raise

        # Response.read() caches the body, so the client can still read it
        # after it has been logged here.

        logger.debug("<<<-Response:\n{}", dump_response(response))
        return response

    def close(self) -> None:
        self.transport.close()
