"""XML-RPC over HTTP(S) request/response transport.

Each remote service is reached at ``<endpoint>/<service>``; one
:class:`Client` per service name is kept in a :class:`ClientPool` and
reused for every subsequent call, from any thread.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

import httpx

from .. import envelope
from .. import result as result_module
from ..errors import (
    ClientCreationError,
    TransportConnectionError,
    TransportHTTPError,
    TransportTimeout,
)
from ..options import Options
from . import codec
from .base import DEFAULT_TIMEOUT, Transport
from .debug import DebugTransport
from .pool import ClientPool, default_pool


Interceptor = Callable[[Optional[httpx.BaseTransport]], httpx.BaseTransport]


class Client:
    """Issue XML-RPC calls to a single service URL."""

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        try:
            parsed = httpx.URL(url)
        except (httpx.InvalidURL, TypeError) as exc:
            raise ClientCreationError(f"invalid service URL {url!r}: {exc}") from exc

        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise ClientCreationError(f"invalid service URL {url!r}: expected an absolute http(s) URL")

        self.url = url
        self.timeout = timeout
        self.http = httpx.Client(
            timeout=timeout,
            transport=transport,
            headers={"Content-Type": "text/xml"},
        )

    def call(self, method: str, params: Sequence[Any]) -> Any:
        """Send one ``methodCall`` and return the decoded response value."""

        body = codec.encode_call(method, params)

        try:
            response = self.http.post(self.url, content=body)
        except httpx.TimeoutException as exc:
            raise TransportTimeout(
                f"{method} @ {self.url}: no response in {self.timeout:.2f} sec"
            ) from exc
        except httpx.TransportError as exc:
            raise TransportConnectionError(f"{method} @ {self.url}: {exc}") from exc

        if not response.is_success:
            # Some servers deliver faults with an error status.
            fault = codec.decode_fault(response.content)
            if fault is not None:
                raise fault
            raise TransportHTTPError(response.status_code, response.reason_phrase)

        return codec.decode_response(response.content)

    def close(self) -> None:
        self.http.close()


class XmlRpcTransport(Transport):
    """ The dispatcher for XML-RPC calls.

        *timeout* overrides :data:`DEFAULT_TIMEOUT` for clients this
        transport creates. *pool* defaults to the process-wide pool.
        *http_transport* is the underlying :mod:`httpx` transport, handy for
        tests. *interceptor* wraps the HTTP transport of clients created for
        debug sessions; it defaults to :class:`DebugTransport`, and None
        disables tracing altogether.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        pool: Optional[ClientPool] = None,
        http_transport: Optional[httpx.BaseTransport] = None,
        interceptor: Optional[Interceptor] = DebugTransport,
    ):
        self.timeout = timeout
        self.pool = pool if pool is not None else default_pool
        self.http_transport = http_transport
        self.interceptor = interceptor

    def client(self, session, service: str) -> Client:
        """Return the pooled client for *service*, creating it if necessary."""

        def factory() -> Client:
            transport = self.http_transport
            if session.debug and self.interceptor is not None:
                transport = self.interceptor(transport)

            timeout = self.timeout if self.timeout else DEFAULT_TIMEOUT
            url = f"{session.endpoint.rstrip('/')}/{service}"

            try:
                return Client(url, timeout, transport)
            except ClientCreationError:
                raise
            except Exception as exc:
                raise ClientCreationError(
                    f"could not create an XML-RPC client for {service}: {exc}"
                ) from exc

        return self.pool.get_or_create(service, factory)

    def do_request(
        self,
        session,
        service: str,
        method: str,
        args: Sequence[Any] = (),
        options: Optional[Options] = None,
        result=None,
    ) -> Any:
        client = self.client(session, service)
        request = envelope.build(session, service, options, args)
        value = client.call(method, request.params())
        return result_module.decode(value, result)


__all__ = [
    "Client",
    "XmlRpcTransport",
]
