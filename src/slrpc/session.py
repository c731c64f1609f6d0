"""The caller-facing session: endpoint, credentials, and transport."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from . import config
from .options import Options
from .service import Service
from .transport.base import DEFAULT_TIMEOUT, Transport
from .transport.xmlrpc import XmlRpcTransport


_default_transport: Optional[Transport] = None
_default_lock = threading.Lock()


def default_transport() -> Transport:
    """Return the shared transport used by sessions without their own."""

    global _default_transport
    with _default_lock:
        if _default_transport is None:
            _default_transport = XmlRpcTransport()
        return _default_transport


@dataclass(frozen=True)
class Session:
    """ Connection details shared by many calls. A session is immutable;
        it is safe to use the same instance from any number of threads.

        *debug* requests verbose tracing of every exchange, credentials
        included, for clients created on behalf of this session. *transport*
        defaults to a process-wide :class:`XmlRpcTransport`.
    """

    endpoint: str = config.DEFAULT_ENDPOINT
    username: str = ""
    api_key: str = field(default="", repr=False)
    debug: bool = False
    transport: Optional[Transport] = None

    @classmethod
    def from_config(cls, path=None, environ=None) -> Session:
        """Build a session from the configuration file and environment."""

        settings = config.load(path, environ)

        transport = None
        if settings.timeout != DEFAULT_TIMEOUT:
            transport = XmlRpcTransport(timeout=settings.timeout)

        return cls(
            endpoint=settings.endpoint_url,
            username=settings.username,
            api_key=settings.api_key,
            debug=settings.debug,
            transport=transport,
        )

    def do_request(
        self,
        service: str,
        method: str,
        args: Sequence[Any] = (),
        options: Optional[Options] = None,
        result=None,
    ) -> Any:
        transport = self.transport
        if transport is None:
            transport = default_transport()
        return transport.do_request(self, service, method, args, options, result)

    def service(self, name: str) -> Service:
        return Service(self, name)


def invoke(
    session: Session,
    service: str,
    method: str,
    args: Sequence[Any] = (),
    options: Optional[Options] = None,
    result=None,
) -> Any:
    """ Call *method* on the remote *service* and return its result decoded
        according to *result* (see :mod:`slrpc.result`). Failures raise a
        subclass of :class:`slrpc.errors.SoftLayerError`; no call is ever
        retried.
    """

    return session.do_request(service, method, args, options, result)
