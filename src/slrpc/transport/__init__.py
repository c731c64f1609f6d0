"""Transport layer implementations."""

from .base import (
    DEFAULT_TIMEOUT,
    Transport,
    TransportError,
    TransportTimeout,
    TransportConnectionError,
    TransportHTTPError,
)
from .pool import ClientPool, default_pool
from .debug import DebugTransport
from .xmlrpc import Client, XmlRpcTransport
