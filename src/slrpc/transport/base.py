"""Transport interface.

This is the (small) contract that transport implementations should follow.
A :class:`slrpc.session.Session` hands every call to its transport.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from ..errors import (
    TransportConnectionError,
    TransportError,
    TransportHTTPError,
    TransportTimeout,
)
from ..options import Options


DEFAULT_TIMEOUT = 30.0


class Transport(ABC):
    """Minimal contract for a request/response transport."""

    @abstractmethod
    def do_request(
        self,
        session,
        service: str,
        method: str,
        args: Sequence[Any] = (),
        options: Optional[Options] = None,
        result=None,
    ) -> Any:
        """Invoke *method* on *service* and return the decoded result."""


__all__ = [
    "DEFAULT_TIMEOUT",
    "Transport",
    "TransportConnectionError",
    "TransportError",
    "TransportHTTPError",
    "TransportTimeout",
]
