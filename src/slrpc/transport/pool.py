""" A cache of transport clients, one per remote service name.

    Clients are created on first use and reused for the lifetime of the
    pool. Entries are never invalidated: a cached client keeps the URL,
    timeout, and debug interception it was created with, even if a later
    session asks for something different.
"""

from __future__ import annotations

import atexit
import threading
from typing import Callable, Dict, Generic, Optional, TypeVar

from loguru import logger


ClientType = TypeVar("ClientType")


class ClientPool(Generic[ClientType]):
    """ Thread-safe map of service name to client. Lookup and insertion
        share a single lock; client construction happens while the lock is
        held, so exactly one client is ever created for a given service
        name and every racing caller receives the same instance.
        Construction must not perform network I/O.
    """

    def __init__(self):
        self._clients: Dict[str, ClientType] = {}
        self._lock = threading.Lock()

    def __contains__(self, service: str) -> bool:
        return service in self._clients

    def __len__(self) -> int:
        return len(self._clients)

    def get(self, service: str) -> Optional[ClientType]:
        return self._clients.get(service)

    def get_or_create(self, service: str, factory: Callable[[], ClientType]) -> ClientType:
        """ Return the client for *service*, invoking *factory* to create it
            if the pool does not have one yet. If *factory* raises, nothing
            is stored and the exception propagates to the caller.
        """

        with self._lock:
            client = self._clients.get(service)
            if client is None:
                client = factory()
                self._clients[service] = client
                logger.trace("created transport client for {}", service)
            return client

    def close(self) -> None:
        """ Close and discard every pooled client.
        """

        with self._lock:
            clients = list(self._clients.values())
            self._clients.clear()

        for client in clients:
            close = getattr(client, "close", None)
            if close is not None:
                close()


# The process-wide default pool, used by any transport that is not handed
# a pool of its own.

default_pool: ClientPool = ClientPool()


def _cleanup() -> None:
    default_pool.close()


atexit.register(_cleanup)
