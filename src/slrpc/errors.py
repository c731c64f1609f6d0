"""Exception types raised by slrpc.

Every failure in a call is raised as one of these; nothing is retried.
"""


class SoftLayerError(Exception):
    """Base class for all slrpc errors."""


class ClientCreationError(SoftLayerError):
    """A transport client could not be created for a service."""


class EncodingError(SoftLayerError):
    """The outbound request could not be encoded."""


class FilterEncodingError(EncodingError):
    """The object filter is not valid JSON object text."""


# Transport errors

class TransportError(SoftLayerError):
    """Base class for all transport-layer errors."""


class TransportTimeout(TransportError):
    """A request did not receive a timely response."""


class TransportConnectionError(TransportError):
    """The transport could not establish or maintain a connection."""


class TransportHTTPError(TransportError):
    """The endpoint answered with a non-success HTTP status and no fault."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP {status_code} {reason}".rstrip())


class RemoteError(SoftLayerError):
    """Raised when the remote endpoint answers with an XML-RPC fault."""

    code: str
    message: str

    def __init__(self, code, message: str) -> None:
        """Initialize a remote fault wrapper.

        :param code: Fault code, usually the remote exception class name.
        :param message: Fault string sent by the remote side.
        """
        self.code = str(code)
        self.message = message
        super().__init__(f"{self.code}: {message}")


class DecodeError(SoftLayerError):
    """The response could not be decoded into the requested shape."""
