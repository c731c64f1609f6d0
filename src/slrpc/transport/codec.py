"""XML-RPC codec for request parameters and responses."""

from __future__ import annotations

import xmlrpc.client
from typing import Any, Optional, Sequence
from xml.parsers.expat import ExpatError

from ..errors import DecodeError, EncodingError, RemoteError


MAXI8 = 2 ** 63 - 1
MINI8 = -2 ** 63


class Marshaller(xmlrpc.client.Marshaller):
    """ Marshaller that sends integers outside the 32-bit ``<int>`` range as
        ``<i8>`` instead of refusing them; range checks are left to the
        remote side. Only values beyond 64 bits cannot be encoded.
    """

    dispatch = dict(xmlrpc.client.Marshaller.dispatch)

    def dump_long(self, value, write):
        if xmlrpc.client.MININT <= value <= xmlrpc.client.MAXINT:
            tag = "int"
        elif MINI8 <= value <= MAXI8:
            tag = "i8"
        else:
            raise OverflowError("int exceeds 64-bit XML-RPC limits")
        write(f"<value><{tag}>{int(value)}</{tag}></value>\n")

    dispatch[int] = dump_long


def encode_call(method: str, params: Sequence[Any]) -> bytes:
    """Return the ``methodCall`` document for *method* and *params*."""

    marshaller = Marshaller("utf-8", allow_none=True)

    try:
        data = marshaller.dumps(tuple(params))
    except (TypeError, OverflowError) as exc:
        raise EncodingError(f"cannot encode parameters for {method}: {exc}") from exc

    body = (
        "<?xml version='1.0' encoding='utf-8'?>\n"
        "<methodCall>\n"
        f"<methodName>{xmlrpc.client.escape(method)}</methodName>\n"
        f"{data}"
        "</methodCall>\n"
    )
    return body.encode("utf-8")


def decode_response(data: bytes) -> Any:
    """Return the single value of a ``methodResponse`` document.

    A ``<fault>`` response raises :class:`RemoteError`; anything that is
    not a well-formed response raises :class:`DecodeError`.
    """

    try:
        values, _method = xmlrpc.client.loads(data, use_builtin_types=True)
    except xmlrpc.client.Fault as fault:
        raise RemoteError(fault.faultCode, fault.faultString) from None
    except (ExpatError, xmlrpc.client.ResponseError, ValueError, TypeError) as exc:
        raise DecodeError(f"malformed XML-RPC response: {exc}") from exc

    if len(values) > 1:
        raise DecodeError(f"expected a single response value, got {len(values)}")

    if values:
        return values[0]
    return None


def decode_fault(data: bytes) -> Optional[RemoteError]:
    """Return a :class:`RemoteError` if *data* is a fault, otherwise None."""

    try:
        decode_response(data)
    except RemoteError as exc:
        return exc
    except DecodeError:
        return None
    return None
