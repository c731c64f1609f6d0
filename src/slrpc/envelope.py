""" Construction of the per-call request envelope.

    The remote API has no notion of protocol-level headers; authentication
    and query shaping travel as a synthetic first parameter of the call,
    a struct with a single ``headers`` member. Everything here is a pure
    function of the session, the service name, and the call options.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from . import json
from .errors import FilterEncodingError
from .options import Options, wrap_mask


AUTHENTICATE = "authenticate"
OBJECT_MASK = "SoftLayer_ObjectMask"
RESULT_LIMIT = "resultLimit"


def init_parameters_key(service: str) -> str:
    return f"{service}InitParameters"


def object_filter_key(service: str) -> str:
    return f"{service}ObjectFilter"


@dataclass
class Envelope:
    """ The outbound parameters for exactly one call. The *headers* become
        the first positional parameter; the caller's *args* follow it,
        in order and unmodified.
    """

    headers: Dict[str, Any]
    args: Tuple[Any, ...] = field(default_factory=tuple)

    def params(self) -> List[Any]:
        params: List[Any] = [{"headers": self.headers}]
        params.extend(self.args)
        return params


def parse_filter(text: str) -> Dict[str, Any]:
    """ Decode the pre-serialized object filter *text* so that it can be
        embedded in the request as a structured value. Raises
        :class:`FilterEncodingError` if the text is not a JSON object.
    """

    try:
        decoded = json.loads(text)
    except json.errors as e:
        raise FilterEncodingError(f"error encoding object filter: {e}") from e

    if not isinstance(decoded, dict):
        raise FilterEncodingError(
            f"error encoding object filter: expected an object, got {type(decoded).__name__}"
        )

    return decoded


def build_headers(session, service: str, options: Optional[Options] = None) -> Dict[str, Any]:
    """ Return the header map for a call to *service* made with *session*
        and the supplied *options*.
    """

    if options is None:
        options = Options()

    headers: Dict[str, Any] = {
        AUTHENTICATE: {
            "username": session.username,
            "apiKey": session.api_key,
        },
    }

    if options.id is not None:
        headers[init_parameters_key(service)] = {"id": options.id}

    # Options.with_mask() already wraps the mask, but an Options instance
    # can also be constructed directly. wrap_mask() is idempotent.

    if options.mask:
        headers[OBJECT_MASK] = {"mask": wrap_mask(options.mask)}

    if options.filter:
        headers[object_filter_key(service)] = parse_filter(options.filter)

    if options.limit is not None:
        offset = options.offset if options.offset is not None else 0
        headers[RESULT_LIMIT] = {
            "limit": options.limit,
            "offset": offset,
        }

    return headers


def build(session, service: str, options: Optional[Options] = None, args: Sequence[Any] = ()) -> Envelope:
    headers = build_headers(session, service, options)
    return Envelope(headers=headers, args=tuple(args))
