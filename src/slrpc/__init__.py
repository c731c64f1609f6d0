""" Python client transport for the SoftLayer XML-RPC API. Remote methods
    are addressed by service name and method name; authentication, object
    masks, object filters, and result limits travel in a header struct
    passed as the first parameter of every call.
"""

# Utility components.

from . import json
from . import errors

# Submodules used by multiple other components.

from . import config
from . import options
from . import envelope
from . import result
from . import transport

# Primary public-facing interfaces.

from .errors import (
    SoftLayerError,
    ClientCreationError,
    EncodingError,
    FilterEncodingError,
    TransportError,
    TransportTimeout,
    TransportConnectionError,
    TransportHTTPError,
    RemoteError,
    DecodeError,
)
from .options import Options
from .session import Session, invoke
from .service import Service
from .transport import ClientPool, XmlRpcTransport

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
