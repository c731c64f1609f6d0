''' Wrapper module to select the most performant available library to handle
    the equivalent of :func:`json.loads`. Object filters arrive as JSON text
    and are decoded here before being embedded in a request; *errors* is the
    tuple of exceptions the selected library raises for malformed text.
'''

msgspec = None
orjson = None
json = None

try:
    import msgspec
except ImportError:
    pass

if msgspec is None:
    try:
        import orjson
    except ImportError:
        pass

if msgspec is None and orjson is None:
    import json


if msgspec is not None:
    loads = msgspec.json.Decoder().decode
    errors = (msgspec.DecodeError, ValueError)
elif orjson is not None:
    loads = orjson.loads
    errors = (orjson.JSONDecodeError, ValueError)
else:
    loads = json.loads
    errors = (ValueError,)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
