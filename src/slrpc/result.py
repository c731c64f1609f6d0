""" Decoding of raw XML-RPC results into a caller-supplied shape.

    The *shape* argument accepted throughout slrpc describes what the
    caller expects a method to return. It may be:

    * None or :data:`typing.Any`, in which case the raw value is returned;
    * one of the primitive types (int, float, str, bool, dict, list),
      checked with isinstance();
    * a parameterized list such as ``List[int]`` or ``list[Account]``;
    * a parameterized tuple, either ``Tuple[int, ...]`` or positional
      such as ``Tuple[int, str]``;
    * a parameterized mapping such as ``Dict[str, int]``, whose keys and
      values are each decoded;
    * ``Optional[T]``;
    * any other class the raw value is already an instance of, notably
      :class:`datetime.datetime` for ``dateTime.iso8601`` members;
    * a dataclass, populated from an XML-RPC struct; members not named
      as dataclass fields are ignored;
    * any other callable, which is invoked with the raw value.

    Any mismatch raises :class:`slrpc.errors.DecodeError`.
"""

from __future__ import annotations

import dataclasses
import types
import typing
from typing import Any

from .errors import DecodeError


_primitives = (bool, int, float, str, bytes, dict, list)
_unions = tuple(u for u in (typing.Union, getattr(types, 'UnionType', None)) if u is not None)


def decode(value, shape=None, path='result'):
    """ Return *value* decoded according to *shape*. The *path* is only
        used to make error messages point at the offending member.
    """

    if shape is None or shape is Any:
        return value

    origin = typing.get_origin(shape)

    if origin in _unions:
        return _decode_union(value, shape, path)

    if origin is list:
        return _decode_sequence(value, shape, path)

    if origin is tuple:
        return _decode_tuple(value, shape, path)

    if origin is dict:
        return _decode_mapping(value, shape, path)

    if dataclasses.is_dataclass(shape) and isinstance(shape, type):
        return _decode_dataclass(value, shape, path)

    if shape in _primitives:
        return _decode_primitive(value, shape, path)

    # Values the unmarshaller already produced natively, such as the
    # datetime for a dateTime.iso8601 member, need no conversion.

    if isinstance(shape, type) and isinstance(value, shape):
        return value

    if callable(shape):
        try:
            return shape(value)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"{path}: {e}") from e

    raise DecodeError(f"{path}: unsupported result shape {shape!r}")


def _decode_primitive(value, shape, path):

    # bool is a subclass of int, but a boolean is never an acceptable
    # stand-in for a number. An int is acceptable where a float is
    # expected, XML-RPC does not distinguish 1.0 from 1 on every server.

    if shape is not bool and isinstance(value, bool):
        raise DecodeError(f"{path}: expected {shape.__name__}, got bool")

    if shape is float and isinstance(value, int):
        return float(value)

    if shape is list and isinstance(value, tuple):
        return list(value)

    if not isinstance(value, shape):
        raise DecodeError(f"{path}: expected {shape.__name__}, got {type(value).__name__}")

    return value


def _decode_union(value, shape, path):
    members = typing.get_args(shape)

    if value is None:
        if type(None) in members:
            return None
        raise DecodeError(f"{path}: unexpected nil")

    failures = []
    for member in members:
        if member is type(None):
            continue
        try:
            return decode(value, member, path)
        except DecodeError as e:
            failures.append(str(e))

    raise DecodeError('; '.join(failures))


def _decode_sequence(value, shape, path):
    if not isinstance(value, (list, tuple)):
        raise DecodeError(f"{path}: expected array, got {type(value).__name__}")

    arguments = typing.get_args(shape)
    element = arguments[0] if arguments else None

    return [decode(item, element, f"{path}[{index}]") for index, item in enumerate(value)]


def _decode_tuple(value, shape, path):
    if not isinstance(value, (list, tuple)):
        raise DecodeError(f"{path}: expected array, got {type(value).__name__}")

    arguments = typing.get_args(shape)

    # Tuple[int, ...] is homogeneous; Tuple[int, str] is positional.

    if len(arguments) == 2 and arguments[1] is Ellipsis:
        elements = [arguments[0]] * len(value)
    elif arguments == ((),):
        elements = []
    elif arguments:
        elements = list(arguments)
    else:
        elements = [None] * len(value)

    if len(elements) != len(value):
        raise DecodeError(f"{path}: expected {len(elements)} elements, got {len(value)}")

    return tuple(
        decode(item, element, f"{path}[{index}]")
        for index, (item, element) in enumerate(zip(value, elements))
    )


def _decode_mapping(value, shape, path):
    if not isinstance(value, dict):
        raise DecodeError(f"{path}: expected struct, got {type(value).__name__}")

    arguments = typing.get_args(shape)
    if len(arguments) != 2:
        return value

    key_shape, value_shape = arguments
    return {
        decode(key, key_shape, f"{path} key {key!r}"): decode(item, value_shape, f"{path}[{key!r}]")
        for key, item in value.items()
    }


def _decode_dataclass(value, shape, path):
    if not isinstance(value, dict):
        raise DecodeError(f"{path}: expected struct for {shape.__name__}, got {type(value).__name__}")

    try:
        hints = typing.get_type_hints(shape)
    except NameError:
        hints = {}

    kwargs = {}
    for field in dataclasses.fields(shape):
        if not field.init:
            continue

        if field.name not in value:
            if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                raise DecodeError(f"{path}: missing member {field.name!r} for {shape.__name__}")
            continue

        field_shape = hints.get(field.name)
        kwargs[field.name] = decode(value[field.name], field_shape, f"{path}.{field.name}")

    return shape(**kwargs)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
