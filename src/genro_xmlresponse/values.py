# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Value classification for the XML serializer.

Every value met during serialization falls into exactly one ValueKind:

- SCALAR: str, int, float, bool, None, Decimal, date/time/datetime, Enum
- CONTAINER: Mapping, list, tuple (list/tuple positions are integer keys)
- SEQUENCE: any other iterable (generators, sets, ranges, custom iterables)
- RECORD: Flattenable objects, dataclasses, named tuples, objects with
  ``__dict__`` or ``__slots__``
- UNSUPPORTED: streams, sockets, modules, classes, callables, bytes-like
  values and plain ``object()`` instances
"""

from __future__ import annotations

import dataclasses
import datetime
import io
import socket
import types
from collections.abc import Iterable, Iterator, Mapping
from decimal import Decimal
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class ValueKind(Enum):
    """The closed set of value kinds the serializer dispatches on."""

    SCALAR = 'scalar'
    CONTAINER = 'container'
    SEQUENCE = 'sequence'
    RECORD = 'record'
    UNSUPPORTED = 'unsupported'


@runtime_checkable
class Flattenable(Protocol):
    """Capability of records that flatten themselves before serialization.

    Example:
        >>> class Photo:
        ...     def __init__(self, name, url):
        ...         self.name, self.url = name, url
        ...     def to_container(self):
        ...         return {'name': self.name, 'url': self.url}
    """

    def to_container(self) -> Mapping[Any, Any] | list[Any] | tuple[Any, ...]:
        ...


_SCALAR_TYPES = (
    str, int, float, bool, type(None), Decimal,
    datetime.date, datetime.time, datetime.datetime, Enum,
)

_UNSUPPORTED_TYPES = (
    bytes, bytearray, memoryview,
    io.IOBase, socket.socket,
    types.ModuleType, type,
    types.FunctionType, types.BuiltinFunctionType,
    types.MethodType, types.CoroutineType,
)


def is_namedtuple(value: Any) -> bool:
    """True for instances of collections.namedtuple / typing.NamedTuple."""
    return isinstance(value, tuple) and hasattr(type(value), '_fields')


def _has_fields(value: Any) -> bool:
    if dataclasses.is_dataclass(value):
        return True
    if hasattr(value, '__dict__'):
        return True
    return bool(_slot_names(type(value)))


def _slot_names(cls: type) -> list[str]:
    """Slot names of cls and its bases, base classes first."""
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get('__slots__', ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in ('__dict__', '__weakref__') and name not in names:
                names.append(name)
    return names


def classify(value: Any) -> ValueKind:
    """Return the ValueKind of a value.

    Flattenable wins over every shape except scalars and unsupported
    types, so a custom iterable or mapping that declares to_container()
    is a RECORD.
    """
    if isinstance(value, _SCALAR_TYPES):
        return ValueKind.SCALAR
    if isinstance(value, _UNSUPPORTED_TYPES):
        return ValueKind.UNSUPPORTED
    if isinstance(value, Flattenable):
        return ValueKind.RECORD
    if is_namedtuple(value):
        return ValueKind.RECORD
    if isinstance(value, (Mapping, list, tuple)):
        return ValueKind.CONTAINER
    if isinstance(value, Iterable):
        return ValueKind.SEQUENCE
    if _has_fields(value):
        return ValueKind.RECORD
    return ValueKind.UNSUPPORTED


def is_index_key(key: Any) -> bool:
    """True if a container key is an integer index (bool excluded)."""
    return isinstance(key, int) and not isinstance(key, bool)


def scalar_text(value: Any) -> str:
    """Canonical text of a scalar.

    None gives '', booleans give 'true'/'false', dates use ISO format,
    Enum members render their value.
    """
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, Enum):
        return scalar_text(value.value)
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    return str(value)


def container_items(value: Any) -> Iterator[tuple[Any, Any]]:
    """Yield (key, value) entries of a container or iterable in order."""
    if isinstance(value, Mapping):
        yield from value.items()
    else:
        yield from enumerate(value)


def record_fields(value: Any) -> dict[Any, Any]:
    """Return the fields of a record in declaration order.

    Named tuples use _asdict(), dataclasses their declared fields, iterables
    their enumerated items, other objects their public instance attributes
    (``__dict__`` first, then slots).
    """
    if is_namedtuple(value):
        return dict(value._asdict())
    if dataclasses.is_dataclass(value):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, Iterable) and not isinstance(value, Mapping):
        return dict(enumerate(value))
    if isinstance(value, Mapping):
        return dict(value)

    fields: dict[Any, Any] = {}
    for name, item in getattr(value, '__dict__', {}).items():
        if not name.startswith('_'):
            fields[name] = item
    for name in _slot_names(type(value)):
        if name.startswith('_') or name in fields:
            continue
        if hasattr(value, name):
            fields[name] = getattr(value, name)
    return fields


def type_basename(value: Any) -> str:
    """Default tag namer: last segment of the value's qualified type name.

    Example:
        >>> type_basename(Photo('pic1', 'http://x/1.jpg'))
        'Photo'
    """
    return type(value).__qualname__.rsplit('.', 1)[-1]
