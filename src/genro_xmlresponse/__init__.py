# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-XmlResponse - Serialize nested data into XML response documents.

A lightweight, zero-dependency library that turns dicts, lists, iterables
and record objects into an XML element tree whose nesting mirrors the data,
for the Genro ecosystem (Genro Kyō).
"""

import logging

__version__ = "0.1.0"

from .document import XmlDocument
from .exceptions import (
    CyclicStructureError,
    FrozenDocumentError,
    UnsupportedTypeError,
    XmlResponseError,
)
from .formatter import FormattedResponse, XmlResponseFormatter, response_envelope
from .node import XmlElement
from .serializer import SerializerOptions, TreeSerializer, serialize
from .store import ElementStore
from .values import Flattenable, ValueKind, classify, type_basename

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Element tree
    "XmlDocument",
    "XmlElement",
    "ElementStore",
    # Serialization
    "TreeSerializer",
    "SerializerOptions",
    "serialize",
    "Flattenable",
    "ValueKind",
    "classify",
    "type_basename",
    # Output boundary
    "XmlResponseFormatter",
    "FormattedResponse",
    "response_envelope",
    # Exceptions
    "XmlResponseError",
    "UnsupportedTypeError",
    "CyclicStructureError",
    "FrozenDocumentError",
]
