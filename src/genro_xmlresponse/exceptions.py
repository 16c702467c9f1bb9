# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""XmlResponse exceptions."""

from __future__ import annotations

from typing import Any


class XmlResponseError(Exception):
    """Base exception for XmlResponse errors."""

    pass


class UnsupportedTypeError(XmlResponseError, TypeError):
    """Raised when a value has no XML representation.

    Attributes:
        value: The offending value.
        path: Dotted label path of the element being populated.
    """

    def __init__(self, value: Any, path: str = '') -> None:
        self.value = value
        self.path = path
        where = f" at '{path}'" if path else ''
        super().__init__(
            f"Cannot serialize value of type {type(value).__name__}{where}"
        )


class CyclicStructureError(XmlResponseError, ValueError):
    """Raised when the data is cyclic or nested deeper than allowed."""

    def __init__(self, message: str, depth: int = 0) -> None:
        self.depth = depth
        super().__init__(message)


class FrozenDocumentError(XmlResponseError):
    """Raised when a built document is modified."""

    pass
