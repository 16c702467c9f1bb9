# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""XmlDocument - Root element plus XML declaration metadata.

Rendering follows the DOM serialization conventions of XML response
formatters: a declaration line, then the root element with no indentation.
Leaves render as ``<tag>text</tag>`` (``<tag></tag>`` for empty text) and
branches without children as ``<tag/>``.

Example:
    >>> doc = XmlDocument(root_tag='response')
    >>> doc.root.append('status', '2000')
    >>> doc.to_xml()
    '<?xml version="1.0" encoding="UTF-8"?>\\n<response><status>2000</status></response>\\n'
"""

from __future__ import annotations

from typing import Any
from xml.sax import saxutils

from .node import XmlElement
from .store import ElementStore


class XmlDocument:
    """An XML document: declaration metadata and a single root element.

    The document owns a top-level ElementStore whose only child is the
    root element. Once frozen, no element can be added or changed.

    Attributes:
        version: Declared XML version.
        encoding: Declared encoding, also used by to_bytes().
    """

    __slots__ = ('version', 'encoding', '_store', '_root')

    def __init__(
        self,
        root_tag: str = 'response',
        version: str = '1.0',
        encoding: str = 'UTF-8',
    ) -> None:
        """Initialize an XmlDocument with an empty root element.

        Args:
            root_tag: Tag of the root element.
            version: XML version for the declaration.
            encoding: XML encoding for the declaration.
        """
        self.version = version
        self.encoding = encoding
        self._store = ElementStore()
        self._root = self._store.child(root_tag)

    def __repr__(self) -> str:
        return f"XmlDocument({self._root.tag!r}, version={self.version!r}, encoding={self.encoding!r})"

    def __getitem__(self, path: str) -> Any:
        """Path access below the root element.

        Example:
            >>> doc['data_0.item_0.name_0']
            'pic1'
        """
        return self._root.children[path]

    def __str__(self) -> str:
        return self.to_xml()

    @property
    def root(self) -> XmlElement:
        """The root element."""
        return self._root

    @property
    def frozen(self) -> bool:
        """True once the document is read-only."""
        return self._store.frozen

    def freeze(self) -> None:
        """Make the whole document read-only."""
        self._store.freeze()

    def count(self) -> int:
        """Number of elements in the document, root included."""
        return sum(1 for _ in self._store.walk())

    # ==================== Rendering ====================

    @property
    def declaration(self) -> str:
        """The XML declaration line."""
        return f'<?xml version="{self.version}" encoding="{self.encoding}"?>'

    def _element_to_xml(self, node: XmlElement, parts: list[str]) -> None:
        """Recursively append the markup of an element to parts."""
        tag = node.tag
        if node.is_leaf:
            parts.append(f"<{tag}>{saxutils.escape(node.value)}</{tag}>")
            return
        if not len(node.value):
            parts.append(f"<{tag}/>")
            return
        parts.append(f"<{tag}>")
        for child in node.value:
            self._element_to_xml(child, parts)
        parts.append(f"</{tag}>")

    def to_xml(self, declaration: bool = True) -> str:
        """Render the document as text.

        Args:
            declaration: If False, omit the XML declaration line.

        Returns:
            The XML text, newline terminated.
        """
        parts: list[str] = []
        self._element_to_xml(self._root, parts)
        body = ''.join(parts)
        if declaration:
            return f"{self.declaration}\n{body}\n"
        return f"{body}\n"

    def to_bytes(self) -> bytes:
        """Render the document encoded with the declared encoding.

        Characters the encoding cannot represent are written as
        character references.
        """
        return self.to_xml().encode(self.encoding, 'xmlcharrefreplace')
