# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""XmlElement node class."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .exceptions import FrozenDocumentError

if TYPE_CHECKING:
    from .store import ElementStore


class XmlElement:
    """An element in an XML document tree.

    Each element has:
    - label: Unique key within its parent store (auto-generated as tag_N)
    - tag: The XML tag name, used verbatim when rendering
    - value: Either a text string (leaf) or an ElementStore (children)
    - parent: Reference to the containing ElementStore

    An element carries children or text, never both.

    Example:
        >>> node = XmlElement('name_0', 'name', 'pic1')
        >>> node.tag
        'name'
        >>> node.text
        'pic1'
    """

    __slots__ = ('label', 'tag', 'value', 'parent')

    def __init__(
        self,
        label: str,
        tag: str,
        value: str | ElementStore | None = None,
        parent: ElementStore | None = None,
    ) -> None:
        """Initialize an XmlElement.

        Args:
            label: The element's unique key in its parent.
            tag: The XML tag name.
            value: Text payload, or ElementStore for children. If None,
                an empty children store is created.
            parent: The ElementStore containing this element.
        """
        from .store import ElementStore

        self.label = label
        self.tag = tag
        self.parent = parent
        if value is None:
            value = ElementStore(parent=self)
        self.value = value

    def __repr__(self) -> str:
        from .store import ElementStore
        value_repr = (
            f"ElementStore({len(self.value)})"
            if isinstance(self.value, ElementStore)
            else repr(self.value)
        )
        return f"XmlElement({self.tag!r}, label={self.label!r}, value={value_repr})"

    @property
    def is_branch(self) -> bool:
        """True if this element holds a children store."""
        from .store import ElementStore
        return isinstance(self.value, ElementStore)

    @property
    def is_leaf(self) -> bool:
        """True if this element holds a text payload."""
        return not self.is_branch

    @property
    def children(self) -> ElementStore:
        """The children store.

        Raises:
            ValueError: If the element is a leaf.
        """
        if not self.is_branch:
            raise ValueError(f"Element '{self.label}' is a leaf")
        return self.value

    @property
    def text(self) -> str | None:
        """Text payload, or None for a branch."""
        return None if self.is_branch else self.value

    @property
    def frozen(self) -> bool:
        """True if the containing document is read-only."""
        if self.is_branch:
            return self.value.frozen
        return self.parent is not None and self.parent.frozen

    @property
    def path(self) -> str:
        """Dotted label path below the document root element."""
        labels = []
        node: XmlElement | None = self
        while node is not None and node.parent is not None:
            if node.parent.parent is None:
                break
            labels.append(node.label)
            node = node.parent.parent
        return '.'.join(reversed(labels))

    def set_text(self, text: str) -> None:
        """Turn this element into a leaf holding text.

        Args:
            text: The text payload.

        Raises:
            ValueError: If the element already has children.
            FrozenDocumentError: If the document is read-only.
        """
        if self.frozen:
            raise FrozenDocumentError(f"Element '{self.label}' is read-only")
        if self.is_branch and len(self.value):
            raise ValueError(
                f"Element '{self.label}' has children, cannot set text"
            )
        self.value = text

    def append(self, tag: str, text: str | None = None) -> XmlElement:
        """Append a child element. Shortcut for children.child()."""
        return self.children.child(tag, text)
