# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ElementStore - Ordered container for the children of an XML element.

This module provides the ElementStore class, which holds the child elements
of an XmlElement in document order. Tag names may repeat among siblings, so
every child gets a unique label (tag_N) used for O(1) lookup and path access.

Key Features:
    - **Ordered storage**: Children kept in insertion (document) order
    - **O(1) lookup**: Internal dict-based storage keyed by label
    - **Path navigation**: Dotted paths ('data_0.item_1') and positional
      syntax ('#0.#1')
    - **Read-only mode**: A frozen store rejects new children

Path Syntax:
    - Dotted paths: 'data_0.item_0.name_0'
    - Positional: '#0' (first child), '#-1' (last child)
    - Combined: 'data_0.#1.url_0'

Example:
    >>> store = ElementStore()
    >>> photo = store.child('photo')
    >>> photo.append('name', 'pic1')
    >>> store['photo_0.name_0']
    'pic1'
"""

from __future__ import annotations

from typing import Any, Callable, Iterator

from ..exceptions import FrozenDocumentError
from ..node import XmlElement


class ElementStore:
    """An ordered container of XmlElement children with O(1) lookup.

    ElementStore provides:
    - child(tag, text): Append a child with an auto-generated label
    - get_node(path) / store[path]: Path-based access
    - walk(), nodes(), tags(): Inspection helpers

    Attributes:
        parent: The XmlElement that owns this store, or None for a
            top-level store.
    """

    __slots__ = ('_nodes', '_order', '_tag_counters', 'parent', '_frozen')

    def __init__(self, parent: XmlElement | None = None) -> None:
        """Initialize an ElementStore.

        Args:
            parent: The XmlElement that contains this store as its value.
        """
        self._nodes: dict[str, XmlElement] = {}
        self._order: list[XmlElement] = []
        self._tag_counters: dict[str, int] = {}
        self.parent = parent
        self._frozen = False

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        """Return string representation showing element labels."""
        return f"ElementStore({list(self._nodes.keys())})"

    def __len__(self) -> int:
        """Return the number of direct children in this store."""
        return len(self._order)

    def __iter__(self) -> Iterator[XmlElement]:
        """Iterate over direct children in document order."""
        return iter(self._order)

    def __contains__(self, label: str) -> bool:
        """Check if a label exists at this level or as a path."""
        if '.' not in label:
            return label in self._nodes
        try:
            self.get_node(label)
            return True
        except KeyError:
            return False

    @property
    def frozen(self) -> bool:
        """True if the store has been made read-only."""
        return self._frozen

    # ==================== Path Utilities ====================

    def _parse_path_segment(self, segment: str) -> tuple[bool, int | str]:
        """Parse a path segment, detecting positional index (#N) syntax.

        Args:
            segment: A single path segment (e.g., 'item_0' or '#0').

        Returns:
            Tuple of (is_positional, index_or_label).
        """
        if segment.startswith('#'):
            rest = segment[1:]
            if rest.lstrip('-').isdigit():
                return True, int(rest)
        return False, segment

    def _get_node_by_position(self, index: int) -> XmlElement:
        """Get element by positional index (supports negative indexing).

        Raises:
            KeyError: If index is out of range.
        """
        if index < 0:
            index = len(self._order) + index
        if index < 0 or index >= len(self._order):
            raise KeyError(f"Position #{index} out of range (0-{len(self._order)-1})")
        return self._order[index]

    def _next_label(self, tag: str) -> str:
        """Generate a unique tag_N label.

        Counter always increments (never reuses numbers).
        """
        n = self._tag_counters.get(tag, 0)
        self._tag_counters[tag] = n + 1
        return f"{tag}_{n}"

    def _insert_node(self, node: XmlElement) -> None:
        """Append an element to both _nodes dict and _order list.

        Raises:
            FrozenDocumentError: If the store is read-only.
        """
        if self._frozen:
            raise FrozenDocumentError(
                f"Cannot add '{node.tag}' to a read-only document"
            )
        self._nodes[node.label] = node
        self._order.append(node)

    def _htraverse(self, path: str) -> tuple[ElementStore, str]:
        """Traverse path down to the store holding its last segment.

        Args:
            path: Dotted path string.

        Returns:
            Tuple of (parent_store, final_segment).

        Raises:
            KeyError: If a segment is not found or is a leaf.
        """
        parts = path.split('.')
        current = self

        for i, part in enumerate(parts[:-1]):
            is_pos, key = self._parse_path_segment(part)
            if is_pos:
                node = current._get_node_by_position(key)
            else:
                if key not in current._nodes:
                    raise KeyError(f"Path segment '{key}' not found")
                node = current._nodes[key]

            if not node.is_branch:
                remaining = '.'.join(parts[i+1:])
                raise KeyError(f"'{part}' is a leaf, cannot access '{remaining}'")
            current = node.value

        return current, parts[-1]

    # ==================== Core API ====================

    def child(self, tag: str, text: str | None = None) -> XmlElement:
        """Append a child element with an auto-generated label.

        Args:
            tag: The XML tag name.
            text: If provided, creates a leaf holding this text;
                otherwise creates an empty branch.

        Returns:
            The new XmlElement.

        Example:
            >>> data = store.child('data')
            >>> data.children.child('item', 'first')
        """
        node = XmlElement(self._next_label(tag), tag, text, parent=self)
        self._insert_node(node)
        return node

    def get_node(self, path: str) -> XmlElement:
        """Get element at the given path.

        Raises:
            KeyError: If path not found.
        """
        if not path:
            raise KeyError("Empty path")

        parent_store, label = self._htraverse(path) if '.' in path else (self, path)
        is_pos, key = self._parse_path_segment(label)
        if is_pos:
            return parent_store._get_node_by_position(key)
        return parent_store._nodes[label]

    def get_item(self, path: str, default: Any = None) -> Any:
        """Get the value at the given path, or default if not found."""
        try:
            return self.get_node(path).value
        except KeyError:
            return default

    def __getitem__(self, path: str) -> Any:
        """Get value by path: text for leaves, ElementStore for branches.

        Raises:
            KeyError: If path not found.

        Example:
            >>> store['data_0.item_0.name_0']
            >>> store['#0.#1']  # positional access
        """
        return self.get_node(path).value

    def freeze(self) -> None:
        """Make this store and all descendant stores read-only."""
        self._frozen = True
        for node in self._order:
            if node.is_branch:
                node.value.freeze()

    # ==================== Iteration ====================

    def nodes(self) -> list[XmlElement]:
        """Return list of children in document order."""
        return list(self._order)

    def keys(self) -> list[str]:
        """Return list of child labels in document order."""
        return [n.label for n in self._order]

    def tags(self) -> list[str]:
        """Return list of child tags in document order."""
        return [n.tag for n in self._order]

    # ==================== Walk ====================

    def walk(
        self,
        callback: Callable[[XmlElement], Any] | None = None,
        _prefix: str = "",
    ) -> Iterator[tuple[str, XmlElement]] | None:
        """Walk the tree depth-first, in document order.

        Args:
            callback: Optional function to call on each element.
                If provided, walk returns None.

        Yields:
            Tuples of (path, element) if no callback provided.

        Example:
            >>> for path, node in store.walk():
            ...     print(path, node.tag)
        """
        if callback is not None:
            for node in self._order:
                callback(node)
                if node.is_branch:
                    node.value.walk(callback)
            return None

        def _walk_gen(store: ElementStore, prefix: str) -> Iterator[tuple[str, XmlElement]]:
            for node in store._order:
                path = f"{prefix}.{node.label}" if prefix else node.label
                yield path, node
                if node.is_branch:
                    yield from _walk_gen(node.value, path)

        return _walk_gen(self, _prefix)

