# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeSerializer - Recursive conversion of nested data into an XmlDocument.

The element tree mirrors the shape of the data:

- string keys become tags verbatim: ``{'status': 2000}`` gives
  ``<status>2000</status>``
- integer keys with scalar or container values get an item wrapper:
  ``['a', 'b']`` gives ``<item>a</item><item>b</item>``
- integer keys with record values are spliced into the parent, so a list of
  Photo records gives sibling ``<Photo>`` elements with no wrapper
- records add one element named by the tag namer (the short type name by
  default), filled from ``to_container()`` or from their own fields

Example:
    >>> doc = serialize({'status': 2000, 'message': 'OK', 'data': [1, 2]})
    >>> doc.to_xml(declaration=False)
    '<response><status>2000</status><message>OK</message><data><item>1</item><item>2</item></data></response>\\n'
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable

from .document import XmlDocument
from .exceptions import CyclicStructureError, UnsupportedTypeError
from .node import XmlElement
from .values import (
    ValueKind,
    Flattenable,
    classify,
    container_items,
    is_index_key,
    record_fields,
    scalar_text,
    type_basename,
)

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class SerializerOptions:
    """Options of a serialize call.

    Attributes:
        root_tag: Tag of the root element.
        item_tag: Tag of entries whose key is an integer index.
        iterables_as_containers: If True, iterables that are neither
            containers nor Flattenable are serialized entry by entry;
            otherwise they go through the record path.
        max_depth: Maximum nesting of containers and records.
        tag_namer: Function returning the tag of a record element.
        version: XML version for the declaration.
        encoding: XML encoding for the declaration.
    """

    root_tag: str = 'response'
    item_tag: str = 'item'
    iterables_as_containers: bool = True
    max_depth: int = 256
    tag_namer: Callable[[Any], str] = type_basename
    version: str = '1.0'
    encoding: str = 'UTF-8'


class TreeSerializer:
    """Serializer turning arbitrary nested data into an XmlDocument.

    Options given to the constructor are defaults; each serialize() call
    may override any of them.

    Example:
        >>> serializer = TreeSerializer(root_tag='photos')
        >>> doc = serializer.serialize(photos, item_tag='photo')
        >>> doc.to_bytes()
    """

    def __init__(self, options: SerializerOptions | None = None, **kwargs: Any) -> None:
        """Initialize a TreeSerializer.

        Args:
            options: Base options. Defaults to SerializerOptions().
            **kwargs: Option overrides applied on top of options.

        Raises:
            TypeError: If an option name is unknown.
        """
        options = options or SerializerOptions()
        self.options = dataclasses.replace(options, **kwargs) if kwargs else options

    def serialize(self, data: Any, **overrides: Any) -> XmlDocument:
        """Serialize data into a new, frozen XmlDocument.

        Args:
            data: The root value.
            **overrides: Per-call option overrides.

        Returns:
            The complete document.

        Raises:
            UnsupportedTypeError: If a value has no XML representation.
            CyclicStructureError: If data is cyclic or nested too deeply.
            Exception: Whatever a record's to_container() raises.
        """
        options = dataclasses.replace(self.options, **overrides) if overrides else self.options
        doc = XmlDocument(
            root_tag=options.root_tag,
            version=options.version,
            encoding=options.encoding,
        )
        logger.debug("Serializing %s into <%s>", type(data).__name__, options.root_tag)
        ctx = self._Context(options)
        try:
            self._build(doc.root, data, ctx)
            doc.freeze()
        except RecursionError as exc:
            raise CyclicStructureError(
                f"Nesting exceeds the interpreter recursion limit at depth {ctx.deepest}",
                depth=ctx.deepest,
            ) from exc
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Built <%s> with %d elements", options.root_tag, doc.count())
        return doc

    # ==================== Build ====================

    class _Context:
        """State of one serialize call: options and the active path."""

        __slots__ = ('options', 'active', 'depth', 'deepest')

        def __init__(self, options: SerializerOptions):
            self.options = options
            self.active: set[int] = set()
            self.depth = 0
            self.deepest = 0

        def enter(self, data: Any) -> None:
            if id(data) in self.active:
                raise CyclicStructureError(
                    f"Cyclic reference to {type(data).__name__} at depth {self.depth}",
                    depth=self.depth,
                )
            if self.depth >= self.options.max_depth:
                raise CyclicStructureError(
                    f"Nesting deeper than {self.options.max_depth} levels",
                    depth=self.depth,
                )
            self.active.add(id(data))
            self.depth += 1
            self.deepest = max(self.deepest, self.depth)

        def leave(self, data: Any) -> None:
            self.active.discard(id(data))
            self.depth -= 1

    def _build(self, element: XmlElement, data: Any, ctx: _Context) -> None:
        """Attach data under element."""
        kind = classify(data)
        as_container = kind is ValueKind.CONTAINER or (
            kind is ValueKind.SEQUENCE and ctx.options.iterables_as_containers
        )

        if as_container:
            ctx.enter(data)
            try:
                self._build_container(element, data, ctx)
            finally:
                ctx.leave(data)
        elif kind is ValueKind.RECORD or kind is ValueKind.SEQUENCE:
            ctx.enter(data)
            try:
                self._build_record(element, data, ctx)
            finally:
                ctx.leave(data)
        elif kind is ValueKind.SCALAR:
            element.set_text(scalar_text(data))
        else:
            raise UnsupportedTypeError(data, element.path)

    def _build_container(self, element: XmlElement, data: Any, ctx: _Context) -> None:
        """Append one element per entry; spliced records get no wrapper."""
        item_tag = ctx.options.item_tag
        for key, value in container_items(data):
            index = is_index_key(key)
            if index and classify(value) in (ValueKind.RECORD, ValueKind.SEQUENCE):
                self._build(element, value, ctx)
                continue
            child = element.append(item_tag if index else str(key))
            self._build(child, value, ctx)

    def _build_record(self, element: XmlElement, data: Any, ctx: _Context) -> None:
        """Append one element named after the record and fill it."""
        child = element.append(ctx.options.tag_namer(data))
        if isinstance(data, Flattenable):
            logger.debug("Flattening %s", type(data).__name__)
            self._build(child, data.to_container(), ctx)
        else:
            self._build(child, record_fields(data), ctx)


def serialize(data: Any, **options: Any) -> XmlDocument:
    """Serialize data with a default TreeSerializer.

    Args:
        data: The root value.
        **options: SerializerOptions fields.

    Returns:
        The complete, frozen XmlDocument.
    """
    return TreeSerializer(**options).serialize(data)
