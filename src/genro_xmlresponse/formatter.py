# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""XmlResponseFormatter - Output boundary towards an HTTP layer.

The formatter does not touch any HTTP object: it returns the body bytes
together with the content type, the charset and the headers a web layer
should attach to its response.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from .serializer import SerializerOptions, TreeSerializer


@dataclasses.dataclass(frozen=True)
class FormattedResponse:
    """Result of formatting a payload.

    Attributes:
        content: Encoded XML document, or None when the payload was None.
        content_type: Value for the Content-Type header.
        charset: The response charset.
        headers: Headers to set on the response.
    """

    content: bytes | None
    content_type: str
    charset: str
    headers: dict[str, str]


class XmlResponseFormatter:
    """Formats response payloads as XML.

    Args:
        content_type: Content-Type header value.
        encoding: XML encoding. If None, the response charset is used.
        serializer: TreeSerializer to use. A default one is built from
            **options when omitted.
        **options: SerializerOptions fields (root_tag, item_tag, ...).

    Example:
        >>> formatter = XmlResponseFormatter(root_tag='response')
        >>> result = formatter.format(response_envelope({'id': 1}))
        >>> result.headers['Content-Type']
        'application/xml'
    """

    def __init__(
        self,
        content_type: str = 'application/xml',
        encoding: str | None = None,
        serializer: TreeSerializer | None = None,
        **options: Any,
    ) -> None:
        self.content_type = content_type
        self.encoding = encoding
        self.serializer = serializer or TreeSerializer(SerializerOptions(**options))

    def format(self, data: Any, charset: str = 'UTF-8') -> FormattedResponse:
        """Format a payload.

        Args:
            data: The payload, usually a response envelope.
            charset: The charset of the response.

        Returns:
            FormattedResponse with the encoded document and headers.
        """
        encoding = charset if self.encoding is None else self.encoding
        headers: dict[str, str] = {}
        if 'charset' not in self.content_type.lower():
            headers['charset'] = charset
        headers['Content-Type'] = self.content_type

        content = None
        if data is not None:
            doc = self.serializer.serialize(data, encoding=encoding)
            content = doc.to_bytes()

        return FormattedResponse(
            content=content,
            content_type=self.content_type,
            charset=charset,
            headers=headers,
        )


def response_envelope(data: Any = None, status: int = 2000, message: str = 'OK') -> dict[str, Any]:
    """Build the conventional status/message/data envelope.

    Example:
        >>> response_envelope([1, 2])
        {'status': 2000, 'message': 'OK', 'data': [1, 2]}
    """
    return {'status': status, 'message': message, 'data': data}
