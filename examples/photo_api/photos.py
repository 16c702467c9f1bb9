# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PhotoController - Example producer of XML responses.

A didactic example showing the two shapes a numerically keyed list can
take: plain dicts get ``<item>`` wrappers, Photo records are spliced as
sibling ``<Photo>`` elements.
"""

from __future__ import annotations

from dataclasses import dataclass

from genro_xmlresponse import XmlResponseFormatter, response_envelope


PHOTOS = {
    1: {'name': 'pic1', 'url': 'http://www.abc.com/pic/1.jpg'},
    2: {'name': 'pic2', 'url': 'http://www.abc.com/pic/2.jpg'},
}


@dataclass
class Photo:
    """A photo record."""

    name: str
    url: str


class PhotoController:
    """Controller returning response envelopes for photos.

    Example:
        >>> controller = PhotoController()
        >>> print(controller.render(controller.index()).content.decode())
    """

    def __init__(self, formatter: XmlResponseFormatter | None = None):
        self.formatter = formatter or XmlResponseFormatter()

    def index(self):
        return response_envelope(PHOTOS)

    def show(self, photo_id: int):
        return response_envelope(PHOTOS[photo_id])

    def records(self):
        return response_envelope([Photo(**p) for p in PHOTOS.values()])

    def render(self, envelope, charset: str = 'UTF-8'):
        return self.formatter.format(envelope, charset=charset)


if __name__ == '__main__':
    controller = PhotoController()
    for envelope in (controller.index(), controller.show(2), controller.records()):
        result = controller.render(envelope)
        print(result.headers)
        print(result.content.decode())
