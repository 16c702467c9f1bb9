# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ElementStore package - Ordered children container.

Example:
    >>> from genro_xmlresponse.store import ElementStore
    >>> store = ElementStore()
    >>> store.child('status', '2000')
    >>> store['status_0']
    '2000'
"""

from .core import ElementStore

__all__ = ["ElementStore"]
