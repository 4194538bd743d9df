"""Transport providers for synclient.

Classes:
    :class:`TransportProvider` -- the staged contract the request pipeline
    drives (session, connection, request, send, receive, read).
    :class:`HttpxTransport` -- the default provider, backed by :mod:`httpx`.
"""

from synclient.transport.base import TransportProvider
from synclient.transport.httpx_transport import HttpxTransport

__all__ = ["TransportProvider", "HttpxTransport"]
