"""Abstract transport provider contract.

The request pipeline never touches sockets, DNS, or TLS itself. It drives a
:class:`TransportProvider` through a fixed sequence of calls -- open a
session, connect, open a request, attach headers, send, receive, query the
status and headers, read the body -- and closes every resource it acquired
through :meth:`TransportProvider.close`.

Providers report failure through return values (``None`` or ``False``),
never by raising. Resources returned by the ``open_*``/``connect`` methods
are opaque to the pipeline; it only passes them back to the same provider.

See Also:
    :class:`~synclient.transport.httpx_transport.HttpxTransport` for the
    production provider.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Union


class TransportProvider(ABC):
    """Interface every transport provider must implement."""

    @abstractmethod
    def open_session(self, identifier: str) -> Optional[Any]:
        """Open a session identified by *identifier* (the user agent).

        Returns:
            A session resource, or ``None`` on failure.
        """

    @abstractmethod
    def connect(self, session: Any, host: str, port: int) -> Optional[Any]:
        """Bind a connection to *host*:*port* within *session*.

        Returns:
            A connection resource, or ``None`` on failure.
        """

    @abstractmethod
    def open_request(
        self, connection: Any, method: str, path: str, secure: bool
    ) -> Optional[Any]:
        """Open a request for *method* and *path* (query included) on *connection*.

        Args:
            connection: A resource returned by :meth:`connect`.
            method: The HTTP verb.
            path: Request target, e.g. ``/a/b?q=1``.
            secure: Whether the exchange must use TLS.

        Returns:
            A request resource, or ``None`` on failure.
        """

    @abstractmethod
    def add_headers(self, request: Any, block: str) -> bool:
        """Attach a ``Key: Value\\r\\n`` header block to *request*."""

    @abstractmethod
    def send(self, request: Any, body: Optional[bytes]) -> bool:
        """Send *request* with *body* (``None`` or empty for no payload)."""

    @abstractmethod
    def receive(self, request: Any) -> bool:
        """Block until the response head for *request* is available."""

    @abstractmethod
    def query_status_code(self, request: Any) -> Optional[int]:
        """Return the numeric status code, or ``None`` on failure."""

    @abstractmethod
    def query_raw_headers(self, request: Any) -> Optional[Union[str, bytes]]:
        """Return the raw response head, status line first.

        Returns:
            The header block as text (or UTF-8 bytes), or ``None`` on
            failure.
        """

    @abstractmethod
    def read_chunk(self, request: Any, size: int) -> Optional[bytes]:
        """Read up to *size* body bytes.

        Returns:
            The next chunk, ``b""`` once the body is exhausted, or ``None``
            if the read failed.
        """

    @abstractmethod
    def close(self, resource: Any) -> None:
        """Close a session, connection, or request resource."""
