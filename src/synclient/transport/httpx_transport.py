"""Transport provider backed by :mod:`httpx`.

This is the provider :class:`~synclient.client.HttpClient` uses unless told
otherwise. It maps the staged provider contract onto :class:`httpx.Client`:

- **Session** -- a fresh :class:`httpx.Client` with the identifier as its
  ``User-Agent``, redirects disabled. It is closed with the session handle,
  so no connection outlives the call that opened it.
- **Connection** -- a (host, port) binding; httpx connects lazily when the
  request is sent.
- **Request** -- method, target URL, and attached headers. :meth:`send`
  dispatches it with ``stream=True``, which returns once the response head
  has arrived; the body is then pulled in chunks by :meth:`read_chunk`.
  Chunks are the bytes as received: a ``Content-Encoding`` such as gzip is
  left in place, not decoded.

httpx exceptions are logged and turned into ``None``/``False`` results as
the provider contract requires.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

import httpx

from synclient.headers import split_header_line
from synclient.transport.base import TransportProvider

logger = logging.getLogger(__name__)


@dataclass
class _Session:
    client: httpx.Client


@dataclass
class _Connection:
    session: _Session
    host: str
    port: int


@dataclass
class _PendingRequest:
    connection: _Connection
    method: str
    url: httpx.URL
    headers: list[tuple[str, str]] = field(default_factory=list)
    response: Optional[httpx.Response] = None
    chunks: Optional[Iterator[bytes]] = None


class HttpxTransport(TransportProvider):
    """Synchronous transport provider built on :class:`httpx.Client`.

    Args:
        transport: Optional httpx transport handed to every session, e.g.
            :class:`httpx.MockTransport` in tests. ``None`` uses the
            default network transport.
    """

    def __init__(self, transport: Optional[httpx.BaseTransport] = None) -> None:
        self._transport = transport

    def open_session(self, identifier: str) -> Optional[_Session]:
        try:
            client = httpx.Client(
                headers={"User-Agent": identifier},
                follow_redirects=False,
                transport=self._transport,
            )
        except (httpx.HTTPError, ValueError, TypeError) as exc:
            logger.warning("Could not open session for %r: %s", identifier, exc)
            return None
        return _Session(client=client)

    def connect(self, session: _Session, host: str, port: int) -> Optional[_Connection]:
        if not host or not 0 <= port <= 65535:
            logger.warning("Refusing to connect to %r:%s", host, port)
            return None
        return _Connection(session=session, host=host, port=port)

    def open_request(
        self, connection: _Connection, method: str, path: str, secure: bool
    ) -> Optional[_PendingRequest]:
        scheme = "https" if secure else "http"
        try:
            url = httpx.URL(f"{scheme}://{connection.host}:{connection.port}{path}")
        except httpx.InvalidURL as exc:
            logger.warning("Invalid request target %r: %s", path, exc)
            return None
        return _PendingRequest(connection=connection, method=method, url=url)

    def add_headers(self, request: _PendingRequest, block: str) -> bool:
        pairs: list[tuple[str, str]] = []
        for line in block.split("\r\n"):
            if not line:
                continue
            pair = split_header_line(line)
            if pair is None or not pair[0]:
                logger.warning("Malformed header line %r", line)
                return False
            pairs.append(pair)
        request.headers.extend(pairs)
        return True

    def send(self, request: _PendingRequest, body: Optional[bytes]) -> bool:
        client = request.connection.session.client
        try:
            outgoing = client.build_request(
                request.method,
                request.url,
                headers=request.headers,
                content=body or None,
            )
            request.response = client.send(outgoing, stream=True)
        except (httpx.HTTPError, httpx.StreamError, ValueError, TypeError) as exc:
            logger.warning("%s %s failed: %s", request.method, request.url, exc)
            return False
        return True

    def receive(self, request: _PendingRequest) -> bool:
        # send() with stream=True already waited for the response head.
        return request.response is not None

    def query_status_code(self, request: _PendingRequest) -> Optional[int]:
        if request.response is None:
            return None
        return request.response.status_code

    def query_raw_headers(self, request: _PendingRequest) -> Optional[str]:
        response = request.response
        if response is None:
            return None
        lines = [f"{response.http_version} {response.status_code} {response.reason_phrase}"]
        for key, value in response.headers.raw:
            lines.append(f"{key.decode('latin-1')}: {value.decode('latin-1')}")
        return "\r\n".join(lines) + "\r\n\r\n"

    def read_chunk(self, request: _PendingRequest, size: int) -> Optional[bytes]:
        if request.response is None:
            return None
        try:
            if request.chunks is None:
                request.chunks = request.response.iter_raw(chunk_size=size)
            return next(request.chunks, b"")
        except (httpx.HTTPError, httpx.StreamError) as exc:
            logger.warning("Reading body of %s failed: %s", request.url, exc)
            return None

    def close(self, resource: Any) -> None:
        if isinstance(resource, _PendingRequest):
            if resource.response is not None:
                resource.response.close()
        elif isinstance(resource, _Session):
            resource.client.close()
        logger.debug("Closed %s", type(resource).__name__)
