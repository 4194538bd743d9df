"""The single execution path shared by every HTTP verb.

:class:`RequestPipeline` turns ``(method, url, body, headers)`` into a
:class:`~synclient.models.Response` by driving a
:class:`~synclient.transport.base.TransportProvider` through a fixed
sequence of steps:

1. Parse the URL.
2. Open a session for the configured user agent.
3. Connect to the host and port.
4. Open the request (TLS when the scheme is ``https``).
5. Attach the encoded headers, if there are any.
6. Send the request with its body.
7. Wait for the response head.
8. Read the status code.
9. Read and decode the raw response headers.
10. Read the body in fixed-size chunks until the transport reports the end.

The first step that fails ends the call: the remaining steps are skipped
and a response carrying the failure text from :mod:`synclient.failures` is
returned. Nothing is retried. Every transport resource is entered into an
:class:`~contextlib.ExitStack` the moment it is acquired, so all of them
are closed on every exit path. Any exception raised along the way is
caught at :meth:`RequestPipeline.execute` and reported in
``Response.error``; the method itself never raises.
"""

from __future__ import annotations

from contextlib import ExitStack
from typing import Mapping, Optional, Union

from synclient import failures
from synclient.encoding import to_bytes, to_text
from synclient.handle import ScopedHandle
from synclient.headers import decode_headers, encode_headers
from synclient.models import ClientConfig, Request, Response
from synclient.output import get_output
from synclient.transport.base import TransportProvider
from synclient.url import parse_url


class RequestPipeline:
    """Executes one request per call against a transport provider.

    The pipeline holds no per-request state, so one instance can be used
    from several threads at once; each call acquires and releases its own
    session, connection, and request.

    Args:
        transport: The provider that performs the network I/O.
        config: User agent and body chunk size. Defaults to
            :class:`~synclient.models.ClientConfig` defaults.
    """

    def __init__(
        self,
        transport: TransportProvider,
        config: Optional[ClientConfig] = None,
    ) -> None:
        self._transport = transport
        self._config = config or ClientConfig()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def execute(
        self,
        method: str,
        url: str,
        body: Optional[Union[str, bytes]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Response:
        """Perform one blocking request and return its normalised result.

        Args:
            method: HTTP verb, one of :class:`~synclient.models.HTTPMethod`.
            url: Absolute ``http``/``https`` URL, query string included.
            body: Payload to send. Text is encoded as UTF-8; ``None`` sends
                no payload.
            headers: Request headers, sent as supplied.

        Returns:
            The :class:`~synclient.models.Response`. Check
            :attr:`~synclient.models.Response.error` (or
            :attr:`~synclient.models.Response.is_success`) before trusting
            the body.
        """
        try:
            return self._run(method, url, body, headers)
        except Exception as exc:
            message = str(exc) or type(exc).__name__
            get_output().debug(f"{method} {url} aborted: {message}")
            return Response(error=message)

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _run(
        self,
        method: str,
        url: str,
        body: Optional[Union[str, bytes]],
        headers: Optional[Mapping[str, str]],
    ) -> Response:
        output = get_output()
        request = Request(
            method=method,
            url=url,
            body=None if body is None else to_bytes(body),
            headers=dict(headers or {}),
        )
        label = f"{request.method.value} {request.url}"

        parsed = parse_url(request.url)
        if parsed is None:
            return self._fail(label, failures.INVALID_URL)

        transport = self._transport
        with ExitStack() as stack:
            session = stack.enter_context(
                ScopedHandle(transport, transport.open_session(self._config.user_agent), "session")
            )
            if not session:
                return self._fail(label, failures.SESSION_OPEN_FAILED)

            connection = stack.enter_context(
                ScopedHandle(
                    transport,
                    transport.connect(session.get(), parsed.host, parsed.port),
                    "connection",
                )
            )
            if not connection:
                return self._fail(label, failures.CONNECT_FAILED)

            handle = stack.enter_context(
                ScopedHandle(
                    transport,
                    transport.open_request(
                        connection.get(), request.method.value, parsed.path, parsed.secure
                    ),
                    "request",
                )
            )
            if not handle:
                return self._fail(label, failures.REQUEST_OPEN_FAILED)
            pending = handle.get()

            if request.headers:
                if not transport.add_headers(pending, encode_headers(request.headers)):
                    return self._fail(label, failures.HEADER_ATTACH_FAILED)

            if not transport.send(pending, request.body):
                return self._fail(label, failures.SEND_FAILED)

            if not transport.receive(pending):
                return self._fail(label, failures.RECEIVE_FAILED)

            status_code = transport.query_status_code(pending)
            if status_code is None:
                return self._fail(label, failures.STATUS_QUERY_FAILED)

            raw_headers = transport.query_raw_headers(pending)
            if raw_headers is None:
                return self._fail(label, failures.HEADER_QUERY_FAILED, status_code)
            response_headers = decode_headers(to_text(raw_headers))

            content = self._read_body(pending)
            if content is None:
                # A truncated body is never returned.
                return self._fail(
                    label, failures.BODY_READ_FAILED, status_code, response_headers
                )

        output.debug(f"{label} -> {status_code} ({len(content)} bytes)")
        return Response(status_code=status_code, body=content, headers=response_headers)

    def _read_body(self, pending: object) -> Optional[bytes]:
        """Read chunks until the transport reports the end; ``None`` on failure."""
        chunks: list[bytes] = []
        while True:
            chunk = self._transport.read_chunk(pending, self._config.chunk_size)
            if chunk is None:
                return None
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)

    @staticmethod
    def _fail(
        label: str,
        message: str,
        status_code: int = 0,
        headers: Optional[dict[str, str]] = None,
    ) -> Response:
        get_output().debug(f"{label} failed: {message}")
        return Response(status_code=status_code, headers=headers or {}, error=message)
