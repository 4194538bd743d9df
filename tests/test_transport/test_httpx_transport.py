"""Tests for the httpx-backed transport provider."""

from __future__ import annotations

import gzip

import httpx
import pytest

from synclient.transport.httpx_transport import HttpxTransport


def _transport(handler) -> HttpxTransport:
    return HttpxTransport(httpx.MockTransport(handler))


def _ok(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, content=b"hello", headers={"X-Dup": "a"})


@pytest.fixture
def staged():
    """Open session, connection and request against a handler; close all afterwards."""
    opened = []

    def _open(handler=_ok, method="GET", path="/", secure=False, host="api.example.com", port=80):
        transport = _transport(handler)
        session = transport.open_session("tester/1.0")
        connection = transport.connect(session, host, port)
        request = transport.open_request(connection, method, path, secure)
        opened.append((transport, [request, connection, session]))
        return transport, request

    yield _open

    for transport, resources in opened:
        for resource in resources:
            if resource is not None:
                transport.close(resource)


class TestLifecycle:
    def test_session_sets_user_agent(self) -> None:
        transport = HttpxTransport()
        session = transport.open_session("tester/1.0")
        try:
            assert session.client.headers["User-Agent"] == "tester/1.0"
            assert session.client.follow_redirects is False
        finally:
            transport.close(session)
        assert session.client.is_closed

    def test_connect_rejects_empty_host(self) -> None:
        transport = HttpxTransport()
        session = transport.open_session("t")
        try:
            assert transport.connect(session, "", 80) is None
        finally:
            transport.close(session)

    def test_open_request_builds_url(self, staged) -> None:
        _, request = staged(path="/a/b?q=1", secure=True, port=8443)
        assert request.url.scheme == "https"
        assert request.url.port == 8443
        assert request.url.raw_path == b"/a/b?q=1"

    def test_close_request_before_send(self, staged) -> None:
        transport, request = staged()
        transport.close(request)


class TestHeaders:
    def test_add_headers_parses_block(self, staged) -> None:
        transport, request = staged()
        assert transport.add_headers(request, "Accept: text/plain\r\nX-Id: 7\r\n")
        assert request.headers == [("Accept", "text/plain"), ("X-Id", "7")]

    def test_add_headers_rejects_malformed_line(self, staged) -> None:
        transport, request = staged()
        assert transport.add_headers(request, "no colon here\r\n") is False
        assert request.headers == []

    def test_headers_reach_server(self, staged) -> None:
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.headers)
            return httpx.Response(200)

        transport, request = staged(handler)
        transport.add_headers(request, "X-Trace: abc\r\n")
        assert transport.send(request, None)
        assert seen["x-trace"] == "abc"
        assert seen["user-agent"] == "tester/1.0"


class TestExchange:
    def test_full_exchange(self, staged) -> None:
        transport, request = staged()
        assert transport.send(request, None)
        assert transport.receive(request)
        assert transport.query_status_code(request) == 200

        raw = transport.query_raw_headers(request)
        assert raw.startswith("HTTP/1.1 200 OK\r\n")
        assert "X-Dup: a\r\n" in raw
        assert raw.endswith("\r\n\r\n")

        chunks = []
        while True:
            chunk = transport.read_chunk(request, 2)
            assert chunk is not None
            if not chunk:
                break
            chunks.append(chunk)
        assert b"".join(chunks) == b"hello"
        assert all(len(chunk) <= 2 for chunk in chunks)

    def test_body_sent(self, staged) -> None:
        received = []

        def handler(request: httpx.Request) -> httpx.Response:
            received.append(request.content)
            return httpx.Response(201)

        transport, request = staged(handler, method="POST")
        assert transport.send(request, b'{"a":1}')
        assert received == [b'{"a":1}']

    def test_send_failure(self, staged) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        transport, request = staged(handler)
        assert transport.send(request, None) is False
        assert transport.receive(request) is False
        assert transport.query_status_code(request) is None
        assert transport.query_raw_headers(request) is None
        assert transport.read_chunk(request, 10) is None

    def test_read_failure(self, staged) -> None:
        class BrokenStream(httpx.SyncByteStream):
            def __iter__(self):
                yield b"hel"
                raise httpx.ReadError("connection reset")

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, stream=BrokenStream())

        transport, request = staged(handler)
        assert transport.send(request, None)
        assert transport.read_chunk(request, 3) == b"hel"
        assert transport.read_chunk(request, 3) is None

    def test_body_not_content_decoded(self, staged) -> None:
        compressed = gzip.compress(b"hello hello hello")

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=compressed, headers={"Content-Encoding": "gzip"})

        transport, request = staged(handler)
        assert transport.send(request, None)
        assert "Content-Encoding: gzip\r\n" in transport.query_raw_headers(request)

        chunks = []
        while True:
            chunk = transport.read_chunk(request, 4)
            assert chunk is not None
            if not chunk:
                break
            chunks.append(chunk)
        assert b"".join(chunks) == compressed
