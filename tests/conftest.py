"""Shared test fixtures for synclient.

Provides a scriptable in-memory transport provider that records every call,
plus output-state fixtures. These fixtures are automatically discovered by
pytest and available to all test modules without explicit imports.
"""

from __future__ import annotations

from typing import Any, Optional

import pytest

from synclient.output import OutputManager, reset_output, set_output
from synclient.transport.base import TransportProvider


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time. When pytest's capture fixtures swap those streams and
    the test finishes, the cached references become stale.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Recording transport
# ---------------------------------------------------------------------------


class RecordingTransport(TransportProvider):
    """In-memory provider that plays back a scripted response.

    Every call is appended to :attr:`calls` as ``(name, *args)``. Set the
    name of a step in *fail_at* to make that step report failure. Body
    chunks are returned in order; a ``None`` entry makes that read fail.

    Resources are plain strings (``"session"``, ``"connection"``,
    ``"request"``) so tests can check exactly what was closed.
    """

    def __init__(
        self,
        status_code: int = 200,
        raw_headers: Any = "HTTP/1.1 200 OK\r\n\r\n",
        chunks: Optional[list[Optional[bytes]]] = None,
        fail_at: Optional[set[str]] = None,
    ) -> None:
        self.status_code = status_code
        self.raw_headers = raw_headers
        self.chunks = list(chunks) if chunks is not None else [b""]
        self.fail_at = set(fail_at or ())
        self.calls: list[tuple[Any, ...]] = []
        self.closed: list[str] = []

    # -- helpers ------------------------------------------------------------

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]

    def acquired(self) -> list[str]:
        acquisitions = {"open_session", "connect", "open_request"}
        return [name for name in self.names() if name in acquisitions]

    def _fails(self, name: str) -> bool:
        return name in self.fail_at

    # -- provider contract -------------------------------------------------------

    def open_session(self, identifier: str) -> Optional[str]:
        self.calls.append(("open_session", identifier))
        return None if self._fails("open_session") else "session"

    def connect(self, session: Any, host: str, port: int) -> Optional[str]:
        self.calls.append(("connect", session, host, port))
        return None if self._fails("connect") else "connection"

    def open_request(
        self, connection: Any, method: str, path: str, secure: bool
    ) -> Optional[str]:
        self.calls.append(("open_request", connection, method, path, secure))
        return None if self._fails("open_request") else "request"

    def add_headers(self, request: Any, block: str) -> bool:
        self.calls.append(("add_headers", request, block))
        return not self._fails("add_headers")

    def send(self, request: Any, body: Optional[bytes]) -> bool:
        self.calls.append(("send", request, body))
        return not self._fails("send")

    def receive(self, request: Any) -> bool:
        self.calls.append(("receive", request))
        return not self._fails("receive")

    def query_status_code(self, request: Any) -> Optional[int]:
        self.calls.append(("query_status_code", request))
        return None if self._fails("query_status_code") else self.status_code

    def query_raw_headers(self, request: Any) -> Optional[Any]:
        self.calls.append(("query_raw_headers", request))
        return None if self._fails("query_raw_headers") else self.raw_headers

    def read_chunk(self, request: Any, size: int) -> Optional[bytes]:
        self.calls.append(("read_chunk", request, size))
        if not self.chunks:
            return b""
        return self.chunks.pop(0)

    def close(self, resource: Any) -> None:
        self.calls.append(("close", resource))
        self.closed.append(resource)


@pytest.fixture
def recording_transport() -> RecordingTransport:
    """A transport that answers ``200`` with an empty body."""
    return RecordingTransport()


@pytest.fixture
def make_transport():
    """Factory for :class:`RecordingTransport` with a custom script."""
    return RecordingTransport


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def verbose_output() -> OutputManager:
    """Install a verbose plain-text output manager so request traces reach stderr."""
    output = OutputManager(verbose=True, no_color=True)
    set_output(output)
    yield output
    reset_output()
