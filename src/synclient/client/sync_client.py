"""Synchronous HTTP client facade.

:class:`HttpClient` exposes one method per HTTP verb. Each is a fixed-method
call into :meth:`~synclient.pipeline.RequestPipeline.execute`; the verb
methods add no logic of their own beyond choosing whether a body is sent.
:meth:`HttpClient.post_json` additionally serialises its payload and forces
``Content-Type: application/json`` on a copy of the caller's headers.

None of the request methods raise. Inspect the returned
:class:`~synclient.models.Response` instead.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional, Union

from synclient import failures
from synclient.config import build_config
from synclient.models import DEFAULT_USER_AGENT, HTTPMethod, Response
from synclient.output import get_output
from synclient.pipeline import RequestPipeline
from synclient.transport.base import TransportProvider
from synclient.transport.httpx_transport import HttpxTransport

Body = Union[str, bytes]
Headers = Optional[Mapping[str, str]]


class HttpClient:
    """Blocking HTTP client that reports failures in the response.

    Every call opens and closes its own session, connection, and request;
    nothing is shared between calls, so an instance is safe to use from
    several threads.

    Args:
        user_agent: Client identifier the transport session is opened with.
        transport: Provider performing the network I/O. Defaults to
            :class:`~synclient.transport.httpx_transport.HttpxTransport`.
        chunk_size: Body read size in bytes. Defaults to 4096.

    Raises:
        ConfigError: If *user_agent* is empty or *chunk_size* is not
            positive.

    Example::

        client = HttpClient(user_agent="inventory-sync/2.1")
        resp = client.get("https://api.example.com/items", {"Accept": "application/json"})
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[TransportProvider] = None,
        chunk_size: Optional[int] = None,
    ) -> None:
        config = build_config(user_agent=user_agent, chunk_size=chunk_size)
        self._pipeline = RequestPipeline(transport or HttpxTransport(), config)

    @property
    def user_agent(self) -> str:
        return self._pipeline.config.user_agent

    # ------------------------------------------------------------------ #
    # Verb methods
    # ------------------------------------------------------------------ #

    def get(self, url: str, headers: Headers = None) -> Response:
        """Send a GET request."""
        return self._pipeline.execute(HTTPMethod.GET.value, url, None, headers)

    def post(self, url: str, data: Body, headers: Headers = None) -> Response:
        """Send a POST request with *data* as the body."""
        return self._pipeline.execute(HTTPMethod.POST.value, url, data, headers)

    def put(self, url: str, data: Body, headers: Headers = None) -> Response:
        """Send a PUT request with *data* as the body."""
        return self._pipeline.execute(HTTPMethod.PUT.value, url, data, headers)

    def patch(self, url: str, data: Body, headers: Headers = None) -> Response:
        """Send a PATCH request with *data* as the body."""
        return self._pipeline.execute(HTTPMethod.PATCH.value, url, data, headers)

    def delete(self, url: str, headers: Headers = None) -> Response:
        """Send a DELETE request."""
        return self._pipeline.execute(HTTPMethod.DELETE.value, url, None, headers)

    def head(self, url: str, headers: Headers = None) -> Response:
        """Send a HEAD request."""
        return self._pipeline.execute(HTTPMethod.HEAD.value, url, None, headers)

    def options(self, url: str, headers: Headers = None) -> Response:
        """Send an OPTIONS request."""
        return self._pipeline.execute(HTTPMethod.OPTIONS.value, url, None, headers)

    def post_json(self, url: str, json_data: Any, headers: Headers = None) -> Response:
        """Send a POST request with *json_data* serialised as the body.

        ``Content-Type: application/json`` is set on a copy of *headers*,
        replacing any value the caller supplied under any capitalisation
        of that name. The caller's mapping is
        left untouched.

        Args:
            url: Absolute target URL.
            json_data: Any JSON-serialisable value.
            headers: Extra request headers.

        Returns:
            The :class:`~synclient.models.Response`. A value that cannot be
            serialised yields status 0 and an error without sending
            anything.
        """
        try:
            data = json.dumps(
                json_data, separators=(",", ":"), ensure_ascii=False, allow_nan=False
            )
        except (TypeError, ValueError) as exc:
            get_output().debug(f"POST {url}: cannot encode JSON body: {exc}")
            return Response(error=f"{failures.JSON_ENCODE_FAILED}: {exc}")

        merged: dict[str, str] = {
            key: value
            for key, value in (headers or {}).items()
            if key.lower() != "content-type"
        }
        merged["Content-Type"] = "application/json"
        return self._pipeline.execute(HTTPMethod.POST.value, url, data, merged)
