"""Canonical Pydantic models shared across all synclient modules.

Every other module imports its data shapes from here. The models fall into
three groups:

**Request side** -- built fresh for every call and discarded at its end:
    :class:`HTTPMethod`, :class:`ParsedUrl`, :class:`Request`.

**Result** -- handed to the caller, who owns it from then on:
    :class:`Response`.

**Configuration** -- supplied once when the client is constructed:
    :class:`ClientConfig`.

All models use Pydantic v2.
"""

from __future__ import annotations

import enum
import json
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_USER_AGENT = "HttpClient/1.0"
DEFAULT_CHUNK_SIZE = 4096


# --- Request side ---


class HTTPMethod(str, enum.Enum):
    """The fixed set of verbs the client can send."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class ParsedUrl(BaseModel):
    """An absolute HTTP/HTTPS URL split into the parts the transport needs.

    ``path`` carries the query string as well (``/a/b?q=1``); the transport
    sends it verbatim as the request target.

    Example::

        ParsedUrl(scheme="https", host="example.com", port=8443, path="/a?q=1")
    """

    model_config = ConfigDict(frozen=True)

    scheme: Literal["http", "https"]
    host: str = Field(min_length=1)
    port: int = Field(ge=0, le=65535)
    path: str = "/"

    @property
    def secure(self) -> bool:
        """Whether the request must go over TLS."""
        return self.scheme == "https"


class Request(BaseModel):
    """One outgoing request as assembled by the pipeline.

    Header keys are kept exactly as supplied; HTTP treats them
    case-insensitively but no normalisation happens here.
    """

    method: HTTPMethod
    url: str
    body: Optional[bytes] = None
    headers: dict[str, str] = Field(default_factory=dict)


# --- Result ---


class Response(BaseModel):
    """Normalised result of one request.

    A response is returned for every call, including calls that failed
    before anything was sent. ``status_code`` stays ``0`` when no status
    line was ever read, and a non-empty ``error`` means the exchange did not
    complete -- in that case ``body`` must not be trusted even if the status
    code looks valid.

    Example::

        resp = client.get("https://example.com")
        if not resp.is_success:
            print(resp.status_code, resp.error)
    """

    status_code: int = 0
    body: bytes = b""
    headers: dict[str, str] = Field(default_factory=dict)
    error: str = ""

    @property
    def is_success(self) -> bool:
        """True for a 2xx status with no error recorded."""
        return 200 <= self.status_code < 300 and self.error == ""

    @property
    def text(self) -> str:
        """The body decoded as UTF-8, with undecodable bytes replaced."""
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Parse the body as JSON.

        Raises:
            ValueError: If the body is not valid JSON.
        """
        return json.loads(self.body)


# --- Configuration ---


class ClientConfig(BaseModel):
    """Settings fixed at client construction.

    Attributes:
        user_agent: Identifier the transport session is opened with; sent
            as the ``User-Agent`` header.
        chunk_size: Size of each body read from the transport, in bytes.
    """

    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)
