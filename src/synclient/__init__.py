"""synclient -- a blocking HTTP client that never raises.

Every request made through :class:`~synclient.client.HttpClient` performs one
synchronous round trip and returns a :class:`~synclient.models.Response`.
Failures at any step (bad URL, connection refused, broken body stream) are
reported in ``Response.error`` instead of being raised.

Typical usage::

    from synclient import HttpClient

    client = HttpClient(user_agent="my-tool/1.0")
    resp = client.get("https://example.com/status")
    if resp.is_success:
        print(resp.text)
    else:
        print(resp.status_code, resp.error)

Modules:
    client: Verb-named facade over the pipeline.
    pipeline: The single method-agnostic request execution path.
    url: Absolute HTTP/HTTPS URL decomposition.
    headers: Header block encoding and raw response header decoding.
    handle: Scoped ownership of transport resources.
    transport: Transport provider contract and the httpx-backed provider.
    models: Pydantic models shared across the package.
    failures: Error texts surfaced in ``Response.error``.
    output: Opt-in request diagnostics on stderr (Rich).
"""

from synclient.client import HttpClient
from synclient.models import ClientConfig, HTTPMethod, ParsedUrl, Request, Response
from synclient.pipeline import RequestPipeline

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "HTTPMethod",
    "HttpClient",
    "ParsedUrl",
    "Request",
    "RequestPipeline",
    "Response",
]
