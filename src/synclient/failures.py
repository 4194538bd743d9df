"""Error texts placed in :attr:`~synclient.models.Response.error`.

Each constant names one failure category of the request pipeline. A failure
is detected at the step that produced it and its text is copied into the
returned response; nothing is raised to the caller. Callers that need to
branch on the category can compare ``response.error`` against these
constants.

Example::

    resp = client.get("ftp://example.com")
    assert resp.error == failures.INVALID_URL
"""

INVALID_URL = "Invalid URL format."
"""The URL is not an absolute ``http``/``https`` URL."""

SESSION_OPEN_FAILED = "Opening transport session failed."
"""The transport provider could not open a session for the client identifier."""

CONNECT_FAILED = "Connecting to host failed."
"""The transport provider could not bind a connection to the host and port."""

REQUEST_OPEN_FAILED = "Opening request failed."
"""The transport provider rejected the method / path combination."""

HEADER_ATTACH_FAILED = "Adding request headers failed."
"""The encoded header block could not be attached to the request."""

SEND_FAILED = "Sending request failed."
"""The request line, headers or body could not be sent."""

RECEIVE_FAILED = "Receiving response failed."
"""No response head arrived for the request."""

STATUS_QUERY_FAILED = "Querying status code failed."
"""The numeric status code could not be read from the response."""

HEADER_QUERY_FAILED = "Querying response headers failed."
"""The raw response header block could not be read."""

BODY_READ_FAILED = "Reading response body failed."
"""The body stream broke before the end of the response."""

JSON_ENCODE_FAILED = "Encoding JSON body failed"
"""The value given to ``post_json`` is not JSON-serialisable (a detail is appended)."""
