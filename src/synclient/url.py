"""Absolute URL decomposition for the request pipeline.

Only ``http`` and ``https`` URLs of the form
``scheme://host[:port][path][?query]`` are accepted. Anything else is a
parse failure, reported as ``None`` rather than an exception so the
pipeline can turn it into a failed response without touching the
transport.
"""

from __future__ import annotations

import re
from typing import Optional

from synclient.models import ParsedUrl

_URL_RE = re.compile(r"(https?)://([^/:]+)(?::([0-9]+))?(/[^?]*)?(\?.*)?")

_DEFAULT_PORTS = {"http": 80, "https": 443}


def parse_url(url: str) -> Optional[ParsedUrl]:
    """Split *url* into scheme, host, port, and path-with-query.

    The port defaults to 80 for ``http`` and 443 for ``https``; the path
    defaults to ``/``. A query string is kept on the end of the path.

    Args:
        url: An absolute URL string.

    Returns:
        The :class:`~synclient.models.ParsedUrl`, or ``None`` if *url* does
        not match the accepted grammar or names a port above 65535.
        Only ASCII digits form a port, and anything after the authority must
        start with ``/`` or ``?``.

    Example::

        >>> parse_url("https://example.com:8443/a/b?q=1").path
        '/a/b?q=1'
        >>> parse_url("ftp://example.com") is None
        True
    """
    match = _URL_RE.fullmatch(url)
    if match is None:
        return None

    scheme, host, port_text, path, query = match.groups()

    if port_text is None:
        port = _DEFAULT_PORTS[scheme]
    elif len(port_text) > 5 or int(port_text) > 65535:
        return None
    else:
        port = int(port_text)

    path = path or "/"
    if query:
        path += query

    return ParsedUrl(scheme=scheme, host=host, port=port, path=path)
