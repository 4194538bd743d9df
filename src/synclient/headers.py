"""Header block encoding and decoding.

Outgoing headers travel to the transport as one text block of
``Key: Value\\r\\n`` lines. Incoming headers arrive as the raw response
head (status line first) and are decoded back into a plain dict.
"""

from __future__ import annotations

from typing import Mapping, Optional

_WHITESPACE = " \t\r\n"


def trim(text: str) -> str:
    """Strip spaces, tabs, carriage returns, and newlines from both ends."""
    return text.strip(_WHITESPACE)


def split_header_line(line: str) -> Optional[tuple[str, str]]:
    """Split one ``Key: Value`` line on its first colon.

    Returns:
        The trimmed ``(key, value)`` pair, or ``None`` if the line has no
        colon.
    """
    key, sep, value = line.partition(":")
    if not sep:
        return None
    return trim(key), trim(value)


def encode_headers(headers: Mapping[str, str]) -> str:
    """Join *headers* into a transport-ready block.

    Each pair becomes ``key: value`` followed by ``\\r\\n``, in mapping
    iteration order. An empty mapping gives an empty string, which the
    pipeline treats as "no headers" and never hands to the transport.
    """
    return "".join(f"{key}: {value}\r\n" for key, value in headers.items())


def decode_headers(raw: str) -> dict[str, str]:
    """Parse a raw response head into a header dict.

    The first line (the status line) is skipped. Blank lines and lines
    without a colon are ignored. When a name repeats, the last value wins.

    Example::

        >>> decode_headers("HTTP/1.1 200 OK\\r\\nX-Dup: a\\r\\nX-Dup: b\\r\\n\\r\\n")
        {'X-Dup': 'b'}
    """
    headers: dict[str, str] = {}
    lines = raw.split("\n")
    for line in lines[1:]:
        if not trim(line):
            continue
        pair = split_header_line(line)
        if pair is None:
            continue
        key, value = pair
        headers[key] = value
    return headers
