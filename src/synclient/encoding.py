"""UTF-8 conversion helpers used at the transport boundary.

The transport provider deals in bytes for bodies and text for header
blocks. These helpers do the conversion strictly and raise
:class:`~synclient.exceptions.ConversionError` on malformed input so the
pipeline can report it instead of sending garbled data.
"""

from __future__ import annotations

from typing import Optional, Union

from synclient.exceptions import ConversionError


def to_bytes(value: Optional[Union[str, bytes]]) -> bytes:
    """Encode *value* as UTF-8 bytes.

    ``bytes`` pass through unchanged and ``None`` becomes ``b""``.

    Raises:
        ConversionError: If *value* contains characters that cannot be
            encoded (e.g. lone surrogates).
    """
    if value is None:
        return b""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ConversionError("Failed to convert string to UTF-8 bytes.") from exc


def to_text(data: Union[str, bytes]) -> str:
    """Decode UTF-8 *data* into text. ``str`` passes through unchanged.

    Raises:
        ConversionError: If *data* is not valid UTF-8.
    """
    if isinstance(data, str):
        return data
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConversionError("Failed to convert UTF-8 bytes to string.") from exc
