"""Client configuration assembly.

synclient reads no files or environment variables. The only settings are
the ones passed to :class:`~synclient.client.HttpClient` at construction,
validated here into a :class:`~synclient.models.ClientConfig`.
"""

from __future__ import annotations

from typing import Optional

from pydantic import ValidationError

from synclient.exceptions import ConfigError
from synclient.models import ClientConfig


def build_config(
    user_agent: Optional[str] = None,
    chunk_size: Optional[int] = None,
) -> ClientConfig:
    """Validate construction arguments into a :class:`ClientConfig`.

    Arguments left as ``None`` take the model defaults.

    Raises:
        ConfigError: If a value fails validation (empty user agent,
            non-positive chunk size).
    """
    data: dict[str, object] = {}
    if user_agent is not None:
        data["user_agent"] = user_agent
    if chunk_size is not None:
        data["chunk_size"] = chunk_size
    try:
        return ClientConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid client configuration: {exc}") from exc
