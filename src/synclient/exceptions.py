"""Exception hierarchy for synclient.

These exceptions never reach callers of the request methods: the pipeline
boundary in :meth:`~synclient.pipeline.RequestPipeline.execute` converts any
exception raised during a request into :attr:`Response.error`. They do
propagate from client construction, where a bad configuration is a
programming error rather than a network condition.

Subclass hierarchy::

    SynclientError
    +-- ConversionError   (text <-> bytes conversion failed)
    +-- ConfigError       (invalid client configuration)
"""


class SynclientError(Exception):
    """Base exception for all synclient errors."""


class ConversionError(SynclientError):
    """Raised when a string cannot be converted to or from UTF-8 bytes."""


class ConfigError(SynclientError):
    """Raised for invalid client configuration (empty user agent, bad chunk size)."""
