"""HTTP client facade for synclient.

Classes:
    :class:`HttpClient` -- verb-named methods (``get``, ``post``, ``put``,
    ``patch``, ``delete``, ``head``, ``options``, ``post_json``) that all
    delegate to one :class:`~synclient.pipeline.RequestPipeline`.

Example::

    from synclient.client import HttpClient

    client = HttpClient()
    resp = client.post_json("https://api.example.com/items", {"name": "x"})
"""

from synclient.client.sync_client import HttpClient

__all__ = ["HttpClient"]
