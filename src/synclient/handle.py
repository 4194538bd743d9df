"""Scoped ownership of transport resources.

Each stage of a request (session, connection, in-flight request) holds one
resource obtained from the transport provider. :class:`ScopedHandle` owns
exactly one such resource and closes it through the provider when
released. The pipeline enters every handle into a
:class:`contextlib.ExitStack` at the point of acquisition, so whatever
step fails, every resource acquired so far is closed in reverse order.

Ownership is singular: a handle cannot be copied, only moved with
:meth:`ScopedHandle.move`, which leaves the source empty. Closing the same
transport resource twice is undefined in the provider, so release is
idempotent and an empty handle releases nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from synclient.transport.base import TransportProvider


class ScopedHandle:
    """Exclusive owner of one transport resource.

    Args:
        transport: The provider that produced *resource* and will close it.
        resource: The provider-specific resource, or ``None`` when the
            acquisition failed (an empty handle).
        kind: Short label used in ``repr`` and debug output.

    Example::

        with ScopedHandle(transport, transport.open_session("ua")) as session:
            if not session:
                ...  # acquisition failed
    """

    def __init__(
        self,
        transport: TransportProvider,
        resource: Optional[Any] = None,
        kind: str = "handle",
    ) -> None:
        self._transport = transport
        self._resource = resource
        self._kind = kind

    def get(self) -> Optional[Any]:
        """Return the owned resource without giving up ownership."""
        return self._resource

    def __bool__(self) -> bool:
        return self._resource is not None

    def release(self) -> None:
        """Close the owned resource. A no-op on an empty handle."""
        resource, self._resource = self._resource, None
        if resource is not None:
            self._transport.close(resource)

    def reset(self, resource: Optional[Any] = None) -> None:
        """Release the current resource, then take ownership of *resource*."""
        if resource is not None and resource is self._resource:
            return
        self.release()
        self._resource = resource

    def move(self) -> ScopedHandle:
        """Transfer ownership to a new handle, leaving this one empty."""
        resource, self._resource = self._resource, None
        return ScopedHandle(self._transport, resource, self._kind)

    def __enter__(self) -> ScopedHandle:
        return self

    def __exit__(self, *args: object) -> None:
        self.release()

    def __copy__(self) -> ScopedHandle:
        raise TypeError(f"{type(self).__name__} cannot be copied; use move()")

    def __deepcopy__(self, memo: dict) -> ScopedHandle:
        raise TypeError(f"{type(self).__name__} cannot be copied; use move()")

    def __repr__(self) -> str:
        state = "empty" if self._resource is None else "held"
        return f"<{type(self).__name__} {self._kind} {state}>"
