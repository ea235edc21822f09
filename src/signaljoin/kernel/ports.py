"""Port protocols for signaljoin - pure abstractions."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Any, Protocol

Handler = Callable[..., Any]


class SignalBusPort(Protocol):
    """
    Publish/subscribe collaborator.
    Delivers occurrences synchronously, in subscription order.
    """

    def subscribe(self, signal: str, handler: Handler) -> Hashable:
        """Register a handler and return its subscription handle."""
        ...

    def subscribe_once(self, signal: str, handler: Handler) -> Hashable:
        """Register a handler that is removed after its first delivery."""
        ...

    def unsubscribe(self, signal: str, handle: Hashable) -> None:
        """Remove a handler. Unknown handles are a no-op."""
        ...

    def publish(self, signal: str, *payload: Any) -> None:
        """Deliver an occurrence to every current subscriber."""
        ...
