"""In-memory signal bus implementation."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any

from signaljoin.kernel.ports import Handler, SignalBusPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Subscription:
    """One handler registration on one signal name."""

    handle: int
    handler: Handler
    once: bool = False


class InMemorySignalBus(SignalBusPort):
    """
    Synchronous in-process bus.

    Handlers receive the payload as positional arguments. Exceptions raised
    by a handler propagate to the publisher and stop the fan-out.
    """

    def __init__(self) -> None:
        self._subscriptions: dict[str, dict[int, Subscription]] = {}
        self._ids = itertools.count(1)

    def subscribe(self, signal: str, handler: Handler) -> int:
        """Register a handler for a signal name."""
        return self._add(signal, handler, once=False)

    def subscribe_once(self, signal: str, handler: Handler) -> int:
        """Register a handler that is removed before its first delivery runs."""
        return self._add(signal, handler, once=True)

    def unsubscribe(self, signal: str, handle: Hashable) -> None:
        """Remove a previously registered handler. Unknown handles are ignored."""
        subscriptions = self._subscriptions.get(signal)
        if not subscriptions or subscriptions.pop(handle, None) is None:  # type: ignore[call-overload]
            return
        if not subscriptions:
            del self._subscriptions[signal]
        logger.debug("unsubscribed handle %s from %r", handle, signal)

    def publish(self, signal: str, *payload: Any) -> None:
        """Deliver an occurrence to all current subscribers, in order.

        Subscribers added during the fan-out are not called for this
        occurrence; subscribers removed during it are skipped.
        """
        subscriptions = self._subscriptions.get(signal)
        if not subscriptions:
            return
        for subscription in list(subscriptions.values()):
            current = self._subscriptions.get(signal)
            if current is None or subscription.handle not in current:
                continue
            if subscription.once:
                self.unsubscribe(signal, subscription.handle)
            subscription.handler(*payload)

    def listener_count(self, signal: str) -> int:
        """Number of handlers currently registered for a signal name."""
        return len(self._subscriptions.get(signal, ()))

    def signals(self) -> list[str]:
        """Signal names with at least one registered handler."""
        return list(self._subscriptions)

    def _add(self, signal: str, handler: Handler, once: bool) -> int:
        handle = next(self._ids)
        self._subscriptions.setdefault(signal, {})[handle] = Subscription(handle, handler, once)
        logger.debug("subscribed handle %s to %r (once=%s)", handle, signal, once)
        return handle
