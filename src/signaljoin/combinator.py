"""Combinator - one handle over a bus and the waiting operations."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Any

from .combinators import (
    Waiter,
    all_cached,
    all_many,
    all_of,
    all_once,
    any_many,
    any_of,
    any_once,
)
from .combinators.types import AllCallback, AnyCallback
from .kernel.bus import InMemorySignalBus
from .kernel.ports import Handler, SignalBusPort


class Combinator(SignalBusPort):
    """Wraps a signal bus and adds the combinator operations.

    The bus's own primitives stay reachable through the same handle:

        >>> on = Combinator()
        >>> waiter = on.all(["a", "b"], print)
        >>> on.publish("a", 1)
        >>> on.publish("b", 2)
        {'a': (1,), 'b': (2,)}

    Attributes:
        bus: The wrapped bus. A fresh InMemorySignalBus when none is given.
    """

    def __init__(self, bus: SignalBusPort | None = None) -> None:
        self._bus = bus if bus is not None else InMemorySignalBus()

    @property
    def bus(self) -> SignalBusPort:
        return self._bus

    # Bus primitives

    def subscribe(self, signal: str, handler: Handler) -> Hashable:
        return self._bus.subscribe(signal, handler)

    def subscribe_once(self, signal: str, handler: Handler) -> Hashable:
        return self._bus.subscribe_once(signal, handler)

    def unsubscribe(self, signal: str, handle: Hashable) -> None:
        self._bus.unsubscribe(signal, handle)

    def publish(self, signal: str, *payload: Any) -> None:
        self._bus.publish(signal, *payload)

    # Conjunction

    def all(self, signals: Iterable[str], callback: AllCallback, use_first: bool = False) -> Waiter:
        """See :func:`signaljoin.combinators.all_of`."""
        return all_of(self._bus, signals, callback, use_first)

    def all_once(self, signals: Iterable[str], callback: AllCallback, use_first: bool = False) -> Waiter:
        """See :func:`signaljoin.combinators.all_once`."""
        return all_once(self._bus, signals, callback, use_first)

    def all_many(
        self,
        signals: Iterable[str],
        count: int,
        callback: AllCallback,
        use_first: bool = False,
    ) -> Waiter:
        """See :func:`signaljoin.combinators.all_many`."""
        return all_many(self._bus, signals, count, callback, use_first)

    def all_cached(
        self,
        signals: Iterable[str],
        callback: AllCallback,
        cache_limit: int | None = 0,
        discard_oldest_first: bool = True,
    ) -> Waiter:
        """See :func:`signaljoin.combinators.all_cached`."""
        return all_cached(self._bus, signals, callback, cache_limit, discard_oldest_first)

    # Disjunction

    def any(self, signals: Iterable[str], callback: AnyCallback) -> Waiter:
        """See :func:`signaljoin.combinators.any_of`."""
        return any_of(self._bus, signals, callback)

    def any_once(self, signals: Iterable[str], callback: AnyCallback) -> Waiter:
        """See :func:`signaljoin.combinators.any_once`."""
        return any_once(self._bus, signals, callback)

    def any_many(self, signals: Iterable[str], count: int, callback: AnyCallback) -> Waiter:
        """See :func:`signaljoin.combinators.any_many`."""
        return any_many(self._bus, signals, count, callback)
