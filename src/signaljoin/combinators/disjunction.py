"""Disjunction combinators: any_of, any_once, any_many."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from signaljoin.kernel.ports import SignalBusPort

from .types import AnyCallback, RepeatSpec, Waiter, WaitSpec, parse_options, parse_signals

logger = logging.getLogger(__name__)


def any_of(bus: SignalBusPort, signals: Iterable[str], callback: AnyCallback) -> Waiter:
    """Call back on every occurrence of any listed signal.

    The callback receives the signal name followed by the payload values.
    """
    spec = parse_signals(signals)
    return _first(bus, spec, callback, count=None, name="any")


def any_once(bus: SignalBusPort, signals: Iterable[str], callback: AnyCallback) -> Waiter:
    """Call back on the first occurrence of any listed signal, then unsubscribe all."""
    spec = parse_signals(signals)
    return _first(bus, spec, callback, count=1, name="any_once")


def any_many(bus: SignalBusPort, signals: Iterable[str], count: int, callback: AnyCallback) -> Waiter:
    """Call back on the first ``count`` occurrences across all listed signals.

    Raises:
        InvalidArgument: If signals is empty or count is not a positive int.
    """
    spec = parse_signals(signals)
    repeat = parse_options(RepeatSpec, count=count)
    return _first(bus, spec, callback, count=repeat.count, name="any_many")


def _first(
    bus: SignalBusPort,
    spec: WaitSpec,
    callback: AnyCallback,
    count: int | None,
    name: str,
) -> Waiter:
    waiter = Waiter(bus, spec.signals, name)

    def on_signal(signal: str):
        def handler(*payload: Any) -> None:
            if not waiter.active:
                return
            final = count is not None and waiter.deliveries + 1 >= count
            waiter.deliver(callback, signal, *payload, final=final)

        return handler

    for signal in spec.signals:
        waiter.subscribe(signal, on_signal(signal))
    logger.debug("%s registered on %s", name, spec.signals)
    return waiter
