"""Conjunction combinators: all_of, all_once, all_many, all_cached."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from typing import Any

from signaljoin.kernel.ports import SignalBusPort

from .types import (
    AllCallback,
    CacheOptions,
    RepeatSpec,
    Round,
    Waiter,
    WaitSpec,
    parse_options,
    parse_signals,
)

logger = logging.getLogger(__name__)


def all_of(
    bus: SignalBusPort,
    signals: Iterable[str],
    callback: AllCallback,
    use_first: bool = False,
) -> Waiter:
    """Call back every time each signal has fired since the last round.

    The round resets after each delivery. Repeated occurrences of a signal
    within a round overwrite each other unless ``use_first`` is set.

    Args:
        bus: Bus to register handlers on.
        signals: Distinct signal names to wait on.
        callback: Receives a dict mapping signal name to payload tuple.
        use_first: Keep the first occurrence per signal instead of the last.

    Returns:
        Waiter for the operation. Runs until cancelled.
    """
    spec = parse_signals(signals)
    return _rounds(bus, spec, callback, use_first, count=None, name="all")


def all_once(
    bus: SignalBusPort,
    signals: Iterable[str],
    callback: AllCallback,
    use_first: bool = False,
) -> Waiter:
    """Call back once, after every signal has fired, then unsubscribe."""
    spec = parse_signals(signals)
    return _rounds(bus, spec, callback, use_first, count=1, name="all_once")


def all_many(
    bus: SignalBusPort,
    signals: Iterable[str],
    count: int,
    callback: AllCallback,
    use_first: bool = False,
) -> Waiter:
    """Call back for ``count`` complete rounds, then unsubscribe.

    Raises:
        InvalidArgument: If signals is empty or count is not a positive int.
    """
    spec = parse_signals(signals)
    repeat = parse_options(RepeatSpec, count=count)
    return _rounds(bus, spec, callback, use_first, count=repeat.count, name="all_many")


def all_cached(
    bus: SignalBusPort,
    signals: Iterable[str],
    callback: AllCallback,
    cache_limit: int | None = 0,
    discard_oldest_first: bool = True,
) -> Waiter:
    """Call back for every complete round without dropping repeated occurrences.

    An occurrence of a signal that the current round already holds opens
    (or fills) a later round instead of overwriting. Rounds complete
    strictly oldest first.

    Args:
        bus: Bus to register handlers on.
        signals: Distinct signal names to wait on.
        callback: Receives a dict mapping signal name to payload tuple.
        cache_limit: Maximum number of in-progress rounds. 0 or None
            disables the bound.
        discard_oldest_first: When the bound is hit, evict the oldest
            round; otherwise evict the newest one.

    Returns:
        Waiter for the operation. Runs until cancelled.
    """
    spec = parse_signals(signals)
    options = parse_options(
        CacheOptions,
        limit=cache_limit or 0,
        discard="fifo" if discard_oldest_first else "lifo",
    )
    waiter = Waiter(bus, spec.signals, "all_cached")
    size = len(spec.signals)
    rounds: deque[Round] = deque()

    def on_signal(index: int):
        def handler(*payload: Any) -> None:
            if not waiter.active:
                return
            for pending in rounds:
                if not pending.has(index):
                    pending.record(index, payload)
                    break
            else:
                if options.limit and len(rounds) >= options.limit:
                    if options.discard == "fifo":
                        rounds.popleft()
                    else:
                        rounds.pop()
                    logger.debug("all_cached on %s evicted a round (%s)", spec.signals, options.discard)
                opened = Round(size)
                opened.record(index, payload)
                rounds.append(opened)

            # Only the front round can be complete
            if rounds and rounds[0].complete:
                completed = rounds.popleft()
                waiter.deliver(callback, completed.snapshot(spec.signals))

        return handler

    for index, signal in enumerate(spec.signals):
        waiter.subscribe(signal, on_signal(index))
    logger.debug("all_cached registered on %s (limit=%s)", spec.signals, options.limit)
    return waiter


def _rounds(
    bus: SignalBusPort,
    spec: WaitSpec,
    callback: AllCallback,
    use_first: bool,
    count: int | None,
    name: str,
) -> Waiter:
    """Shared round machine for all_of, all_once and all_many."""
    waiter = Waiter(bus, spec.signals, name)
    size = len(spec.signals)
    current = Round(size)

    def on_signal(index: int):
        def handler(*payload: Any) -> None:
            nonlocal current
            if not waiter.active:
                return
            current.record(index, payload, use_first)
            if not current.complete:
                return
            # Swap in a fresh round before the callback can publish again
            completed, current = current, Round(size)
            final = count is not None and waiter.deliveries + 1 >= count
            waiter.deliver(callback, completed.snapshot(spec.signals), final=final)

        return handler

    for index, signal in enumerate(spec.signals):
        waiter.subscribe(signal, on_signal(index))
    logger.debug("%s registered on %s", name, spec.signals)
    return waiter
