"""Combinator types: option models, round records and waiter handles."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from signaljoin.kernel.errors import CallbackError, InvalidArgument
from signaljoin.kernel.ports import Handler, SignalBusPort

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

Payload = tuple[Any, ...]
AllCallback = Callable[[dict[str, Payload]], Any]
AnyCallback = Callable[..., Any]


class WaitSpec(BaseModel):
    """The event-set a waiting operation listens on."""

    model_config = ConfigDict(frozen=True)

    signals: tuple[str, ...] = Field(min_length=1)

    @field_validator("signals")
    @classmethod
    def _distinct(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if len(set(value)) != len(value):
            raise ValueError("signal names must be distinct")
        return value


class RepeatSpec(BaseModel):
    """How many deliveries a self-terminating operation makes."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(gt=0, strict=True)


class CacheOptions(BaseModel):
    """Capacity bound for the cached conjunction.

    Attributes:
        limit: Maximum number of in-progress rounds, 0 disables the bound.
        discard: "fifo" evicts the oldest round, "lifo" the newest.
    """

    model_config = ConfigDict(frozen=True)

    limit: int = Field(default=0, ge=0, strict=True)
    discard: Literal["fifo", "lifo"] = "fifo"


def parse_options(model: type[M], **values: Any) -> M:
    """Build an option model, reporting validation failures as InvalidArgument."""
    try:
        return model(**values)
    except ValidationError as exc:
        raise InvalidArgument(f"invalid {model.__name__}: {exc}") from exc


def parse_signals(signals: Iterable[str]) -> WaitSpec:
    """Validate an event-set given as any iterable of signal names."""
    if isinstance(signals, (str, bytes)) or not isinstance(signals, Iterable):
        raise InvalidArgument(f"signals must be a collection of names, got {signals!r}")
    return parse_options(WaitSpec, signals=tuple(signals))


_MISSING = object()


class Round:
    """
    Pending set and collected arguments for one round.
    Sized once from the event-set; completion is a counter check.
    """

    __slots__ = ("values", "remaining")

    def __init__(self, size: int) -> None:
        self.values: list[Any] = [_MISSING] * size
        self.remaining = size

    def has(self, index: int) -> bool:
        return self.values[index] is not _MISSING

    def record(self, index: int, payload: Payload, use_first: bool = False) -> None:
        """Store a payload for the signal at index.

        A repeated signal overwrites the stored payload unless use_first is set.
        """
        if self.values[index] is _MISSING:
            self.remaining -= 1
        elif use_first:
            return
        self.values[index] = payload

    @property
    def complete(self) -> bool:
        return self.remaining == 0

    def snapshot(self, signals: Sequence[str]) -> dict[str, Payload]:
        return dict(zip(signals, self.values))


class Waiter:
    """Handle for one waiting operation.

    Owns the subscription handles the operation registered on the bus.
    ``cancel()`` removes exactly those handles and may be called any number
    of times.

    Attributes:
        signals: The event-set being waited on.
        active: False once the operation terminated or was cancelled.
        deliveries: Number of callback invocations so far.
    """

    def __init__(self, bus: SignalBusPort, signals: Sequence[str], name: str) -> None:
        self.bus = bus
        self.signals = tuple(signals)
        self.name = name
        self.active = True
        self.deliveries = 0
        self._handles: list[tuple[str, Hashable]] = []

    def subscribe(self, signal: str, handler: Handler) -> None:
        self._handles.append((signal, self.bus.subscribe(signal, handler)))

    def cancel(self) -> None:
        """Unsubscribe every handler this operation registered."""
        if not self.active:
            return
        self.active = False
        handles, self._handles = self._handles, []
        for signal, handle in handles:
            self.bus.unsubscribe(signal, handle)
        logger.debug("%s on %s torn down after %d deliveries", self.name, self.signals, self.deliveries)

    def deliver(self, callback: Callable[..., Any], *args: Any, final: bool = False) -> None:
        """Invoke the callback, tearing down first when this is the last delivery."""
        self.deliveries += 1
        if final:
            self.cancel()
        try:
            callback(*args)
        except Exception as exc:
            logger.warning("%s callback on %s failed: %s", self.name, self.signals, exc)
            raise CallbackError(f"{self.name} callback failed: {exc}", self.signals, exc) from exc

    def __repr__(self) -> str:
        state = "active" if self.active else "done"
        return f"Waiter({self.name}, signals={self.signals!r}, {state}, deliveries={self.deliveries})"
