from typing import Any

from fakes import RecordingBus
from signaljoin import Combinator, InMemorySignalBus


def test_default_bus_is_in_memory() -> None:
    on = Combinator()
    assert isinstance(on.bus, InMemorySignalBus)


def test_native_primitives_pass_through() -> None:
    bus = RecordingBus()
    on = Combinator(bus)
    seen: list[Any] = []

    handle = on.subscribe("a", seen.append)
    on.subscribe_once("a", lambda value: seen.append(("once", value)))
    on.publish("a", 1)
    on.unsubscribe("a", handle)
    on.unsubscribe("a", handle)
    on.publish("a", 2)

    assert seen == [1, ("once", 1)]
    assert on.bus is bus
    assert bus.calls[:2] == [("subscribe", "a"), ("subscribe", "a")]


def test_combinators_over_foreign_bus() -> None:
    bus = RecordingBus()
    on = Combinator(bus)
    rounds: list[dict[str, Any]] = []
    hits: list[tuple[Any, ...]] = []

    on.all_many(["x", "y"], 1, rounds.append)
    on.any(["y"], lambda *args: hits.append(args))
    on.publish("x", "left")
    on.publish("y", "right")
    on.publish("y", "again")

    assert rounds == [{"x": ("left",), "y": ("right",)}]
    assert hits == [("y", "right"), ("y", "again")]
    assert bus.count("x") == 0
    assert bus.count("y") == 1


def test_all_cached_through_adapter() -> None:
    on = Combinator()
    rounds: list[dict[str, Any]] = []
    waiter = on.all_cached(["a", "b"], rounds.append, cache_limit=1)

    on.publish("a", 1)
    on.publish("a", 2)
    on.publish("b", 3)
    waiter.cancel()

    assert rounds == [{"a": (2,), "b": (3,)}]
    assert on.bus.signals() == []
    assert "all_cached" in repr(waiter)
