import pytest

from signaljoin import InMemorySignalBus


def test_publish_fans_out_in_subscription_order() -> None:
    bus = InMemorySignalBus()
    seen: list[tuple[str, tuple]] = []
    bus.subscribe("a", lambda *args: seen.append(("first", args)))
    bus.subscribe("a", lambda *args: seen.append(("second", args)))
    bus.subscribe("b", lambda *args: seen.append(("other", args)))

    bus.publish("a", 1, "x")

    assert seen == [("first", (1, "x")), ("second", (1, "x"))]


def test_publish_without_subscribers_is_noop() -> None:
    bus = InMemorySignalBus()
    bus.publish("nobody", 1)
    assert bus.signals() == []


def test_subscribe_once_removed_after_first_delivery() -> None:
    bus = InMemorySignalBus()
    seen: list[int] = []
    bus.subscribe_once("a", seen.append)

    bus.publish("a", 1)
    bus.publish("a", 2)

    assert seen == [1]
    assert bus.listener_count("a") == 0


def test_unsubscribe_is_idempotent() -> None:
    bus = InMemorySignalBus()
    handle = bus.subscribe("a", lambda: None)
    other = bus.subscribe("a", lambda: None)

    bus.unsubscribe("a", handle)
    bus.unsubscribe("a", handle)
    bus.unsubscribe("missing", handle)

    assert bus.listener_count("a") == 1
    bus.unsubscribe("a", other)
    assert bus.listener_count("a") == 0
    assert bus.signals() == []


def test_handler_removed_during_fan_out_is_skipped() -> None:
    bus = InMemorySignalBus()
    seen: list[str] = []
    handles: dict[str, int] = {}

    def first() -> None:
        seen.append("first")
        bus.unsubscribe("a", handles["second"])

    handles["first"] = bus.subscribe("a", first)
    handles["second"] = bus.subscribe("a", lambda: seen.append("second"))

    bus.publish("a")

    assert seen == ["first"]


def test_handler_added_during_fan_out_waits_for_next_publish() -> None:
    bus = InMemorySignalBus()
    seen: list[str] = []

    def first() -> None:
        seen.append("first")
        bus.subscribe("a", lambda: seen.append("late"))

    bus.subscribe_once("a", first)
    bus.publish("a")
    assert seen == ["first"]

    bus.publish("a")
    assert seen == ["first", "late"]


def test_handler_errors_propagate_to_publisher() -> None:
    bus = InMemorySignalBus()

    def boom(*_: object) -> None:
        raise RuntimeError("boom")

    bus.subscribe("a", boom)
    with pytest.raises(RuntimeError, match="boom"):
        bus.publish("a")
