import pytest

from signaljoin.combinators.types import (
    CacheOptions,
    RepeatSpec,
    Round,
    WaitSpec,
    parse_options,
    parse_signals,
)
from signaljoin.kernel.errors import InvalidArgument


def test_round_counts_remaining_signals() -> None:
    state = Round(3)
    assert state.remaining == 3

    state.record(0, ("a",))
    state.record(0, ("b",))
    assert state.remaining == 2
    assert state.values[0] == ("b",)

    state.record(2, ("c",))
    state.record(1, ("d",))
    assert state.complete
    assert state.snapshot(["x", "y", "z"]) == {"x": ("b",), "y": ("d",), "z": ("c",)}


def test_round_use_first_keeps_original_payload() -> None:
    state = Round(1)
    state.record(0, (1,), use_first=True)
    state.record(0, (2,), use_first=True)
    assert state.values[0] == (1,)
    assert state.has(0)


def test_parse_signals_accepts_any_iterable() -> None:
    assert parse_signals(iter(["a", "b"])) == WaitSpec(signals=("a", "b"))


def test_parse_signals_rejects_duplicates() -> None:
    with pytest.raises(InvalidArgument, match="distinct"):
        parse_signals(["a", "b", "a"])


def test_option_defaults() -> None:
    options = CacheOptions()
    assert options.limit == 0
    assert options.discard == "fifo"


def test_parse_options_wraps_validation_errors() -> None:
    with pytest.raises(InvalidArgument) as info:
        parse_options(RepeatSpec, count=0)
    assert isinstance(info.value, ValueError)
    assert info.value.__cause__ is not None

    with pytest.raises(InvalidArgument):
        parse_options(CacheOptions, discard="random")
