from .combinator import Combinator
from .combinators import (
    CacheOptions,
    Waiter,
    all_cached,
    all_many,
    all_of,
    all_once,
    any_many,
    any_of,
    any_once,
)
from .kernel import (
    CallbackError,
    InMemorySignalBus,
    InvalidArgument,
    SignalBusPort,
    SignaljoinError,
)

__all__ = [
    # Adapter
    "Combinator",
    # Bus
    "SignalBusPort",
    "InMemorySignalBus",
    # Operations
    "all_of",
    "all_once",
    "all_many",
    "all_cached",
    "any_of",
    "any_once",
    "any_many",
    "Waiter",
    "CacheOptions",
    # Errors
    "SignaljoinError",
    "InvalidArgument",
    "CallbackError",
]
