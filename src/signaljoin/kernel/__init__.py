"""Kernel layer - bus port, default bus and errors."""

from signaljoin.kernel.bus import InMemorySignalBus, Subscription
from signaljoin.kernel.errors import CallbackError, InvalidArgument, SignaljoinError
from signaljoin.kernel.ports import Handler, SignalBusPort

__all__ = [
    # Ports
    "Handler",
    "SignalBusPort",
    # Bus
    "InMemorySignalBus",
    "Subscription",
    # Errors
    "SignaljoinError",
    "InvalidArgument",
    "CallbackError",
]
