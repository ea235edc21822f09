"""Error types for signaljoin."""

from __future__ import annotations

from collections.abc import Sequence


class SignaljoinError(Exception):
    """Base class for all signaljoin errors."""


class InvalidArgument(SignaljoinError, ValueError):
    """Raised when a waiting operation is set up with invalid options."""


class CallbackError(SignaljoinError):
    """Error raised when a caller-supplied callback fails.

    The original exception is kept as ``original`` (and as ``__cause__``)
    so the publisher can inspect what went wrong.
    """

    def __init__(self, message: str, signals: Sequence[str], original: BaseException) -> None:
        self.signals = tuple(signals)
        self.original = original
        super().__init__(message)

    def __repr__(self) -> str:
        return f"CallbackError({super().__repr__()}, signals={self.signals!r}, original={self.original!r})"
