"""Combinators - wait on combinations of signals."""

from .conjunction import all_cached, all_many, all_of, all_once
from .disjunction import any_many, any_of, any_once
from .types import CacheOptions, RepeatSpec, Round, Waiter, WaitSpec

__all__ = [
    # Conjunction
    "all_of",
    "all_once",
    "all_many",
    "all_cached",
    # Disjunction
    "any_of",
    "any_once",
    "any_many",
    # Types
    "Waiter",
    "Round",
    "WaitSpec",
    "RepeatSpec",
    "CacheOptions",
]
