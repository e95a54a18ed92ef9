"""
Temporal Contracts
==================

Immutable data exchanged between the transition functions and the store.

CONTRACT:
=========
- HistoryState is a single composite value; past, present and future
  are never updated independently
- Events are pure intent, resolved only when applied
- Options are validated once, at construction
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Generic, Tuple, TypeVar, Union

from .predicates import reference_differs


T = TypeVar('T')

DEFAULT_HISTORY_LIMIT = 50


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass(frozen=True)
class TemporalOptions(Generic[T]):
    """
    Configuration for one temporal store.

    limit bounds the number of entries kept in past.
    should_add_to_history(prev, next) decides whether a set is recorded.
    """
    limit: int = DEFAULT_HISTORY_LIMIT
    should_add_to_history: Callable[[T, T], bool] = reference_differs

    def __post_init__(self):
        if isinstance(self.limit, bool) or not isinstance(self.limit, int):
            raise ValueError(f"limit must be an integer, got {self.limit!r}")
        if self.limit < 1:
            raise ValueError(f"limit must be at least 1, got {self.limit}")
        if not callable(self.should_add_to_history):
            raise TypeError("should_add_to_history must be callable")


# =============================================================================
# COMPOSITE STATE
# =============================================================================

@dataclass(frozen=True)
class HistoryState(Generic[T]):
    """
    Snapshot of past, present and future.

    ORDERING:
    =========
    - past: oldest first, most recent previous value last
    - future: nearest redo target first
    """
    present: T
    past: Tuple[T, ...] = field(default_factory=tuple)
    future: Tuple[T, ...] = field(default_factory=tuple)

    @property
    def can_undo(self) -> bool:
        return len(self.past) > 0

    @property
    def can_redo(self) -> bool:
        return len(self.future) > 0


# =============================================================================
# EVENTS
# =============================================================================

@dataclass(frozen=True)
class SetValue(Generic[T]):
    """Replace present with a concrete value."""
    value: T


@dataclass(frozen=True)
class SetWith(Generic[T]):
    """Replace present with updater(present), evaluated when applied."""
    updater: Callable[[T], T]


@dataclass(frozen=True)
class Undo:
    """Step back one recorded change."""


@dataclass(frozen=True)
class Redo:
    """Replay the nearest undone change."""


HistoryEvent = Union[SetValue, SetWith, Undo, Redo]
