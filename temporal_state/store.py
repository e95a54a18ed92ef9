"""
Temporal Store
==============

Stateful undo/redo facade over the pure transitions.

The store owns exactly one HistoryState cell. Every operation computes
the full next state first and then replaces the cell in one assignment,
so readers never see past, present and future out of step.
"""

from __future__ import annotations
from typing import Callable, Generic, Optional, Tuple, TypeVar, Union

import structlog

from .contracts import (
    HistoryEvent, HistoryState, Redo, TemporalOptions, Undo
)
from .transitions import apply_event, initial_state, replay, resolve_update


logger = structlog.get_logger(__name__)

T = TypeVar('T')


class TemporalStore(Generic[T]):
    """
    Linear undo/redo history for an arbitrary value.

    GUARANTEES:
    ===========
    1. len(past) never exceeds options.limit (oldest evicted first)
    2. A recorded set discards future, so history never branches
    3. undo/redo on an empty stack leave everything unchanged
    4. can_undo == bool(past), can_redo == bool(future)

    Usage:
        store = TemporalStore(0, limit=3)
        store.set(1)
        store.set(lambda n: n + 1)
        store.undo()
        assert store.state == 1 and store.can_redo
    """

    def __init__(
        self,
        initial_value: T,
        options: Optional[TemporalOptions[T]] = None,
        *,
        limit: Optional[int] = None,
        should_add_to_history: Optional[Callable[[T, T], bool]] = None
    ):
        if options is not None and (limit is not None or should_add_to_history is not None):
            raise TypeError(
                "Pass either options or limit/should_add_to_history, not both"
            )
        if options is None:
            overrides = {}
            if limit is not None:
                overrides['limit'] = limit
            if should_add_to_history is not None:
                overrides['should_add_to_history'] = should_add_to_history
            options = TemporalOptions(**overrides)

        self._options = options
        self._history: HistoryState[T] = initial_state(initial_value)

    # -------------------------------------------------------------------------
    # Derived reads
    # -------------------------------------------------------------------------

    @property
    def state(self) -> T:
        """Current value."""
        return self._history.present

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    @property
    def past(self) -> Tuple[T, ...]:
        return self._history.past

    @property
    def future(self) -> Tuple[T, ...]:
        return self._history.future

    @property
    def snapshot(self) -> HistoryState[T]:
        """Immutable view of past, present and future together."""
        return self._history

    @property
    def options(self) -> TemporalOptions[T]:
        return self._options

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def set(self, update: Union[T, Callable[[T], T]]) -> None:
        """
        Make update the new present.

        A callable is called with the current present and its result is
        used. Whether the previous present is recorded for undo is
        decided by options.should_add_to_history.
        """
        self._commit(apply_event(self._history, resolve_update(update), self._options))

    def undo(self) -> None:
        self._commit(apply_event(self._history, Undo(), self._options))

    def redo(self) -> None:
        self._commit(apply_event(self._history, Redo(), self._options))

    def dispatch(self, *events: HistoryEvent) -> None:
        """
        Apply events as one batch.

        Nothing is committed until every event has been applied, so a
        failing updater or predicate leaves the store as it was.
        """
        self._commit(replay(self._history, events, self._options))
        logger.debug("batch_applied", event_count=len(events))

    def clear(self) -> None:
        """Forget past and future; present is kept."""
        self._commit(initial_state(self._history.present))
        logger.debug("history_cleared")

    def reset(self, value: T) -> None:
        """Replace present with value and forget all history."""
        self._commit(initial_state(value))
        logger.debug("store_reset")

    def _commit(self, history: HistoryState[T]) -> None:
        self._history = history

    def __repr__(self) -> str:
        return (
            f"TemporalStore(past={len(self._history.past)}, "
            f"future={len(self._history.future)}, "
            f"limit={self._options.limit})"
        )
