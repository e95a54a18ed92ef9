"""
Temporal Transitions
====================

Pure transition functions over HistoryState.

INVARIANT: apply_event(state, event, options) is a PURE FUNCTION
of its inputs plus whatever the caller-supplied updater and predicate do.
It never mutates the given state; it returns a new one, or the same
object when the event changes nothing.

GUARANTEES:
===========
1. len(past) <= options.limit after every transition
2. A recorded set clears future
3. Undo with empty past and redo with empty future are no-ops
4. present is always defined
"""

from __future__ import annotations
from typing import Callable, Iterable, Tuple, TypeVar, Union

import structlog

from .contracts import (
    HistoryEvent, HistoryState, Redo, SetValue, SetWith, TemporalOptions, Undo
)


logger = structlog.get_logger(__name__)

T = TypeVar('T')


def initial_state(value: T) -> HistoryState[T]:
    """Fresh history: value as present, nothing to undo or redo."""
    return HistoryState(present=value)


def resolve_update(update: Union[T, Callable[[T], T]]) -> HistoryEvent:
    """
    Turn a set() argument into an event.

    A callable is treated as an updater. Stores whose values are
    themselves callables should dispatch SetValue explicitly.
    """
    if callable(update):
        return SetWith(updater=update)
    return SetValue(value=update)


def _push_bounded(past: Tuple[T, ...], value: T, limit: int) -> Tuple[T, ...]:
    """Append value to past, evicting oldest entries beyond limit."""
    updated = past + (value,)
    overflow = len(updated) - limit
    if overflow > 0:
        logger.debug("history_evicted", count=overflow, limit=limit)
        return updated[overflow:]
    return updated


def _apply_set(
    state: HistoryState[T],
    candidate: T,
    options: TemporalOptions[T]
) -> HistoryState[T]:
    if not options.should_add_to_history(state.present, candidate):
        # Applied but not recorded: past and future are kept as-is
        logger.debug("history_skipped", past_size=len(state.past))
        return HistoryState(
            present=candidate,
            past=state.past,
            future=state.future
        )

    past = _push_bounded(state.past, state.present, options.limit)
    logger.debug(
        "history_recorded",
        past_size=len(past),
        discarded_future=len(state.future)
    )
    return HistoryState(present=candidate, past=past, future=())


def _apply_undo(state: HistoryState[T]) -> HistoryState[T]:
    if not state.past:
        logger.debug("undo_ignored")
        return state

    prior = state.past[-1]
    return HistoryState(
        present=prior,
        past=state.past[:-1],
        future=(state.present,) + state.future
    )


def _apply_redo(
    state: HistoryState[T],
    options: TemporalOptions[T]
) -> HistoryState[T]:
    if not state.future:
        logger.debug("redo_ignored")
        return state

    next_value = state.future[0]
    return HistoryState(
        present=next_value,
        past=_push_bounded(state.past, state.present, options.limit),
        future=state.future[1:]
    )


def apply_event(
    state: HistoryState[T],
    event: HistoryEvent,
    options: TemporalOptions[T]
) -> HistoryState[T]:
    """
    Compute the state that follows event.

    Updater and predicate exceptions propagate; the input state is
    untouched in that case.
    """
    if isinstance(event, SetValue):
        return _apply_set(state, event.value, options)
    if isinstance(event, SetWith):
        return _apply_set(state, event.updater(state.present), options)
    if isinstance(event, Undo):
        return _apply_undo(state)
    if isinstance(event, Redo):
        return _apply_redo(state, options)
    raise TypeError(f"Unknown history event: {event!r}")


def replay(
    state: HistoryState[T],
    events: Iterable[HistoryEvent],
    options: TemporalOptions[T]
) -> HistoryState[T]:
    """
    Fold events over state in order.

    Each event sees the result of the one before it, so queued
    updaters observe the latest present.
    """
    for event in events:
        state = apply_event(state, event, options)
    return state
