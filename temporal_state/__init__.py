"""
Temporal State
==============

In-memory undo/redo history for arbitrary values.

INVARIANTS:
- past holds at most `limit` entries, oldest evicted first
- A recorded change clears future (no branching history)
- undo/redo on an empty stack are no-ops
- present is always defined

Modules:
- contracts: HistoryState, TemporalOptions and history events
- predicates: built-in should_add_to_history functions
- transitions: pure apply_event/replay over HistoryState
- store: TemporalStore, the stateful facade
"""

from .contracts import (
    DEFAULT_HISTORY_LIMIT,
    HistoryEvent,
    HistoryState,
    Redo,
    SetValue,
    SetWith,
    TemporalOptions,
    Undo,
)
from .predicates import (
    always_record, identity_differs, never_record, reference_differs, values_differ,
)
from .store import TemporalStore
from .transitions import apply_event, initial_state, replay, resolve_update

__all__ = [
    'DEFAULT_HISTORY_LIMIT',
    'HistoryEvent',
    'HistoryState',
    'Redo',
    'SetValue',
    'SetWith',
    'TemporalOptions',
    'Undo',
    'always_record',
    'identity_differs',
    'never_record',
    'reference_differs',
    'values_differ',
    'TemporalStore',
    'apply_event',
    'initial_state',
    'replay',
    'resolve_update',
]
