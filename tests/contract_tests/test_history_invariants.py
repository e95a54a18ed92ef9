"""
Property Tests for Temporal History
Verifies the bounded-history and no-branching invariants over arbitrary
sequences of set/undo/redo.
"""

from hypothesis import given, strategies as st
from hypothesis.strategies import composite

from temporal_state import (
    Redo, SetValue, TemporalStore, Undo, always_record,
)


# =============================================================================
# STRATEGIES (Generators)
# =============================================================================

limits = st.integers(min_value=1, max_value=8)


@composite
def operations(draw):
    """Generates a list of ('set', value) / ('undo',) / ('redo',) steps."""
    steps = draw(st.lists(
        st.one_of(
            st.tuples(st.just("set"), st.integers(min_value=-20, max_value=20)),
            st.just(("undo",)),
            st.just(("redo",)),
        ),
        max_size=40
    ))
    return steps


def run(store, steps):
    for step in steps:
        if step[0] == "set":
            store.set(step[1])
        elif step[0] == "undo":
            store.undo()
        else:
            store.redo()


def as_events(steps):
    for step in steps:
        if step[0] == "set":
            yield SetValue(step[1])
        elif step[0] == "undo":
            yield Undo()
        else:
            yield Redo()


# =============================================================================
# PROPERTY TESTS
# =============================================================================

@given(st.one_of(st.integers(), st.text(), st.none(), st.lists(st.integers())))
def test_fresh_store(value):
    """Fresh store exposes the initial value and no history."""
    store = TemporalStore(value)

    assert store.state == value
    assert store.can_undo is False
    assert store.can_redo is False


@given(limits, operations())
def test_flags_and_limit_hold_after_every_step(limit, steps):
    """len(past) <= limit; flags mirror stack emptiness."""
    store = TemporalStore(0, limit=limit)

    for step in steps:
        run(store, [step])
        assert len(store.past) <= limit
        assert store.can_undo == (len(store.past) > 0)
        assert store.can_redo == (len(store.future) > 0)


@given(limits, st.integers(min_value=0, max_value=20))
def test_recoverable_entries_bounded_by_limit(limit, n):
    """After n distinct recorded sets, exactly min(n, limit) undos succeed."""
    store = TemporalStore(-1, limit=limit, should_add_to_history=always_record)
    for value in range(n):
        store.set(value)

    undone = 0
    while store.can_undo:
        store.undo()
        undone += 1

    assert undone == min(n, limit)
    assert store.can_undo is False


@given(operations(), st.integers())
def test_set_undo_redo_round_trip(steps, value):
    """set(x); undo(); redo() restores x and the pre-set present."""
    store = TemporalStore(object(), should_add_to_history=always_record)
    run(store, steps)
    before = store.state
    marker = [value]

    store.set(marker)
    store.undo()
    assert store.state is before
    assert store.future[0] is marker

    store.redo()
    assert store.state is marker
    assert store.can_redo is False


@given(operations())
def test_empty_stack_operations_are_noops(steps):
    store = TemporalStore(0)
    run(store, steps)

    while store.can_redo:
        store.redo()
    snapshot = store.snapshot
    store.redo()
    assert store.snapshot is snapshot

    while store.can_undo:
        store.undo()
    snapshot = store.snapshot
    store.undo()
    assert store.snapshot is snapshot


@given(operations(), st.integers(), st.integers())
def test_recorded_set_discards_future(steps, a, b):
    """set(a); undo(); set(b) leaves nothing to redo."""
    store = TemporalStore(0, should_add_to_history=always_record)
    run(store, steps)

    store.set(a)
    store.undo()
    store.set(b)

    assert store.can_redo is False


@given(limits, operations())
def test_batch_matches_sequential(limit, steps):
    """dispatch of a batch ends where the same calls made one by one end."""
    sequential = TemporalStore(0, limit=limit)
    batched = TemporalStore(0, limit=limit)

    run(sequential, steps)
    batched.dispatch(*as_events(steps))

    assert batched.snapshot == sequential.snapshot


@given(operations())
def test_unrecorded_sets_never_create_history(steps):
    store = TemporalStore(0, should_add_to_history=lambda prev, nxt: False)

    run(store, steps)

    assert store.can_undo is False
    assert store.can_redo is False
    sets = [step[1] for step in steps if step[0] == "set"]
    assert store.state == (sets[-1] if sets else 0)


@given(st.lists(st.integers()))
def test_default_records_every_new_container(items):
    """Default predicate treats a freshly built list as a change, even if equal."""
    store = TemporalStore(items)

    store.set(list(items))

    assert store.can_undo is True
    assert store.past[0] is items
