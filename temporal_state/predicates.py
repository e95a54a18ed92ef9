"""
Recording Predicates

Functions of (prev, next) -> bool deciding whether a set creates an
undoable checkpoint. Any callable with this signature may be passed as
should_add_to_history.
"""

from typing import Any


# Immutable scalars compared by value; everything else by identity
SCALAR_TYPES = (bool, int, float, complex, str, bytes, type(None))


def reference_differs(prev: Any, next_value: Any) -> bool:
    """
    Default predicate: record when next is a different value.

    Scalars (numbers, strings, bytes, None) compare by value, so setting
    an equal number is not a change. Any other object compares by
    identity: a freshly built list, dict or array is always a change,
    even when structurally equal to the present.
    """
    if isinstance(prev, SCALAR_TYPES) and isinstance(next_value, SCALAR_TYPES):
        return prev != next_value
    return prev is not next_value


def values_differ(prev: Any, next_value: Any) -> bool:
    """
    Record when the values compare unequal.

    Opt-in structural comparison. The result of != is coerced with
    bool(), so types whose comparison is not a plain bool must support
    truth testing.
    """
    return bool(prev != next_value)


def identity_differs(prev: Any, next_value: Any) -> bool:
    """Record whenever next is a different object, even if equal."""
    return prev is not next_value


def always_record(prev: Any, next_value: Any) -> bool:
    """Record every set."""
    return True


def never_record(prev: Any, next_value: Any) -> bool:
    """Record nothing; sets still replace present."""
    return False
