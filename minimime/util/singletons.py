"""Reset hooks for process-wide singletons.

Modules that keep a lazily built instance at module level register a
function here that drops it.  Tests call :func:`reset_all_singletons` so
each case starts from a cold process state.
"""

from __future__ import annotations

from collections.abc import Callable

_reset_fns: list[Callable[[], None]] = []


def register_singleton(reset_fn: Callable[[], None]) -> None:
    """Register *reset_fn*; registering the same function twice is a no-op."""
    if reset_fn not in _reset_fns:
        _reset_fns.append(reset_fn)


def reset_all_singletons() -> None:
    """Drop every registered singleton so the next access rebuilds it."""
    for fn in _reset_fns:
        fn()
