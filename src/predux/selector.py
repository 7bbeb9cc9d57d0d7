"""observe() — side effects driven by a selected slice of state.

A plain listener runs after every dispatch. observe() runs its effect only
when select(state)'s result changes, so unrelated actions stay quiet.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from predux.store import Store, Unsubscribe

T = TypeVar("T")

_UNSET = object()


def observe(
    store: Store,
    select: Callable[[Any], T],
    effect: Callable[[T], None],
    *,
    fire_immediately: bool = False,
) -> Unsubscribe:
    """Call effect(value) whenever select(state) returns a different value.

    The selection is evaluated right away to establish a baseline; the
    effect only fires for that first value with fire_immediately=True.
    Returns the unsubscribe function.

    Usage:
        seen = []
        unsubscribe = observe(store, lambda s: s["count"], seen.append)
        store.dispatch({"type": "INC"})   # seen == [1]
        store.dispatch({"type": "NOOP"})  # seen == [1]
        unsubscribe()
    """
    last: list[Any] = [_UNSET]

    def check() -> None:
        value = select(store.get_state())
        if last[0] is _UNSET or value != last[0]:
            last[0] = value
            effect(value)

    if fire_immediately:
        check()
    else:
        last[0] = select(store.get_state())
    return store.subscribe(check)
