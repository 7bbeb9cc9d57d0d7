"""Textual integration for predux. Opt-in — requires textual.

A store notifies after every dispatch, nested ones included, so a burst of
actions would repaint a widget once per action. bind() instead marks the
binding dirty and applies the selected value once, after the app's next
refresh. Invariant: at most one flush per binding is queued at a time.

While an app is paused (widgets being replaced) or not running, flushes
are dropped and the binding stays dirty; leaving pause() queues a flush
for every binding of that app, so the widgets catch up with the store.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Callable, TypeVar

from textual.css.query import NoMatches

from predux.store import Store, Unsubscribe

T = TypeVar("T")

_UNSET = object()

# Keyed by id(app) so multiple apps work in tests.
_paused_apps: set[int] = set()
_bindings: dict[int, list[_Binding]] = {}


@contextmanager
def pause(app):
    """Hold back widget updates while the tree is rebuilt, then catch up."""
    key = id(app)
    _paused_apps.add(key)
    try:
        yield
    finally:
        _paused_apps.discard(key)
        for binding in list(_bindings.get(key, ())):
            binding.schedule()


def is_safe(app) -> bool:
    """Is the widget tree in a queryable state?"""
    return app.is_running and id(app) not in _paused_apps


class _Binding:
    """One select/effect pair tied to an app and a store."""

    __slots__ = ("_app", "_store", "_select", "_effect", "_main", "_last", "_pending")

    def __init__(self, app, store: Store, select: Callable[[Any], T], effect: Callable[[T], None]) -> None:
        self._app = app
        self._store = store
        self._select = select
        self._effect = effect
        self._main = threading.get_ident()
        self._last: Any = _UNSET
        self._pending = False

    def schedule(self) -> None:
        """Store listener: queue a single flush after the next refresh."""
        if self._pending:
            return
        self._pending = True
        if threading.get_ident() != self._main:
            self._app.call_from_thread(self._app.call_after_refresh, self.flush)
        else:
            self._app.call_after_refresh(self.flush)

    def flush(self) -> None:
        self._pending = False
        if not is_safe(self._app):
            return
        value = self._select(self._store.get_state())
        if self._last is not _UNSET and value == self._last:
            return
        try:
            self._effect(value)
        except NoMatches:
            # widget not mounted yet; retry on the next flush
            self._last = _UNSET
            return
        self._last = value


def bind(
    app,
    store: Store,
    select: Callable[[Any], T],
    effect: Callable[[T], None],
    *,
    fire_immediately: bool = False,
) -> Unsubscribe:
    """Apply select(state) to widgets through effect, once per refresh.

    Dispatches in between refreshes, nested ones included, collapse into a
    single effect call with the latest value, and only when that value
    differs from the last one applied. NoMatches from widget queries is
    swallowed and the value is retried on the next flush. Dispatches from
    a worker thread are marshaled via call_from_thread.

    With fire_immediately the current value is applied right away (if the
    app is safe); otherwise it becomes the baseline.

    Usage:
        unsubscribe = bind(
            app, store,
            lambda s: s["count"],
            lambda n: app.query_one("#count", Label).update(str(n)),
        )
    """
    binding = _Binding(app, store, select, effect)
    if fire_immediately:
        binding.flush()
    else:
        binding._last = select(store.get_state())

    key = id(app)
    _bindings.setdefault(key, []).append(binding)
    unsubscribe_store = store.subscribe(binding.schedule)

    def unsubscribe() -> None:
        unsubscribe_store()
        bindings = _bindings.get(key, [])
        if binding in bindings:
            bindings.remove(binding)
        if not bindings:
            _bindings.pop(key, None)

    return unsubscribe
