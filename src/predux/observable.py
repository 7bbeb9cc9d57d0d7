"""Interop point for observable/reactive libraries.

A StateObservable pushes the current state to an observer as soon as it
subscribes, then again after every dispatch. Observers are any object with
an optional next(value) method; objects without one are accepted and never
called, as the observable proposal allows.
"""

from __future__ import annotations

from typing import Any, Callable


class Subscription:
    """Handle returned by StateObservable.subscribe()."""

    __slots__ = ("_unsubscribe", "_closed")

    def __init__(self, unsubscribe: Callable[[], None]) -> None:
        self._unsubscribe = unsubscribe
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def unsubscribe(self) -> None:
        self._unsubscribe()
        self._closed = True


class StateObservable:
    """Minimal observable of a store's state."""

    __slots__ = ("_get_state", "_subscribe")

    def __init__(
        self,
        get_state: Callable[[], Any],
        subscribe: Callable[[Callable[[], None]], Callable[[], None]],
    ) -> None:
        self._get_state = get_state
        self._subscribe = subscribe

    def subscribe(self, observer: object) -> Subscription:
        """Push state to observer.next now and after every dispatch.

        Usage:
            class Printer:
                def next(self, state):
                    print(state)

            sub = store.observable().subscribe(Printer())
            sub.unsubscribe()
        """
        if observer is None:
            raise TypeError("Expected the observer to be an object.")

        def observe_state() -> None:
            on_next = getattr(observer, "next", None)
            if callable(on_next):
                on_next(self._get_state())

        observe_state()
        return Subscription(self._subscribe(observe_state))

    def __observable__(self) -> StateObservable:
        return self
