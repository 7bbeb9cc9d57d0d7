"""Tests for Store.observable() — reactive interop."""

import pytest

from predux import StateObservable, Subscription, create_store


class _Observer:
    def __init__(self):
        self.values = []

    def next(self, value):
        self.values.append(value)


class TestStateObservable:
    def test_returns_observable(self, counter_reducer):
        obs = create_store(counter_reducer).observable()
        assert isinstance(obs, StateObservable)
        assert obs.__observable__() is obs

    def test_rejects_none_observer(self, counter_reducer):
        obs = create_store(counter_reducer).observable()
        with pytest.raises(TypeError, match="observer"):
            obs.subscribe(None)

    def test_pushes_current_state_then_changes(self, counter_reducer):
        store = create_store(counter_reducer)
        observer = _Observer()
        store.observable().subscribe(observer)
        assert observer.values == [{"count": 0}]

        store.dispatch({"type": "INC"})
        store.dispatch({"type": "INC"})
        assert observer.values == [{"count": 0}, {"count": 1}, {"count": 2}]

    def test_unsubscribe_stops_updates(self, counter_reducer):
        store = create_store(counter_reducer)
        observer = _Observer()
        sub = store.observable().subscribe(observer)
        assert isinstance(sub, Subscription)
        assert not sub.closed

        sub.unsubscribe()
        assert sub.closed
        store.dispatch({"type": "INC"})
        assert observer.values == [{"count": 0}]

        sub.unsubscribe()  # idempotent

    def test_observer_without_next_is_accepted(self, counter_reducer):
        store = create_store(counter_reducer)
        sub = store.observable().subscribe(object())
        store.dispatch({"type": "INC"})
        sub.unsubscribe()

    def test_next_added_later_is_used(self, counter_reducer):
        store = create_store(counter_reducer)
        values = []

        class Late:
            pass

        observer = Late()
        store.observable().subscribe(observer)
        observer.next = values.append
        store.dispatch({"type": "INC"})
        assert values == [{"count": 1}]
