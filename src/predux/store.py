"""Store — the single source of truth for application state.

State changes only through dispatch(action), which runs the reducer and then
notifies a snapshot of listeners. All state lives in a _StoreCore; a Store
is a thin handle over it, so enhancers can swap the handle's dispatch while
every other operation keeps pointing at the same core.

Listener snapshots: subscribe/unsubscribe never mutate the list a dispatch
is iterating. The registry keeps two references, current and next. Before
any mutation, next is copied if it still aliases current. dispatch() freezes
the pass by setting current = next.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from predux._action_types import ActionTypes
from predux.action import Action, has_action_type, is_plain_action
from predux.errors import (
    InvalidActionError,
    ReducerExecutingError,
    ReentrantDispatchError,
)
from predux.observable import StateObservable

logger = logging.getLogger("predux.store")

Reducer = Callable[[Any, Action], Any]
Listener = Callable[[], None]
Unsubscribe = Callable[[], None]
Dispatch = Callable[[Action], Any]
StoreCreator = Callable[..., "Store"]
StoreEnhancer = Callable[[StoreCreator], StoreCreator]


class _StoreCore:
    """Owns state, reducer, listener registry and the dispatching flag."""

    __slots__ = (
        "reducer",
        "state",
        "current_listeners",
        "next_listeners",
        "is_dispatching",
    )

    def __init__(self, reducer: Reducer, state: Any) -> None:
        self.reducer = reducer
        self.state = state
        self.current_listeners: list[Listener] = []
        self.next_listeners = self.current_listeners
        self.is_dispatching = False

    def _ensure_can_mutate_next_listeners(self) -> None:
        if self.next_listeners is self.current_listeners:
            self.next_listeners = list(self.current_listeners)

    def get_state(self) -> Any:
        if self.is_dispatching:
            raise ReducerExecutingError(
                "You may not call get_state() while the reducer is executing. "
                "The reducer has already received the state as an argument. "
                "Pass it down from the top reducer instead of reading it from the store."
            )
        return self.state

    def subscribe(self, listener: Listener) -> Unsubscribe:
        if not callable(listener):
            raise TypeError("Expected the listener to be callable.")
        if self.is_dispatching:
            raise ReducerExecutingError(
                "You may not call subscribe() while the reducer is executing. "
                "If you would like to be notified after the store has been updated, "
                "subscribe from outside the reducer and call get_state() in the listener."
            )

        subscribed = True
        self._ensure_can_mutate_next_listeners()
        self.next_listeners.append(listener)

        def unsubscribe() -> None:
            nonlocal subscribed
            if not subscribed:
                return
            if self.is_dispatching:
                raise ReducerExecutingError(
                    "You may not unsubscribe from a store listener while the reducer is executing."
                )
            subscribed = False
            self._ensure_can_mutate_next_listeners()
            # identity, not equality: bound methods and lambdas compare loosely
            for index, registered in enumerate(self.next_listeners):
                if registered is listener:
                    del self.next_listeners[index]
                    break

        return unsubscribe

    def dispatch(self, action: Action) -> Action:
        if not is_plain_action(action):
            raise InvalidActionError(
                f"Actions must be plain dicts, got {type(action).__name__}. "
                "Use custom middleware for async actions."
            )
        if not has_action_type(action):
            raise InvalidActionError(
                'Actions may not have a missing "type". Have you misspelled a constant?'
            )
        if self.is_dispatching:
            raise ReentrantDispatchError("Reducers may not dispatch actions.")

        try:
            self.is_dispatching = True
            self.state = self.reducer(self.state, action)
        finally:
            self.is_dispatching = False

        listeners = self.current_listeners = self.next_listeners
        for listener in listeners:
            listener()

        return action

    def replace_reducer(self, next_reducer: Reducer) -> None:
        if not callable(next_reducer):
            raise TypeError("Expected the next reducer to be callable.")
        self.reducer = next_reducer
        self.dispatch({"type": ActionTypes.REPLACE})
        logger.debug("Reducer replaced with %r", next_reducer)


class Store:
    """Public handle over a store core.

    `store.dispatch(action)` is the only way to change state. It is an
    attribute rather than a method so enhancers such as apply_middleware can
    hand out a store whose dispatch runs through their chain; see
    with_dispatch().
    """

    __slots__ = ("_core", "dispatch")

    def __init__(self, core: _StoreCore, dispatch: Optional[Dispatch] = None) -> None:
        self._core = core
        self.dispatch: Dispatch = dispatch if dispatch is not None else core.dispatch

    def get_state(self) -> Any:
        """Current state. Raises ReducerExecutingError inside a reducer."""
        return self._core.get_state()

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """Call listener after every dispatch. Returns an idempotent unsubscribe.

        Listeners see a snapshot taken when a dispatch starts notifying:
        subscribing or unsubscribing from inside a listener only affects the
        next dispatch, nested or not.
        """
        return self._core.subscribe(listener)

    def replace_reducer(self, next_reducer: Reducer) -> None:
        """Swap the reducer, then dispatch REPLACE so it can seed its state.

        Useful for code splitting and hot reloading.
        """
        self._core.replace_reducer(next_reducer)

    def observable(self) -> StateObservable:
        """Minimal observable of state changes, for reactive libraries."""
        return StateObservable(self.get_state, self.subscribe)

    def with_dispatch(self, dispatch: Dispatch) -> Store:
        """A handle on the same core whose dispatch is replaced."""
        return type(self)(self._core, dispatch)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._core.state!r})"


def create_store(
    reducer: Reducer,
    preloaded_state: Any = None,
    enhancer: Optional[StoreEnhancer] = None,
) -> Store:
    """Create a store holding the state tree.

    Args:
        reducer: (state, action) -> next state.
        preloaded_state: initial state; the reducer sees None otherwise.
        enhancer: store enhancer such as apply_middleware(...). May be passed
            as the second argument when there is no preloaded state.

    Usage:
        def counter(state, action):
            if state is None:
                state = {"count": 0}
            if action["type"] == "INC":
                return {"count": state["count"] + 1}
            return state

        store = create_store(counter)
        store.dispatch({"type": "INC"})
        store.get_state()  # {"count": 1}
    """
    if callable(preloaded_state) and enhancer is None:
        enhancer = preloaded_state
        preloaded_state = None

    if enhancer is not None:
        if not callable(enhancer):
            raise TypeError("Expected the enhancer to be callable.")
        return enhancer(create_store)(reducer, preloaded_state)

    if not callable(reducer):
        raise TypeError("Expected the reducer to be callable.")

    core = _StoreCore(reducer, preloaded_state)
    # Every reducer sees at least one action and returns its initial state.
    core.dispatch({"type": ActionTypes.INIT})
    return Store(core)
