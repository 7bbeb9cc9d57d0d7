"""apply_middleware — a store enhancer that wraps dispatch in a chain.

Middleware sees every action before the reducer does. Each middleware is a
three-level curried function:

    def logger(api):
        def wrap(next_dispatch):
            def dispatch(action):
                print("dispatching", action)
                result = next_dispatch(action)
                print("next state", api.get_state())
                return result
            return dispatch
        return wrap

Because middleware may be asynchronous or rewrite actions, apply_middleware
should be the first (outermost) enhancer in a composed chain.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol

from predux.action import Action
from predux.compose import compose
from predux.errors import MiddlewareSetupError
from predux.store import Dispatch, Store, StoreCreator, StoreEnhancer


class MiddlewareAPI:
    """The view of the store each middleware is given.

    dispatch is late-bound: it always forwards to the fully wired chain, so
    a middleware that re-dispatches sends the action through every
    middleware again.
    """

    __slots__ = ("get_state", "_dispatch_ref")

    def __init__(self, get_state: Callable[[], Any], dispatch_ref: list[Dispatch]) -> None:
        self.get_state = get_state
        self._dispatch_ref = dispatch_ref

    def dispatch(self, action: Action, *args: Any, **kwargs: Any) -> Any:
        return self._dispatch_ref[0](action, *args, **kwargs)


class Middleware(Protocol):
    def __call__(self, api: MiddlewareAPI) -> Callable[[Dispatch], Dispatch]: ...


def _dispatch_during_setup(*args: Any, **kwargs: Any) -> Any:
    raise MiddlewareSetupError(
        "Dispatching while constructing your middleware is not allowed. "
        "Other middleware would not be applied to this dispatch."
    )


def apply_middleware(*middlewares: Middleware) -> StoreEnhancer:
    """Create a store enhancer that applies middlewares to dispatch.

    Usage:
        store = create_store(reducer, apply_middleware(logger, thunk))
    """

    def enhancer(create_store: StoreCreator) -> StoreCreator:
        def create_store_with_middleware(*args: Any, **kwargs: Any) -> Store:
            store = create_store(*args, **kwargs)
            dispatch_ref: list[Dispatch] = [_dispatch_during_setup]

            api = MiddlewareAPI(store.get_state, dispatch_ref)
            chain = [middleware(api) for middleware in middlewares]
            dispatch_ref[0] = compose(*chain)(store.dispatch)

            return store.with_dispatch(dispatch_ref[0])

        return create_store_with_middleware

    return enhancer
