"""Hot-reload-aware store. Opt-in — import only if you need hot-reload support."""

from __future__ import annotations

import logging
from typing import Any

from predux.errors import PreduxError
from predux.store import Reducer, Store, StoreCreator

logger = logging.getLogger("predux.hot_reload")


class HotReloadStore(Store):
    """Store whose reducer can be swapped safely after a module reload.

    Same API as Store. Adds:
    - Exception safety: a reducer or listener that fails on REPLACE rolls
      back both the reducer and the state
    - Logging: swaps and failures are clearly logged
    - Degraded operation: on failure the store keeps its last committed
      state and the previous reducer

    Usage errors (PreduxError, e.g. replacing from inside a reducer) are
    rolled back too but still raised.
    """

    __slots__ = ()

    def replace_reducer(self, next_reducer: Reducer) -> None:
        """Safe replacement — catches exceptions, logs, never crashes."""
        if not callable(next_reducer):
            raise TypeError("Expected the next reducer to be callable.")

        previous = self._core.reducer
        previous_state = self._core.state
        try:
            self._core.replace_reducer(next_reducer)
            logger.info(
                "Replaced reducer: %s -> %s",
                getattr(previous, "__name__", repr(previous)),
                getattr(next_reducer, "__name__", repr(next_reducer)),
            )
        except PreduxError:
            self._restore(previous, previous_state)
            raise
        except Exception:
            logger.exception("Failed to replace reducer, keeping the previous one")
            self._restore(previous, previous_state)

    def _restore(self, reducer: Reducer, state: Any) -> None:
        # a listener may fail after the new reducer's state was committed
        self._core.reducer = reducer
        self._core.state = state


def hot_reloadable(create_store: StoreCreator) -> StoreCreator:
    """Store enhancer producing a HotReloadStore.

    Usage:
        store = create_store(reducer, hot_reloadable)
        # after importlib.reload(reducers):
        store.replace_reducer(reducers.root)
    """

    def create_hot_reload_store(*args: Any, **kwargs: Any) -> HotReloadStore:
        store = create_store(*args, **kwargs)
        return HotReloadStore(store._core, store.dispatch)

    return create_hot_reload_store
