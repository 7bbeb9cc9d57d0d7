"""predux: a predictable state container for Python."""

from importlib.metadata import version as _version

__version__ = _version("predux")

from predux.compose import compose
from predux.store import Store, create_store
from predux.middleware import Middleware, MiddlewareAPI, apply_middleware
from predux.observable import StateObservable, Subscription
from predux.selector import observe
from predux.action import is_plain_action
from predux.errors import (
    PreduxError,
    InvalidActionError,
    ReducerExecutingError,
    ReentrantDispatchError,
    MiddlewareSetupError,
)
# hot_reload and textual NOT auto-imported — opt-in only

__all__ = [
    "compose",
    "create_store",
    "Store",
    "apply_middleware",
    "Middleware",
    "MiddlewareAPI",
    "StateObservable",
    "Subscription",
    "observe",
    "is_plain_action",
    "PreduxError",
    "InvalidActionError",
    "ReducerExecutingError",
    "ReentrantDispatchError",
    "MiddlewareSetupError",
]
