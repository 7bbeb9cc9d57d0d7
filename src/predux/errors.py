"""Usage errors raised by the store and its enhancers."""

from __future__ import annotations


class PreduxError(Exception):
    """Base exception for all predux usage errors."""


class InvalidActionError(PreduxError):
    """Action is not a plain dict, or its type is missing."""


class ReducerExecutingError(PreduxError):
    """Store was used from inside a running reducer."""


class ReentrantDispatchError(ReducerExecutingError):
    """A reducer tried to dispatch."""


class MiddlewareSetupError(PreduxError):
    """dispatch() was called while the middleware chain was being built."""
