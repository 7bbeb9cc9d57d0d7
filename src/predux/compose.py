"""Right-to-left function composition."""

from __future__ import annotations

import functools
from typing import Any, Callable


def _identity(arg: Any) -> Any:
    return arg


def compose(*funcs: Callable) -> Callable:
    """Compose single-argument functions from right to left.

    The rightmost function may take any arguments, since it provides the
    signature of the result: compose(f, g, h)(*args) == f(g(h(*args))).

    Usage:
        inc = lambda x: x + 1
        double = lambda x: x * 2

        compose(double, inc)(3)  # 8
        compose()(3)             # 3
    """
    if not funcs:
        return _identity

    if len(funcs) == 1:
        return funcs[0]

    return functools.reduce(
        lambda outer, inner: lambda *args, **kwargs: outer(inner(*args, **kwargs)),
        funcs,
    )
