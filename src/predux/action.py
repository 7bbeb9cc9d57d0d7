"""Plain-action validation.

Actions are bare data: an exact dict, never a subclass or another mapping,
so they stay serializable and replayable.
"""

from __future__ import annotations

from typing import Any

Action = dict[str, Any]


def is_plain_action(obj: object) -> bool:
    """True if obj is a plain dict (not a subclass, not another mapping)."""
    return type(obj) is dict


def has_action_type(action: Action) -> bool:
    """True if the action carries a type other than None."""
    return action.get("type") is not None
