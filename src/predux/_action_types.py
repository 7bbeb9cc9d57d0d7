"""Reserved action types — private to predux.

For any unknown action a reducer must return the current state, and if the
current state is None it must return its initial state. These types exist
only to drive that contract. Do not reference them from application code.
"""

import random
import string

_ALPHABET = string.ascii_lowercase + string.digits


def _random_suffix() -> str:
    return ".".join(random.choices(_ALPHABET, k=6))


class ActionTypes:
    INIT = "@@predux/INIT" + _random_suffix()
    REPLACE = "@@predux/REPLACE" + _random_suffix()
