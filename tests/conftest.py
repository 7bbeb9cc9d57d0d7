"""Shared reducers for store tests."""

import pytest


def counter(state, action):
    if state is None:
        state = {"count": 0}
    if action["type"] == "INC":
        return {"count": state["count"] + 1}
    if action["type"] == "ADD":
        return {"count": state["count"] + action["amount"]}
    return state


def todos(state, action):
    if state is None:
        state = []
    if action["type"] == "ADD_TODO":
        return [*state, action["text"]]
    return state


@pytest.fixture
def counter_reducer():
    return counter


@pytest.fixture
def todos_reducer():
    return todos
