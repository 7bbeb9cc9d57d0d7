"""Tests for plain-action validation and reserved action types."""

from collections import OrderedDict

from predux import is_plain_action
from predux.action import has_action_type
from predux._action_types import ActionTypes


class TestIsPlainAction:
    def test_plain_dict(self):
        assert is_plain_action({"type": "X"})
        assert is_plain_action({})

    def test_rejects_dict_subclass(self):
        class Custom(dict):
            pass

        assert not is_plain_action(Custom(type="X"))
        assert not is_plain_action(OrderedDict(type="X"))

    def test_rejects_non_mappings(self):
        for value in (None, 1, "INC", ["type"], object(), lambda: None):
            assert not is_plain_action(value)


class TestHasActionType:
    def test_present(self):
        assert has_action_type({"type": "INC"})
        assert has_action_type({"type": 0})

    def test_missing_or_none(self):
        assert not has_action_type({})
        assert not has_action_type({"type": None})


class TestActionTypes:
    def test_reserved_prefixes(self):
        assert ActionTypes.INIT.startswith("@@predux/INIT")
        assert ActionTypes.REPLACE.startswith("@@predux/REPLACE")

    def test_randomized_suffix(self):
        suffix = ActionTypes.INIT[len("@@predux/INIT"):]
        assert len(suffix.split(".")) == 6
        assert ActionTypes.INIT != ActionTypes.REPLACE
