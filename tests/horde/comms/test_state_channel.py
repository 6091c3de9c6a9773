"""Unit tests for StateChannel."""
from __future__ import annotations

import pytest

from horde.comms.channel import StateChannel

pytestmark = pytest.mark.unit


class TestStateChannel:
    def test_initial_value(self):
        ch = StateChannel("aiming", False)
        assert ch.value is False

    def test_set_notifies_on_change(self):
        ch = StateChannel("aiming", False)
        seen = []
        ch.add_listener(seen.append)
        assert ch.set(True) is True
        assert seen == [True]
        assert ch.value is True

    def test_same_value_does_not_notify(self):
        ch = StateChannel("aiming", False)
        seen = []
        ch.add_listener(seen.append)
        assert ch.set(False) is False
        assert seen == []

    def test_remove_listener(self):
        ch = StateChannel("aiming", 0)
        seen = []
        ch.add_listener(seen.append)
        ch.remove_listener(seen.append)
        ch.set(5)
        assert seen == []

    def test_listener_added_once(self):
        ch = StateChannel("aiming", 0)
        seen = []
        ch.add_listener(seen.append)
        ch.add_listener(seen.append)
        ch.set(1)
        assert seen == [1]

    def test_remove_unknown_listener_is_safe(self):
        ch = StateChannel("aiming", 0)
        ch.remove_listener(print)

    def test_multiple_listeners(self):
        ch = StateChannel("mode", "idle", debug_log=True)
        a, b = [], []
        ch.add_listener(a.append)
        ch.add_listener(b.append)
        ch.set("running")
        assert a == b == ["running"]
