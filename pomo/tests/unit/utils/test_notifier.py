from __future__ import annotations

import logging
from typing import List

import pytest

from pomo.utils.errors import CommonError
from pomo.utils.notifier import ChangeNotifier


def test_listeners_called_in_registration_order() -> None:
    notifier = ChangeNotifier()
    calls: List[str] = []
    notifier.add_listener(lambda: calls.append("first"))
    notifier.add_listener(lambda: calls.append("second"))

    notifier.notify_listeners()

    assert calls == ["first", "second"]
    assert notifier.has_listeners is True


def test_listener_removing_itself_during_notify_does_not_skip_others() -> None:
    notifier = ChangeNotifier()
    calls: List[str] = []

    def once() -> None:
        calls.append("once")
        notifier.remove_listener(once)

    notifier.add_listener(once)
    notifier.add_listener(lambda: calls.append("always"))

    notifier.notify_listeners()
    notifier.notify_listeners()

    assert calls == ["once", "always", "always"]


def test_listener_added_during_notify_waits_for_next_round() -> None:
    notifier = ChangeNotifier()
    calls: List[str] = []

    def late() -> None:
        calls.append("late")

    def adder() -> None:
        calls.append("adder")
        notifier.add_listener(late)

    notifier.add_listener(adder)
    notifier.notify_listeners()
    assert calls == ["adder"]


def test_removing_unknown_listener_is_ignored() -> None:
    notifier = ChangeNotifier()
    notifier.remove_listener(lambda: None)
    assert notifier.has_listeners is False


def test_failing_listener_is_logged_and_others_still_run(caplog) -> None:
    notifier = ChangeNotifier()
    calls: List[str] = []

    def broken() -> None:
        raise RuntimeError("listener exploded")

    notifier.add_listener(broken)
    notifier.add_listener(lambda: calls.append("ok"))

    with caplog.at_level(logging.ERROR, logger="pomo.utils.notifier"):
        notifier.notify_listeners()

    assert calls == ["ok"]
    assert any("raised" in record.getMessage() for record in caplog.records)


def test_dispose_clears_and_blocks_new_listeners() -> None:
    notifier = ChangeNotifier()
    calls: List[str] = []
    notifier.add_listener(lambda: calls.append("x"))

    notifier.dispose()
    notifier.notify_listeners()

    assert calls == []
    assert notifier.has_listeners is False
    with pytest.raises(CommonError):
        notifier.add_listener(lambda: None)
