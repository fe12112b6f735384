from __future__ import annotations

import logging

import pytest

from pomo.utils import logging as logging_utils
from pomo.utils.errors import CommonError, UnprovidedDependencyError


def test_common_error_str_includes_owner() -> None:
    assert str(CommonError("Storage", "disk full")) == "Storage: disk full"
    assert str(CommonError("Storage")) == "Storage: None"


def test_unprovided_dependency_error_message() -> None:
    err = UnprovidedDependencyError("PomodoroRepository")
    assert str(err) == "PomodoroRepository is not provided."
    assert err.dependency_name == "PomodoroRepository"
    assert isinstance(err, CommonError)
    assert isinstance(err, LookupError)


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("POMO_LOG_LEVEL", raising=False)
    monkeypatch.delenv("POMO_DEBUG", raising=False)
    root = logging.getLogger()
    previous = root.level
    yield monkeypatch
    root.setLevel(previous)


def test_env_level_overrides_default(clean_env) -> None:
    clean_env.setenv("POMO_LOG_LEVEL", "warning")
    assert logging_utils.configure_root(logging.INFO) == logging.WARNING
    assert logging.getLogger().level == logging.WARNING


def test_debug_flag_forces_debug(clean_env) -> None:
    clean_env.setenv("POMO_DEBUG", "yes")
    assert logging_utils.env_requests_debug() is True
    assert logging_utils.configure_root("INFO") == logging.DEBUG


def test_default_level_when_env_unset(clean_env) -> None:
    assert logging_utils.env_requests_debug() is False
    assert logging_utils.configure_root("error") == logging.ERROR
    assert logging_utils.level_name(logging.ERROR) == "ERROR"


def test_unknown_level_name_falls_back(clean_env) -> None:
    clean_env.setenv("POMO_LOG_LEVEL", "chatty")
    assert logging_utils.configure_root(logging.DEBUG) == logging.INFO
