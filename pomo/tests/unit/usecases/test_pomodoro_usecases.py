from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from returns.maybe import Some

from pomo.adapters.pomodoro_memory import PomodoroMemory
from pomo.domain.models import Pomodoro
from pomo.domain.ports import UseCaseError
from pomo.usecases.get_pomodoro import GetPomodoro
from pomo.usecases.save_pomodoro import SavePomodoro

DEFAULT = Pomodoro.from_minutes(25, 5)


@pytest.mark.asyncio
async def test_get_returns_default_when_nothing_stored() -> None:
    uc = GetPomodoro(repository=PomodoroMemory(), default=DEFAULT)
    assert await uc() == DEFAULT


@pytest.mark.asyncio
async def test_get_returns_stored_value() -> None:
    stored = Pomodoro.from_minutes(40)
    uc = GetPomodoro(repository=PomodoroMemory(initial=stored), default=DEFAULT)
    assert await uc(None) == stored


@pytest.mark.asyncio
async def test_get_wraps_adapter_errors() -> None:
    repo = PomodoroMemory(fail_with=OSError("disk unplugged"))
    uc = GetPomodoro(repository=repo, default=DEFAULT)

    with pytest.raises(UseCaseError) as info:
        await uc()

    assert info.value.code == "LOAD_FAILED"
    assert "disk unplugged" in info.value.message
    assert isinstance(info.value.__cause__, OSError)


@pytest.mark.asyncio
async def test_save_persists_and_returns_pomodoro() -> None:
    repo = PomodoroMemory()
    pomodoro = Pomodoro.from_minutes(30, 10)

    assert await SavePomodoro(repository=repo)(pomodoro) is pomodoro
    assert repo.stored == Some(pomodoro)
    assert repo.save_calls == 1


@pytest.mark.asyncio
async def test_save_rejects_non_pomodoro() -> None:
    repo = AsyncMock()
    with pytest.raises(UseCaseError) as info:
        await SavePomodoro(repository=repo)({"focus": 25})
    assert info.value.code == "INVALID_POMODORO"
    repo.save.assert_not_awaited()


@pytest.mark.asyncio
async def test_save_wraps_adapter_errors() -> None:
    repo = AsyncMock()
    repo.save.side_effect = PermissionError("read-only")
    with pytest.raises(UseCaseError) as info:
        await SavePomodoro(repository=repo)(DEFAULT)
    assert info.value.code == "SAVE_FAILED"
