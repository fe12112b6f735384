from __future__ import annotations

from dataclasses import dataclass

from pomo.domain.models import Pomodoro
from pomo.domain.ports import PomodoroRepository, UseCaseError


@dataclass
class SavePomodoro:
    repository: PomodoroRepository

    async def __call__(self, pomodoro: Pomodoro) -> Pomodoro:
        if not isinstance(pomodoro, Pomodoro):
            raise UseCaseError("INVALID_POMODORO", "SavePomodoro requires a Pomodoro.")
        try:
            await self.repository.save(pomodoro)
        except Exception as exc:
            raise UseCaseError("SAVE_FAILED", str(exc)) from exc
        return pomodoro
