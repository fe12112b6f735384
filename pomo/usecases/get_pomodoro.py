from __future__ import annotations

from dataclasses import dataclass

from pomo.domain.models import Pomodoro
from pomo.domain.ports import PomodoroRepository, UseCaseError


@dataclass
class GetPomodoro:
    repository: PomodoroRepository
    default: Pomodoro

    async def __call__(self, _: object = None) -> Pomodoro:
        """Return the stored pomodoro, falling back to ``default``."""
        try:
            stored = await self.repository.load()
        except Exception as exc:
            raise UseCaseError("LOAD_FAILED", str(exc)) from exc
        return stored.value_or(self.default)
