from __future__ import annotations

import asyncio
from typing import Optional

from returns.maybe import Maybe, Nothing, Some

from pomo.domain.models import Pomodoro
from pomo.domain.ports import PomodoroRepository


class PomodoroMemory(PomodoroRepository):
    """In-memory repository stub used for tests and offline development.

    ``delay_s`` simulates latency before every call; ``fail_with`` is raised
    from every call once set.
    """

    def __init__(
        self,
        initial: Optional[Pomodoro] = None,
        *,
        delay_s: float = 0.0,
        fail_with: Optional[Exception] = None,
    ) -> None:
        self.stored: Maybe[Pomodoro] = Nothing if initial is None else Some(initial)
        self.delay_s = delay_s
        self.fail_with = fail_with
        self.load_calls = 0
        self.save_calls = 0

    async def load(self) -> Maybe[Pomodoro]:
        self.load_calls += 1
        await self._simulate()
        return self.stored

    async def save(self, pomodoro: Pomodoro) -> None:
        self.save_calls += 1
        await self._simulate()
        self.stored = Some(pomodoro)

    async def _simulate(self) -> None:
        if self.delay_s:
            await asyncio.sleep(self.delay_s)
        if self.fail_with is not None:
            raise self.fail_with
