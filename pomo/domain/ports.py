from __future__ import annotations

from typing import Protocol

from returns.maybe import Maybe

from .models import Pomodoro


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class PomodoroRepository(Protocol):
    """Persistence for the user's pomodoro configuration."""

    async def load(self) -> Maybe[Pomodoro]: ...  # Nothing when never saved
    async def save(self, pomodoro: Pomodoro) -> None: ...
