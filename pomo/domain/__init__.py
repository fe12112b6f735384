"""Domain package exports for value objects and ports."""

from .models import Pomodoro
from .ports import PomodoroRepository, UseCaseError

__all__ = ["Pomodoro", "PomodoroRepository", "UseCaseError"]
