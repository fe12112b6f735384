"""Domain value objects shared across adapters, use-cases, and view models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from returns.maybe import Maybe, Nothing, Some


@dataclass(frozen=True)
class Pomodoro:
    """One focus/break cycle configuration."""

    focus_time: timedelta
    """Length of the focus interval; always positive."""

    break_time: Maybe[timedelta] = Nothing
    """Optional pause after the focus interval; ``Nothing`` means no break."""

    def __post_init__(self) -> None:
        if not isinstance(self.focus_time, timedelta) or self.focus_time <= timedelta(0):
            raise ValueError("Pomodoro focus_time must be a positive timedelta.")
        if not isinstance(self.break_time, Maybe):
            raise ValueError("Pomodoro break_time must be a Maybe[timedelta].")
        pause = self.break_time.value_or(timedelta(0))
        if not isinstance(pause, timedelta) or pause < timedelta(0):
            raise ValueError("Pomodoro break_time must be a non-negative timedelta.")

    @property
    def cycle_time(self) -> timedelta:
        return self.focus_time + self.break_time.value_or(timedelta(0))

    @classmethod
    def from_minutes(cls, focus: float, break_: Optional[float] = None) -> "Pomodoro":
        try:
            focus_time = timedelta(minutes=focus)
            pause: Maybe[timedelta] = Nothing if break_ is None else Some(timedelta(minutes=break_))
        except (OverflowError, ValueError, TypeError) as exc:
            raise ValueError(f"Pomodoro minutes out of range: {exc}") from exc
        return cls(focus_time=focus_time, break_time=pause)


__all__ = ["Pomodoro"]
