from __future__ import annotations

from datetime import timedelta
from typing import Any, Optional

from returns.result import Failure, Success

from ..domain.models import Pomodoro
from ..domain.ports import UseCaseError
from ..usecases.get_pomodoro import GetPomodoro
from ..usecases.save_pomodoro import SavePomodoro
from ..utils.command import Command
from ..utils.notifier import ChangeNotifier


class PomodoroVM(ChangeNotifier):
    """Owns the pomodoro screen state and its load/save commands, no I/O here."""

    def __init__(self, *, get_pomodoro: GetPomodoro, save_pomodoro: SavePomodoro) -> None:
        super().__init__()
        self.pomodoro: Optional[Pomodoro] = None
        self._last_failed: Optional[Command[Any, Pomodoro]] = None
        self.load: Command[None, Pomodoro] = Command(get_pomodoro, name="load_pomodoro")
        self.save: Command[Pomodoro, Pomodoro] = Command(save_pomodoro, name="save_pomodoro")
        self.load.add_listener(self._on_load_changed)
        self.save.add_listener(self._on_save_changed)

    # ------------------------------------------------------------------
    # View-facing state
    # ------------------------------------------------------------------
    @property
    def busy(self) -> bool:
        return self.load.running or self.save.running

    @property
    def error_message(self) -> str:
        """Text of the command that failed most recently, ``""`` when none did."""
        if self._last_failed is None:
            return ""
        outcome = self._last_failed.result
        if isinstance(outcome, Failure):
            return self.describe_error(outcome.failure())
        return ""

    @property
    def focus_label(self) -> str:
        if self.pomodoro is None:
            return ""
        return self.fmt_duration(self.pomodoro.focus_time)

    @property
    def break_label(self) -> str:
        if self.pomodoro is None:
            return ""
        return self.pomodoro.break_time.map(self.fmt_duration).value_or("")

    @staticmethod
    def describe_error(exc: BaseException) -> str:
        if isinstance(exc, UseCaseError):
            return f"{exc.code}: {exc.message}"
        return str(exc) or type(exc).__name__

    @staticmethod
    def fmt_duration(value: timedelta) -> str:
        """Format a duration as m:ss or h:mm:ss."""
        total = max(int(value.total_seconds()), 0)
        hours, rem = divmod(total, 3600)
        minutes, secs = divmod(rem, 60)
        if hours:
            return f"{hours}:{minutes:02d}:{secs:02d}"
        return f"{minutes}:{secs:02d}"

    # ------------------------------------------------------------------
    # Command listeners
    # ------------------------------------------------------------------
    def _on_load_changed(self) -> None:
        self._adopt(self.load)

    def _on_save_changed(self) -> None:
        self._adopt(self.save)

    def _adopt(self, command: Command[Any, Pomodoro]) -> None:
        outcome = command.result
        if isinstance(outcome, Success):
            self.pomodoro = outcome.unwrap()
            if self._last_failed is command:
                self._last_failed = None
        elif isinstance(outcome, Failure):
            self._last_failed = command
        self.notify_listeners()

    def dispose(self) -> None:
        self.load.remove_listener(self._on_load_changed)
        self.save.remove_listener(self._on_save_changed)
        self.load.dispose()
        self.save.dispose()
        super().dispose()
