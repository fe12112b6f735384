from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from datetime import timedelta
from typing import Any, Dict, Optional

from returns.maybe import Maybe, Nothing, Some

from pomo.domain.models import Pomodoro
from pomo.domain.ports import PomodoroRepository


class PomodoroStorageLocal(PomodoroRepository):
    """Local filesystem storage for the pomodoro configuration (JSON)."""

    FILE_NAME = "pomodoro.json"

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir
        self._log = logging.getLogger(__name__)

    @property
    def path(self) -> str:
        return os.path.join(self.root, self.FILE_NAME)

    async def load(self) -> Maybe[Pomodoro]:
        return await asyncio.to_thread(self._load_sync)

    async def save(self, pomodoro: Pomodoro) -> None:
        await asyncio.to_thread(self._save_sync, pomodoro)

    # ---- Blocking helpers (run in a worker thread) ----
    def _load_sync(self) -> Maybe[Pomodoro]:
        if not os.path.exists(self.path):
            return Nothing
        with open(self.path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        return Some(self._hydrate(payload))

    def _save_sync(self, pomodoro: Pomodoro) -> None:
        os.makedirs(self.root, exist_ok=True)
        payload = self._dump(pomodoro)
        fd, tmp_path = tempfile.mkstemp(prefix="pomodoro_", suffix=".tmp", dir=self.root)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2, sort_keys=True)
            os.replace(tmp_path, self.path)
        except Exception:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        self._log.debug("Saved pomodoro to %s", self.path)

    @staticmethod
    def _dump(pomodoro: Pomodoro) -> Dict[str, Any]:
        pause: Optional[timedelta] = pomodoro.break_time.value_or(None)
        return {
            "focus_s": pomodoro.focus_time.total_seconds(),
            "break_s": pause.total_seconds() if pause is not None else None,
        }

    @staticmethod
    def _hydrate(payload: Any) -> Pomodoro:
        """Rebuild a Pomodoro from its persisted form; malformed data -> ValueError."""
        if not isinstance(payload, dict) or "focus_s" not in payload:
            raise ValueError("Malformed pomodoro file: expected an object with 'focus_s'.")
        try:
            focus = timedelta(seconds=float(payload["focus_s"]))
            raw_break = payload.get("break_s")
            pause = Nothing if raw_break is None else Some(timedelta(seconds=float(raw_break)))
        except (TypeError, ValueError, OverflowError) as exc:
            raise ValueError(f"Malformed pomodoro file: {exc}") from exc
        return Pomodoro(focus_time=focus, break_time=pause)
