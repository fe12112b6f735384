from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ..domain.models import Pomodoro


@dataclass(frozen=True)
class AppConfig:
    """Typed runtime settings, read from the environment at startup."""

    data_dir: str = "."
    default_focus_min: float = 25
    default_break_min: Optional[float] = 5
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Build a config from ``POMO_*`` variables; unset keys keep defaults."""
        source = os.environ if env is None else env
        defaults = cls()
        config = cls(
            data_dir=source.get("POMO_DATA_DIR") or defaults.data_dir,
            default_focus_min=_coerce_minutes(
                "POMO_FOCUS_MIN", source.get("POMO_FOCUS_MIN"), defaults.default_focus_min
            ),
            default_break_min=_coerce_break(source.get("POMO_BREAK_MIN"), defaults.default_break_min),
            log_level=(source.get("POMO_LOG_LEVEL") or defaults.log_level).strip().upper(),
        )
        config.default_pomodoro()  # out-of-range minutes raise ValueError here
        return config

    def default_pomodoro(self) -> Pomodoro:
        return Pomodoro.from_minutes(self.default_focus_min, self.default_break_min)


def _coerce_minutes(
    name: str, value: Optional[str], fallback: Optional[float], *, allow_zero: bool = False
) -> Optional[float]:
    if value is None or not value.strip():
        return fallback
    try:
        minutes = float(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number of minutes, got {value!r}.") from exc
    if not math.isfinite(minutes) or minutes < 0 or (minutes == 0 and not allow_zero):
        raise ValueError(f"{name} is out of range: {value!r}.")
    return minutes


def _coerce_break(value: Optional[str], fallback: Optional[float]) -> Optional[float]:
    # "none"/"off" disables the break entirely.
    if value is not None and value.strip().lower() in {"none", "off"}:
        return None
    return _coerce_minutes("POMO_BREAK_MIN", value, fallback, allow_zero=True)
