"""Layered (Clean + MVVM) pomodoro app built around the observable ``Command``."""

__version__ = "0.1.0"
