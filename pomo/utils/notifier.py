from __future__ import annotations

import logging
from typing import Callable, List

from .errors import CommonError

Listener = Callable[[], None]


class ChangeNotifier:
    """Keeps a list of zero-argument listeners and calls them on change.

    Not thread-safe: listeners are registered and notified from the owning
    event loop only.
    """

    def __init__(self) -> None:
        self._listeners: List[Listener] = []
        self._disposed = False
        self._notifier_log = logging.getLogger(__name__)

    @property
    def has_listeners(self) -> bool:
        return bool(self._listeners)

    def add_listener(self, listener: Listener) -> Listener:
        """Register ``listener`` and return it so callers can keep the handle."""
        if self._disposed:
            raise CommonError(type(self).__name__, "used after being disposed")
        self._listeners.append(listener)
        return listener

    def remove_listener(self, listener: Listener) -> None:
        """Drop one registration of ``listener``; unknown listeners are ignored."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def notify_listeners(self) -> None:
        if self._disposed:
            return
        # Iterate a copy: listeners may (un)subscribe while being notified.
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                self._notifier_log.exception(
                    "Listener %r of %s raised", listener, type(self).__name__
                )

    def dispose(self) -> None:
        self._listeners.clear()
        self._disposed = True


__all__ = ["ChangeNotifier", "Listener"]
