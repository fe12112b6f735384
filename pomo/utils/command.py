"""Observable wrapper around a single asynchronous action.

A ``Command`` adapts ``async def action(arg) -> value`` into something a view
can bind to: it exposes ``running`` and the outcome of the last attempt as a
``returns`` ``Result`` and notifies listeners when either changes.

Call context:
    View models create one command per user intent (load, save, ...) and
    forward its notifications to their own listeners.

Concurrency:
    The in-flight guard is a plain ``bool``. It is correct under a single
    asyncio event loop. Invoking the same command from several threads or
    loops needs an external lock around ``invoke``.
"""
from __future__ import annotations

import logging
from typing import Awaitable, Callable, Generic, Optional, TypeVar

from returns.pipeline import is_successful
from returns.result import Failure, Result, Success

from .notifier import ChangeNotifier

Arg = TypeVar("Arg")
R = TypeVar("R")

Action = Callable[[Arg], Awaitable[R]]


class Command(ChangeNotifier, Generic[Arg, R]):
    """Single-flight async action with observable running/result state."""

    def __init__(self, action: Action[Arg, R], *, name: Optional[str] = None) -> None:
        super().__init__()
        self._action = action
        self._name = name or getattr(action, "__name__", type(action).__name__)
        self._running = False
        self._result: Optional[Result[R, Exception]] = None
        self._log = logging.getLogger(__name__)

    @property
    def name(self) -> str:
        return self._name

    @property
    def running(self) -> bool:
        return self._running

    @property
    def result(self) -> Optional[Result[R, Exception]]:
        """``None`` until an attempt completes, then ``Success`` or ``Failure``."""
        return self._result

    @property
    def has_error(self) -> bool:
        return self._result is not None and not is_successful(self._result)

    @property
    def completed(self) -> bool:
        return self._result is not None and is_successful(self._result)

    async def invoke(self, arg: Arg) -> None:
        """Run the action unless a previous call is still in flight.

        A call made while running is dropped without notifying anyone. Errors
        raised by the action are stored in ``result`` and never re-raised.
        """
        if self._running:
            self._log.debug("Command %s already running; call dropped", self._name)
            return

        self._running = True
        self._result = None
        self.notify_listeners()
        try:
            value = await self._action(arg)
            self._result = Success(value)
        except Exception as exc:
            self._log.warning("Command %s failed: %s", self._name, exc)
            self._result = Failure(exc)
        finally:
            self._running = False
            self.notify_listeners()

    async def __call__(self, arg: Arg) -> None:
        await self.invoke(arg)

    def clear_result(self) -> None:
        """Forget the last outcome (e.g. after the UI dismissed an error)."""
        if self._running or self._result is None:
            return
        self._result = None
        self.notify_listeners()

    def __repr__(self) -> str:
        return (
            f"Command(name={self._name!r}, running={self._running}, "
            f"result={self._result!r})"
        )


__all__ = ["Action", "Command"]
