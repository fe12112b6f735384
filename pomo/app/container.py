"""Static dependency registration for the composition root.

Keys are usually the class that will be resolved; factories receive the
container so they can resolve their own collaborators.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Hashable, Tuple, TypeVar, cast

from ..utils.errors import UnprovidedDependencyError

T = TypeVar("T")
Factory = Callable[["Container"], Any]

_INSTANCE = "instance"
_FACTORY = "factory"
_SINGLETON = "singleton"


class Container:
    """Tiny service locator: instances, factories and lazy singletons."""

    def __init__(self) -> None:
        self._log = logging.getLogger(__name__)
        self._registry: Dict[Hashable, Tuple[str, Any]] = {}
        self._singletons: Dict[Hashable, Any] = {}

    def register_instance(self, key: Hashable, instance: Any) -> None:
        self._set(key, _INSTANCE, instance)

    def register_factory(self, key: Hashable, factory: Factory) -> None:
        """Build a new object on every ``resolve``."""
        self._set(key, _FACTORY, factory)

    def register_singleton(self, key: Hashable, factory: Factory) -> None:
        """Build the object on first ``resolve`` and reuse it afterwards."""
        self._set(key, _SINGLETON, factory)

    def is_registered(self, key: Hashable) -> bool:
        return key in self._registry

    def resolve(self, key: Callable[..., T] | Hashable) -> T:
        try:
            kind, target = self._registry[key]
        except KeyError:
            raise UnprovidedDependencyError(_describe(key)) from None
        if kind == _INSTANCE:
            return cast(T, target)
        if kind == _FACTORY:
            return cast(T, target(self))
        if key not in self._singletons:
            self._singletons[key] = target(self)
        return cast(T, self._singletons[key])

    def reset(self) -> None:
        self._registry.clear()
        self._singletons.clear()

    def _set(self, key: Hashable, kind: str, target: Any) -> None:
        if key in self._registry:
            self._log.debug("Replacing registration for %s", _describe(key))
        self._singletons.pop(key, None)
        self._registry[key] = (kind, target)


def _describe(key: Hashable) -> str:
    return getattr(key, "__name__", None) or str(key)


__all__ = ["Container", "Factory"]
