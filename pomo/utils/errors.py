"""Error types shared by every layer.

These carry an owner/context label so log lines and UI banners can say
where the problem originated without a traceback.
"""
from __future__ import annotations

from typing import Optional


class CommonError(Exception):
    """Generic error tagged with the component that raised it."""

    def __init__(self, owner: str, message: Optional[str] = None) -> None:
        super().__init__(owner, message)
        self.owner = owner
        self.message = message

    def __str__(self) -> str:
        return f"{self.owner}: {self.message}"


class UnprovidedDependencyError(CommonError, LookupError):
    """Raised when the container is asked for something nobody registered."""

    def __init__(self, dependency_name: str) -> None:
        super().__init__("Container", f"{dependency_name} is not provided.")
        self.dependency_name = dependency_name

    def __str__(self) -> str:
        return f"{self.dependency_name} is not provided."


__all__ = ["CommonError", "UnprovidedDependencyError"]
