"""Cross-layer helpers: the observable ``Command``, listeners, errors, logging."""

from .command import Command
from .errors import CommonError, UnprovidedDependencyError
from .notifier import ChangeNotifier

__all__ = ["ChangeNotifier", "Command", "CommonError", "UnprovidedDependencyError"]
