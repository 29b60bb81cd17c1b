"""Logger port for group diagnostics."""

from abc import ABC, abstractmethod
from typing import Any


class LoggerPort(ABC):
    """Sink for the diagnostics a group emits.

    Groups never fail because of what they log; messages only explain
    choices made on the caller's behalf, such as which of several
    same-named deployments a lookup picked. Keyword arguments carry
    structured context.
    """

    @abstractmethod
    def debug(self, message: str, **context: Any) -> None:
        """Report a routine decision."""
        ...

    @abstractmethod
    def warning(self, message: str, **context: Any) -> None:
        """Report input that is allowed but probably a mistake."""
        ...
