"""Abstract base class for display implementations."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Where command stages are shown: messages on stderr, structured output on stdout."""

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Display a status (announce) message."""

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        """Display a success message."""

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Display an error message.

        Args:
            message: Error text
            kwargs: ``details`` adds a second, dimmed line
        """

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        """Display a warning message."""

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Display an informational message."""

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Write structured output.

        Args:
            data: JSON-serializable data
            kwargs: ``format`` is ``"yaml"`` (default) or ``"json"``; ``indent`` for JSON
        """
