"""Abstract base class for display implementations."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """What a comparison run writes to stdout, in human or JSON form."""

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        """Report the identical verdict."""

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Report a difference verdict or a failure.

        Args:
            message: One-line summary
            kwargs: ``details`` with the underlying cause, where there is one
        """

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Write one block of the report."""

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Write the whole comparison as one structured document."""
