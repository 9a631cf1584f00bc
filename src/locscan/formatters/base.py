"""Base formatter interface for locscan output rendering."""

from abc import ABC, abstractmethod

from ..scanning.models import ScanResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, result: ScanResult) -> None:
        """Write the report to stdout."""

    @abstractmethod
    def format(self, result: ScanResult) -> str:
        """Return formatted string representation of the report."""
