"""
Base class for SDL formatters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..config import FormatterConfig


class Formatter(ABC):
    """Abstract base class for SDL formatters."""

    @abstractmethod
    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format the given SDL text.

        Args:
            code: The raw SDL text
            config: Formatter configuration

        Returns:
            Canonically formatted SDL

        Raises:
            MalformedGeneratedOutputError: If the text is not valid SDL
        """
