"""
graphql-core formatter for SDL text.
"""

from __future__ import annotations

import logging

from graphql import GraphQLSyntaxError, parse, print_ast

from ..config import FormatterConfig
from ..errors import MalformedGeneratedOutputError
from .base import Formatter

logger = logging.getLogger(__name__)


class GraphQLFormatter(Formatter):
    """Formatter parsing SDL with graphql-core and printing it back."""

    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format SDL using graphql-core.

        Args:
            code: Raw SDL text
            config: Formatter configuration

        Returns:
            Formatted SDL ending with a newline
        """
        try:
            document = parse(code, no_location=config.no_location)
        except GraphQLSyntaxError as e:
            raise MalformedGeneratedOutputError(f"Generated SDL is not valid: {e.message}") from e

        logger.debug("Formatting %d definitions", len(document.definitions))
        return print_ast(document) + "\n"


def format_sdl(code: str) -> str:
    """
    Convenience function to format SDL text with graphql-core.

    Args:
        code: Raw SDL text

    Returns:
        Formatted SDL
    """
    return GraphQLFormatter().format(code, FormatterConfig())
