"""
Post-processing formatters for generated SDL.
"""

from __future__ import annotations

from .base import Formatter
from .graphql_formatter import GraphQLFormatter, format_sdl

__all__ = [
    "Formatter",
    "GraphQLFormatter",
    "format_sdl",
]
