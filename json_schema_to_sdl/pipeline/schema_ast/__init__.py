"""
Schema AST - parsed definition table.
"""

from __future__ import annotations

from .nodes import Definition, DefinitionTable
from .parser import SchemaParser

__all__ = [
    "Definition",
    "DefinitionTable",
    "SchemaParser",
]
