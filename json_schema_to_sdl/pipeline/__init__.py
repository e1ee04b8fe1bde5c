"""
Pipeline - JSON Schema definitions to GraphQL SDL.

1. Phase 1 (Parser): Parse the document into a DefinitionTable
2. Phase 2 (Scheduler): Walk definitions, resolve references and queue
   nested objects, enums and unions
3. Phase 3 (Builders): Render each declaration through jinja2 templates
4. Phase 4 (Formatter): Parse and print the SDL with graphql-core
"""

from __future__ import annotations

from .config import (
    CodeGeneratorConfig,
    EmptyObjectPolicy,
    FormatterConfig,
    OutputConfig,
    OutputMode,
    ReferencePolicy,
)
from .errors import (
    ConversionError,
    EmptyObjectError,
    MalformedGeneratedOutputError,
    UnboundedExpansionError,
    UnknownReferenceError,
)
from .generator import PipelineGenerator, convert
from .schema_ast import Definition, DefinitionTable, SchemaParser
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "convert",
    "CodeGeneratorConfig",
    "EmptyObjectPolicy",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "ReferencePolicy",
    "ConversionError",
    "EmptyObjectError",
    "MalformedGeneratedOutputError",
    "UnboundedExpansionError",
    "UnknownReferenceError",
    "Definition",
    "DefinitionTable",
    "SchemaParser",
    "AtomicWriter",
]
