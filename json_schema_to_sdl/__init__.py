"""JSON Schema to GraphQL SDL

Converts the definitions of an API description document (Swagger 2 or
OpenAPI 3) into GraphQL Schema Definition Language: object types, enums
and unions.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    ConversionError,
    Definition,
    EmptyObjectError,
    MalformedGeneratedOutputError,
    PipelineGenerator,
    UnboundedExpansionError,
    UnknownReferenceError,
    convert,
)

__all__ = [
    "PipelineGenerator",
    "convert",
    "CodeGeneratorConfig",
    "Definition",
    "ConversionError",
    "EmptyObjectError",
    "MalformedGeneratedOutputError",
    "UnboundedExpansionError",
    "UnknownReferenceError",
    "AtomicWriter",
]
