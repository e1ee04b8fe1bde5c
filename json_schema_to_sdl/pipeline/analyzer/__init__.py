"""
Analyzer - reference resolution, type mapping and work items.
"""

from __future__ import annotations

from .reference_resolver import ReferenceResolver
from .type_mapper import PRIMITIVE_TYPES, TypeMapper, TypeRule, primitive_scalar
from .work_items import ConversionContext, EnumWork, ObjectWork, UnionWork

__all__ = [
    "ConversionContext",
    "EnumWork",
    "ObjectWork",
    "PRIMITIVE_TYPES",
    "ReferenceResolver",
    "TypeMapper",
    "TypeRule",
    "UnionWork",
    "primitive_scalar",
]
