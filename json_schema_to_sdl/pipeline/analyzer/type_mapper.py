"""
Type mapper: decides the SDL type name used at a field position.

The decision is a strict first-match cascade over the shape of the schema.
Nested objects and unions are not expanded here; they are queued on the
conversion context and named after the synthesized context identifier.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import NamedTuple

from ...utils import camel_case
from ..config import CodeGeneratorConfig
from ..errors import UnboundedExpansionError
from ..schema_ast.nodes import Definition
from .reference_resolver import ReferenceResolver
from .work_items import ConversionContext, ObjectWork, UnionWork

logger = logging.getLogger(__name__)

# Primitives only
PRIMITIVE_TYPES = {
    "boolean": "Boolean",
    "integer": "Int",
    "string": "String",
}


def primitive_scalar(definition: Definition) -> str | None:
    """Return the built-in scalar for a primitive definition, or None."""
    if definition.type == "number":
        return "Float" if definition.format == "float" else "Int"
    if definition.type is None:
        return None
    return PRIMITIVE_TYPES.get(definition.type)


class TypeRule(NamedTuple):
    """One step of the cascade: fires when ``matches`` is true."""

    name: str
    matches: Callable[[Definition], bool]
    handler: Callable[[Definition, str], str]


class TypeMapper:
    """Maps definitions to SDL type names for one conversion."""

    def __init__(
        self,
        resolver: ReferenceResolver,
        context: ConversionContext,
        config: CodeGeneratorConfig,
    ):
        """
        Initialize the mapper.

        Args:
            resolver: Resolver for $ref pointers
            context: Conversion state receiving nested work items
            config: Code generation configuration
        """
        self.resolver = resolver
        self.context = context
        self.config = config
        # Names of list wrappers being unwrapped, innermost last
        self._unwrapping: list[str] = []

        # Order is significant: only the first matching rule fires
        self.rules: tuple[TypeRule, ...] = (
            TypeRule("reference", lambda d: bool(d.ref), self._map_reference),
            TypeRule("number", lambda d: d.type == "number", self._map_number),
            TypeRule("list", self._has_mappable_items, self._map_list),
            TypeRule("union", lambda d: len(d.one_of) > 0, self._map_union),
            TypeRule("object", lambda d: d.properties is not None, self._map_object),
            TypeRule("type", lambda d: bool(d.type), self._map_type),
        )

    def rule_for(self, definition: Definition) -> str:
        """Name of the rule that fires for a definition ("default" if none)."""
        for rule in self.rules:
            if rule.matches(definition):
                return rule.name
        return "default"

    def resolve_type(self, definition: Definition, context_name: str) -> str:
        """
        Resolve the SDL type name for a definition.

        Args:
            definition: Schema at the field (or union member) position
            context_name: Synthesized name for anonymous nested shapes

        Returns:
            SDL type name, possibly wrapped in list brackets
        """
        for rule in self.rules:
            if rule.matches(definition):
                return rule.handler(definition, context_name)
        return self.config.default_scalar

    def _map_reference(self, definition: Definition, context_name: str) -> str:
        name, target = self.resolver.resolve(definition.ref)
        if name == self.config.id_sentinel:
            return "ID"
        if target is None:
            return camel_case(name) or self.config.default_scalar

        # A shallow array definition is unwrapped into a list type
        if target.is_list_wrapper:
            if name in self._unwrapping:
                raise UnboundedExpansionError(self._unwrapping + [name])
            self._unwrapping.append(name)
            try:
                return self.resolve_type(target, name)
            finally:
                self._unwrapping.pop()

        scalar = primitive_scalar(target)
        if scalar:
            return scalar
        return camel_case(name) or self.config.default_scalar

    def _map_number(self, definition: Definition, context_name: str) -> str:
        # Every non-float number is an Int
        return primitive_scalar(definition)

    def _has_mappable_items(self, definition: Definition) -> bool:
        items = definition.items
        if items is None:
            return False
        return bool(items.ref) or primitive_scalar(items) is not None

    def _map_list(self, definition: Definition, context_name: str) -> str:
        items = definition.items
        if items.ref:
            name, _ = self.resolver.resolve(items.ref)
            return f"[{self.resolve_type(items, name)}]"
        return f"[{primitive_scalar(items)}]"

    def _map_union(self, definition: Definition, context_name: str) -> str:
        logger.debug("Queueing union %s", context_name)
        self.context.unions.append(UnionWork(context_name, list(definition.one_of)))
        return context_name

    def _map_object(self, definition: Definition, context_name: str) -> str:
        parent = self.context.current
        if parent is None:
            work = ObjectWork(context_name, definition)
        else:
            work = parent.child(context_name, definition)
        if work.is_cyclic():
            raise UnboundedExpansionError(work.path + (work.id,))
        logger.debug("Queueing nested object %s", context_name)
        self.context.objects.append(work)
        return context_name

    def _map_type(self, definition: Definition, context_name: str) -> str:
        return primitive_scalar(definition) or definition.type or self.config.default_scalar
