"""
Pipeline generator - converts a definition table to SDL.

Phases:

1. Parser: raw JSON document -> DefinitionTable (optional, see from_document)
2. Scheduler: walk the object stack, mapping each field through the TypeMapper
   and draining the enum and union stacks after every object
3. Formatter: parse and print the assembled SDL with graphql-core
"""

from __future__ import annotations

import logging
from typing import Any

from ..utils import camel_case
from .analyzer.reference_resolver import ReferenceResolver
from .analyzer.type_mapper import TypeMapper
from .analyzer.work_items import ConversionContext, EnumWork, ObjectWork
from .backends.sdl_builders import EnumBuilder, SdlField, SdlRenderer, TypeBuilder, UnionBuilder
from .config import CodeGeneratorConfig, EmptyObjectPolicy
from .errors import EmptyObjectError
from .formatters import Formatter, GraphQLFormatter
from .schema_ast.nodes import Definition, DefinitionTable
from .schema_ast.parser import SchemaParser

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Converts a DefinitionTable into SDL declarations.

    The generator itself holds no traversal state: every call to
    ``generate_lines`` builds a fresh ConversionContext.
    """

    def __init__(
        self,
        definitions: DefinitionTable,
        config: CodeGeneratorConfig | None = None,
        formatter: Formatter | None = None,
    ):
        """
        Initialize the generator.

        Args:
            definitions: Mapping of definition name to Definition, never modified
            config: Code generation configuration
            formatter: SDL formatter (graphql-core by default)
        """
        self.definitions = definitions
        self.config = config or CodeGeneratorConfig()
        self.formatter = formatter or GraphQLFormatter()
        self.renderer = SdlRenderer()
        self.resolver = ReferenceResolver(definitions, self.config.ref_prefix, self.config.unknown_reference)

    @classmethod
    def from_document(
        cls,
        document: dict[str, Any],
        config: CodeGeneratorConfig | None = None,
    ) -> PipelineGenerator:
        """Create a generator from a raw Swagger/OpenAPI document or bare definition table."""
        return cls(SchemaParser().parse(document), config)

    def generate(self) -> str:
        """
        Generate the SDL document.

        Returns:
            Formatted SDL, or the raw declarations when formatting is disabled

        Raises:
            ConversionError: On any conversion failure; no partial output is returned
        """
        lines = self.generate_lines()
        if not lines:
            return ""
        code = "\n".join(lines)
        if self.config.formatter.enabled:
            code = self.formatter.format(code, self.config.formatter)
        return code

    def generate_lines(self) -> list[str]:
        """Run the traversal and return the raw output buffer."""
        context = ConversionContext()
        type_mapper = TypeMapper(self.resolver, context, self.config)
        type_builder = TypeBuilder(self.renderer)
        enum_builder = EnumBuilder(self.renderer)
        union_builder = UnionBuilder(self.renderer, type_mapper)

        context.objects = [ObjectWork(name, definition) for name, definition in self.definitions.items()]
        context.objects.sort(key=lambda work: work.id)

        while context.objects:
            work = context.objects.pop()
            context.current = work
            fields = self._build_fields(work, type_mapper, context)
            if fields is None:
                continue
            context.output.extend(type_builder.build_type(work.id, fields))

            while context.enums:
                context.output.extend(enum_builder.build_enum(context.enums.pop()))
            while context.unions:
                context.output.extend(union_builder.build_union(context.unions.pop()))

        logger.debug("Generated %d SDL lines from %d definitions", len(context.output), len(self.definitions))
        return context.output

    def merge_properties(self, definition: Definition) -> dict[str, Definition]:
        """
        Merge the fields of an object: allOf entries in order, then its own properties.

        Later entries overwrite the value of an earlier key but keep its position.
        """
        merged: dict[str, Definition] = {}
        for item in definition.all_of:
            if item.ref:
                _, target = self.resolver.resolve(item.ref)
                if target is not None and target.properties:
                    merged.update(target.properties)
            elif item.properties:
                merged.update(item.properties)
        if definition.properties:
            merged.update(definition.properties)
        return merged

    def _build_fields(
        self,
        work: ObjectWork,
        type_mapper: TypeMapper,
        context: ConversionContext,
    ) -> list[SdlField] | None:
        properties = self.merge_properties(work.definition)
        if not properties:
            if self.config.empty_object == EmptyObjectPolicy.ERROR:
                raise EmptyObjectError(work.id)
            logger.debug("Skipping %s: no fields", work.id)
            return None

        fields = []
        for key, value in properties.items():
            context_id = camel_case(f"{work.id}_{key}")
            if value.enum is not None:
                # Enums are declared after the type, under the synthesized name
                context.enums.append(EnumWork(context_id, value.enum))
                type_name = context_id
            else:
                type_name = type_mapper.resolve_type(value, context_id)
            fields.append(
                SdlField(
                    name=camel_case(key),
                    type=type_name,
                    required=key in work.definition.required,
                    description=value.description if isinstance(value.description, str) else None,
                )
            )
        return fields


def convert(document: dict[str, Any], config: CodeGeneratorConfig | None = None) -> str:
    """
    Convert a Swagger/OpenAPI document (or a bare definition table) to SDL.

    Args:
        document: The parsed JSON document
        config: Code generation configuration

    Returns:
        Formatted SDL text
    """
    return PipelineGenerator.from_document(document, config).generate()
