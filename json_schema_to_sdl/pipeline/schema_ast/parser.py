"""
Document parser that builds the definition table.

Phase 1 of the pipeline: turn a raw JSON document into Definition nodes
without resolving references.
"""

from __future__ import annotations

from typing import Any

from .nodes import Definition, DefinitionTable


class SchemaParser:
    """Parses an API description document into a DefinitionTable."""

    def parse(self, document: dict[str, Any]) -> DefinitionTable:
        """
        Parse a document into a definition table.

        Accepts a Swagger 2 document (``definitions``), an OpenAPI 3 document
        (``components.schemas``) or a bare mapping of name to schema.

        Args:
            document: The JSON document

        Returns:
            Mapping of definition name to Definition, in document order
        """
        table: DefinitionTable = {}
        for name, def_schema in self._definitions_section(document).items():
            # Skip comment fields (strings) and _comment prefixed keys
            if not isinstance(def_schema, dict) or name.startswith("_comment"):
                continue
            table[name] = Definition.from_dict(def_schema)
        return table

    def _definitions_section(self, document: dict[str, Any]) -> dict[str, Any]:
        if isinstance(document.get("definitions"), dict):
            return document["definitions"]
        components = document.get("components")
        if isinstance(components, dict) and isinstance(components.get("schemas"), dict):
            return components["schemas"]
        # An API document without a schema section has no definitions
        if "swagger" in document or "openapi" in document:
            return {}
        return document
