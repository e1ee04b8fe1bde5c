"""
Node definitions for the schema definition table.

A ``Definition`` mirrors one entry of a Swagger 2 ``definitions`` section
(or any nested schema inside it) with only the keywords the converter uses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Definition:
    """A node in the input schema graph."""

    ref: str | None = None  # "$ref" pointer, e.g. "#/definitions/Pet"
    all_of: list[Definition] = field(default_factory=list)
    description: str | None = None
    enum: list[Any] | None = None
    items: Definition | None = None  # Array element
    one_of: list[Definition] = field(default_factory=list)
    properties: dict[str, Definition] | None = None
    required: list[str] = field(default_factory=list)
    type: str | None = None  # "object", "array", "string", "number", "boolean", "integer"
    format: str | None = None  # e.g. "float"

    @property
    def is_list_wrapper(self) -> bool:
        """A shallow named array whose items are a reference."""
        return self.items is not None and bool(self.items.ref)

    @staticmethod
    def from_dict(d: dict[str, Any]) -> Definition:
        """Build a definition from a raw JSON schema mapping."""
        properties = d.get("properties")
        items = d.get("items")
        return Definition(
            ref=d.get("$ref"),
            all_of=[Definition.from_dict(x) for x in d.get("allOf") or []],
            description=d.get("description"),
            enum=list(d["enum"]) if isinstance(d.get("enum"), list) else None,
            # Tuple-style items are not supported
            items=Definition.from_dict(items) if isinstance(items, dict) else None,
            one_of=[Definition.from_dict(x) for x in d.get("oneOf") or []],
            properties=({name: Definition.from_dict(p) for name, p in properties.items()} if isinstance(properties, dict) else None),
            required=list(d.get("required") or []),
            type=d.get("type") if isinstance(d.get("type"), str) else None,
            format=d.get("format"),
        )


# Mapping from definition name to Definition; read-only during conversion
DefinitionTable = dict[str, Definition]
