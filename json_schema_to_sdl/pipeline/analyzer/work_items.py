"""
Work items and the per-conversion context.

Work items are deferred emissions discovered while walking definitions.
Each one is consumed exactly once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..schema_ast.nodes import Definition


@dataclass
class ObjectWork:
    """An object type waiting to be expanded."""

    id: str
    definition: Definition
    # Ids of the objects whose expansion led here, outermost first
    path: tuple[str, ...] = ()
    # Definitions matching ``path``; compared by identity
    ancestors: tuple[Definition, ...] = ()

    def child(self, id: str, definition: Definition) -> ObjectWork:
        """Create the work item for a nested object found while expanding this one."""
        return ObjectWork(
            id=id,
            definition=definition,
            path=self.path + (self.id,),
            ancestors=self.ancestors + (self.definition,),
        )

    def is_cyclic(self) -> bool:
        """True if this item re-enters an object already on its expansion path."""
        return self.id in self.path or any(a is self.definition for a in self.ancestors)


@dataclass
class EnumWork:
    """An enum declaration waiting to be emitted."""

    id: str
    values: list[Any] = field(default_factory=list)


@dataclass
class UnionWork:
    """A union declaration waiting to be emitted."""

    id: str
    members: list[Definition] = field(default_factory=list)


@dataclass
class ConversionContext:
    """Mutable state of one conversion call.

    Attributes:
        objects: Object stack, shared across the whole traversal
        enums: Enum stack, drained after each object
        unions: Union stack, drained after each object (after enums)
        output: Emitted SDL lines, in order
        current: The object being expanded, parent of any nested object found
    """

    objects: list[ObjectWork] = field(default_factory=list)
    enums: list[EnumWork] = field(default_factory=list)
    unions: list[UnionWork] = field(default_factory=list)
    output: list[str] = field(default_factory=list)
    current: ObjectWork | None = None
