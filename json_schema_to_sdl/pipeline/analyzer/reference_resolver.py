"""
Reference resolver for $ref resolution.

Resolves $ref pointers to their definitions in the table.
"""

from __future__ import annotations

from ..config import ReferencePolicy
from ..errors import UnknownReferenceError
from ..schema_ast.nodes import Definition, DefinitionTable


class ReferenceResolver:
    """Resolves $ref pointers against a DefinitionTable."""

    def __init__(
        self,
        definitions: DefinitionTable,
        prefix: str = "#/definitions/",
        policy: ReferencePolicy = ReferencePolicy.ERROR,
    ):
        """
        Initialize the resolver.

        Args:
            definitions: The definition table, never modified
            prefix: Prefix stripped from pointers before the lookup
            policy: What to do when a pointer has no matching definition
        """
        self.definitions = definitions
        self.prefix = prefix
        self.policy = policy

    def resolve(self, pointer: str) -> tuple[str, Definition | None]:
        """
        Resolve a pointer to its definition.

        Args:
            pointer: The $ref value, e.g. "#/definitions/Pet"

        Returns:
            The definition name and the definition. The definition is None only
            for a missing entry under the placeholder policy.

        Raises:
            UnknownReferenceError: If the entry is missing and the policy is ERROR
        """
        name = pointer.removeprefix(self.prefix)
        definition = self.definitions.get(name)
        if definition is None and self.policy == ReferencePolicy.ERROR:
            raise UnknownReferenceError(pointer)
        return name, definition
