"""Type resolver: maps Go type expressions to ResolvedType.

Identifier-shaped expressions are looked up in order:

    1. package definitions in the snapshot
    2. package aliases in the snapshot
    3. type declarations of the analyzed file, resolved recursively
    4. predeclared types
    5. otherwise Unknown

Slices, arrays and variadic parameters become Sequence, pointers become
Reference and inline structs become Aggregate. Resolution never raises:
anything it cannot interpret degrades to Unknown and is counted in
ResolutionDiagnostics. Pre-resolved names from steps 1 and 2 add the
counts recorded for them when the snapshot was built.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from tree_sitter import Node

from ..scanning.treesitter_parser import node_text
from .models import Aggregate, Field, Reference, ResolvedType, Sequence, Unknown
from .snapshot import NO_POLICY_BUILTINS, SymbolSnapshot

logger = logging.getLogger(__name__)

_IDENTIFIER_KINDS = ("type_identifier", "qualified_type")

# node type -> field holding the element type
_SEQUENCE_KINDS = {
    "slice_type": "element",
    "array_type": "element",
    "implicit_length_array_type": "element",
    "variadic_parameter_declaration": "type",
}


@dataclass
class ResolutionDiagnostics:
    """Counts of lossy resolution events.

    Attributes:
        unresolved: Expressions that degraded to Unknown
        skipped_fields: Struct fields dropped because their type was Unknown
        cyclic_references: Re-entries into a declaration already being expanded
    """

    unresolved: int = 0
    skipped_fields: int = 0
    cyclic_references: int = 0


class TypeResolver:
    """Resolves type expressions against one SymbolSnapshot.

    The resolver carries mutable diagnostics and the set of declarations
    currently being expanded; the snapshot itself is never modified.
    """

    def __init__(self, snapshot: SymbolSnapshot) -> None:
        self.snapshot = snapshot
        self.diagnostics = ResolutionDiagnostics()
        self._expanding: set[str] = set()

    def resolve(self, expr: Optional[Node]) -> ResolvedType:
        """Resolve a type expression node."""
        if expr is None:
            return self._unresolved("<missing>")

        kind = expr.type

        if kind in _IDENTIFIER_KINDS:
            return self._resolve_identifier(node_text(expr))

        if kind == "parenthesized_type":
            inner = expr.named_children
            return self.resolve(inner[0] if inner else None)

        if kind in _SEQUENCE_KINDS:
            elem = self.resolve(expr.child_by_field_name(_SEQUENCE_KINDS[kind]))
            return Unknown() if isinstance(elem, Unknown) else Sequence(elem)

        if kind == "pointer_type":
            inner = expr.named_children
            base = self.resolve(inner[-1] if inner else None)
            return Unknown() if isinstance(base, Unknown) else Reference(base)

        if kind == "struct_type":
            return self._resolve_struct(expr)

        return self._unresolved(node_text(expr) or kind)

    def _resolve_identifier(self, name: str) -> ResolvedType:
        found = self.snapshot.lookup_definition(name)
        if found is None:
            found = self.snapshot.lookup_use(name)
        if found is not None:
            unresolved, skipped = self.snapshot.lookup_losses(name)
            self.diagnostics.unresolved += unresolved
            self.diagnostics.skipped_fields += skipped
            return found

        declaration = self.snapshot.lookup_declaration(name)
        if declaration is not None:
            if name in self._expanding:
                self.diagnostics.cyclic_references += 1
                logger.debug(f"Cyclic type reference to {name}, treating as unknown")
                return Unknown()
            self._expanding.add(name)
            try:
                return self.resolve(declaration)
            finally:
                self._expanding.discard(name)

        builtin = self.snapshot.lookup_universe(name)
        if builtin is not None:
            if name in NO_POLICY_BUILTINS:
                logger.debug(f"No state-space policy for builtin {name}")
            return builtin

        return self._unresolved(name)

    def _resolve_struct(self, expr: Node) -> Aggregate:
        fields: list[Field] = []
        for field_list in expr.named_children:
            if field_list.type != "field_declaration_list":
                continue
            for declaration in field_list.named_children:
                if declaration.type != "field_declaration":
                    continue
                names = declaration.children_by_field_name("name")
                if not names:
                    # Embedded field
                    continue
                field_type = self.resolve(declaration.child_by_field_name("type"))
                for name_node in names:
                    if isinstance(field_type, Unknown):
                        self.diagnostics.skipped_fields += 1
                        logger.debug(f"Skipping field {node_text(name_node)}: unresolved type")
                        continue
                    fields.append(Field(node_text(name_node), field_type))
        return Aggregate(tuple(fields))

    def _unresolved(self, spelling: str) -> Unknown:
        self.diagnostics.unresolved += 1
        logger.debug(f"Could not resolve type {spelling!r}")
        return Unknown()


def resolve(expr: Optional[Node], snapshot: SymbolSnapshot) -> ResolvedType:
    """Resolve one type expression against a snapshot."""
    return TypeResolver(snapshot).resolve(expr)
