"""Syntax-level models extracted from a parsed Go file.

These wrap tree-sitter nodes without interpreting them. Type expressions
stay as raw nodes; the type resolver gives them meaning.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from tree_sitter import Node


@dataclass(frozen=True)
class FunctionDeclaration:
    """A top-level function or method declaration.

    Attributes:
        name: Function or method name
        params: One type expression per declared parameter, in order.
            ``a, b int`` contributes two entries; a variadic ``...T``
            contributes its variadic_parameter_declaration node.
        results: Result type expressions, same rule as params
        body: Block node, or None for a declaration without a body
        receiver: Receiver type spelling for methods (e.g. ``*Server``)
        start_line: Starting line number (1-indexed)
    """

    name: str
    params: tuple[Node, ...]
    results: tuple[Node, ...]
    body: Optional[Node]
    receiver: Optional[str] = None
    start_line: int = 0

    @property
    def is_method(self) -> bool:
        return self.receiver is not None


@dataclass
class TypeDeclarations:
    """Top-level ``type`` declarations of one or more files.

    Attributes:
        defined: ``type T <expr>`` specs, name -> type expression
        aliases: ``type A = <expr>`` specs, name -> type expression
    """

    defined: dict[str, Node] = field(default_factory=dict)
    aliases: dict[str, Node] = field(default_factory=dict)

    def merge(self, other: TypeDeclarations) -> None:
        self.defined.update(other.defined)
        self.aliases.update(other.aliases)

    def all(self) -> dict[str, Node]:
        """Every declared name, defined types and aliases together."""
        return {**self.defined, **self.aliases}
