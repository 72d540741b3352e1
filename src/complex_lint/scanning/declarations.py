"""Extract function and type declarations from a Go syntax tree.

Only top-level declarations are considered. Function literals and types
declared inside function bodies are left to the body traversal.
"""

from __future__ import annotations

import logging
from typing import Optional

from tree_sitter import Node, Tree

from .models import FunctionDeclaration, TypeDeclarations
from .treesitter_parser import node_text

logger = logging.getLogger(__name__)

_FUNCTION_NODES = ("function_declaration", "method_declaration")


def package_name(tree: Tree) -> Optional[str]:
    """Name from the file's ``package`` clause, or None if absent."""
    for child in tree.root_node.named_children:
        if child.type == "package_clause":
            for ident in child.named_children:
                if ident.type == "package_identifier":
                    return node_text(ident)
    return None


def extract_functions(tree: Tree, include_methods: bool = True) -> list[FunctionDeclaration]:
    """Return the file's function declarations in declaration order.

    Args:
        tree: Parsed Go file
        include_methods: Also return method declarations

    Returns:
        List of FunctionDeclaration, ordered by position in the source
    """
    functions: list[FunctionDeclaration] = []

    for node in tree.root_node.named_children:
        if node.type not in _FUNCTION_NODES:
            continue
        if node.type == "method_declaration" and not include_methods:
            continue

        name_node = node.child_by_field_name("name")
        if name_node is None:
            continue

        functions.append(
            FunctionDeclaration(
                name=node_text(name_node),
                params=tuple(expand_parameters(node.child_by_field_name("parameters"))),
                results=tuple(expand_parameters(node.child_by_field_name("result"))),
                body=node.child_by_field_name("body"),
                receiver=_receiver_type(node),
                start_line=node.start_point[0] + 1,
            )
        )

    logger.debug(f"Extracted {len(functions)} function declarations")
    return functions


def expand_parameters(node: Optional[Node]) -> list[Node]:
    """Flatten a parameter or result list into one type expression per entry.

    A bare result type (``func f() int``) is returned as a single entry.
    """
    if node is None:
        return []
    if node.type != "parameter_list":
        return [node]

    exprs: list[Node] = []
    for child in node.named_children:
        if child.type == "parameter_declaration":
            type_node = child.child_by_field_name("type")
            if type_node is None:
                continue
            names = child.children_by_field_name("name")
            exprs.extend([type_node] * max(len(names), 1))
        elif child.type == "variadic_parameter_declaration":
            exprs.append(child)
    return exprs


def extract_type_declarations(tree: Tree) -> TypeDeclarations:
    """Collect top-level ``type`` declarations of a file."""
    declarations = TypeDeclarations()

    for node in tree.root_node.named_children:
        if node.type != "type_declaration":
            continue
        for spec in node.named_children:
            name_node = spec.child_by_field_name("name")
            type_node = spec.child_by_field_name("type")
            if name_node is None or type_node is None:
                continue
            if spec.type == "type_spec":
                declarations.defined[node_text(name_node)] = type_node
            elif spec.type == "type_alias":
                declarations.aliases[node_text(name_node)] = type_node

    return declarations


def _receiver_type(node: Node) -> Optional[str]:
    receiver = node.child_by_field_name("receiver")
    if receiver is None:
        return None
    for child in receiver.named_children:
        if child.type == "parameter_declaration":
            return node_text(child.child_by_field_name("type"))
    return None
