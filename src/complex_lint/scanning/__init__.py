"""Go parsing boundary: tree-sitter wrapper and declaration extraction."""

from .declarations import (
    expand_parameters,
    extract_functions,
    extract_type_declarations,
    package_name,
)
from .models import FunctionDeclaration, TypeDeclarations
from .treesitter_parser import GO_LANGUAGE, GoParser, node_text

__all__ = [
    "GO_LANGUAGE",
    "GoParser",
    "FunctionDeclaration",
    "TypeDeclarations",
    "expand_parameters",
    "extract_functions",
    "extract_type_declarations",
    "node_text",
    "package_name",
]
