"""Tree-sitter parser wrapper for Go sources.

Usage:
    parser = GoParser()
    tree = parser.parse(code_bytes)
    tree = parser.parse_checked(code_bytes, path)  # raises ParsingError
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Optional

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Tree

from ..exceptions import ParsingError

logger = logging.getLogger(__name__)

# tree-sitter >= 0.23 grammars return a PyCapsule; wrap in Language()
GO_LANGUAGE = Language(tree_sitter_go.language())


def node_text(node: Optional[Node]) -> str:
    """Decode the source text spanned by a node."""
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def iter_error_nodes(node: Node) -> Iterator[Node]:
    """Yield ERROR and MISSING nodes below (and including) node, in source order."""
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type == "ERROR" or current.is_missing:
            yield current
            continue
        if current.has_error:
            stack.extend(reversed(current.children))


class GoParser:
    """Wrapper around a tree-sitter parser configured with the Go grammar."""

    def __init__(self) -> None:
        self._parser = Parser(GO_LANGUAGE)

    def parse(self, code: bytes) -> Tree:
        """Parse code and return the syntax tree.

        tree-sitter always produces a tree; syntax errors show up as ERROR
        or MISSING nodes. Use parse_checked() to reject them.
        """
        return self._parser.parse(code)

    def parse_checked(self, code: bytes, path: Path) -> Tree:
        """Parse code, raising ParsingError if the tree contains syntax errors.

        Args:
            code: Source code as bytes
            path: File path, used in the error message

        Returns:
            Error-free syntax tree

        Raises:
            ParsingError: If the source is not valid Go
        """
        tree = self.parse(code)
        root = tree.root_node
        if not root.has_error:
            return tree

        first = next(iter_error_nodes(root), root)
        line, column = first.start_point[0] + 1, first.start_point[1] + 1
        if first.is_missing:
            reason = f"{line}:{column}: missing {first.type}"
        else:
            snippet = node_text(first).splitlines()[0] if node_text(first) else ""
            reason = f"{line}:{column}: syntax error near {snippet!r}"
        logger.debug(f"Parse failed for {path}: {reason}")
        raise ParsingError(path, reason)
