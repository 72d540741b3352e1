"""Shared test fixtures for complex-lint tests."""

from pathlib import Path

import pytest

from complex_lint.scanning import GoParser, extract_functions, extract_type_declarations
from complex_lint.typesys import SymbolSnapshot, TypeResolver

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def gopkg_dir():
    """Directory of the `server` fixture package."""
    return FIXTURES_DIR / "gopkg"


@pytest.fixture
def parse_go():
    """Parse Go source text, failing on syntax errors."""
    parser = GoParser()

    def _parse(source: str):
        return parser.parse_checked(source.encode("utf-8"), Path("<test>.go"))

    return _parse


@pytest.fixture
def resolve_params(parse_go):
    """Resolve the parameter types of ``func f(<params>)``.

    The prelude's type declarations are visible to the resolver.
    Returns (resolved types, resolver) so tests can inspect diagnostics.
    """

    def _resolve(params: str, prelude: str = ""):
        tree = parse_go(f"package p\n\n{prelude}\n\nfunc f({params}) {{}}\n")
        snapshot = SymbolSnapshot(
            package="p",
            declarations=extract_type_declarations(tree).all(),
        )
        resolver = TypeResolver(snapshot)
        decl = extract_functions(tree)[0]
        return [resolver.resolve(p) for p in decl.params], resolver

    return _resolve


@pytest.fixture
def function_body(parse_go):
    """Body node of the single function in a snippet of Go statements."""

    def _body(statements: str):
        tree = parse_go(f"package p\n\nfunc f() {{\n{statements}\n}}\n")
        return extract_functions(tree)[0].body

    return _body
