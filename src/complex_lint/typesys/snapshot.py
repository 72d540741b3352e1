"""Symbol snapshot: the read-only lookup context for type resolution.

A SymbolSnapshot is built once per run (see loader.load_snapshot) and then
passed explicitly to every resolution call. All of its tables are exposed
through MappingProxyType so nothing downstream can mutate them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from tree_sitter import Node

from .models import Bool, IntegerLike, ResolvedType, StringLike, Unknown

_INTEGER_BUILTINS = (
    "int", "int8", "int16", "int32", "int64",
    "uint", "uint8", "uint16", "uint32", "uint64", "uintptr",
    "byte", "rune",
)

# Built-ins the estimator has no policy for. They resolve (lookup succeeds)
# but to Unknown, so they contribute the neutral multiplier.
NO_POLICY_BUILTINS = frozenset(
    {"float32", "float64", "complex64", "complex128", "error", "any", "comparable"}
)


def _build_universe() -> Mapping[str, ResolvedType]:
    universe: dict[str, ResolvedType] = {"bool": Bool(), "string": StringLike()}
    for name in _INTEGER_BUILTINS:
        universe[name] = IntegerLike()
    for name in NO_POLICY_BUILTINS:
        universe[name] = Unknown()
    return MappingProxyType(universe)


# Go's predeclared type names
UNIVERSE: Mapping[str, ResolvedType] = _build_universe()


def _frozen(mapping: Mapping) -> Mapping:
    if isinstance(mapping, MappingProxyType):
        return mapping
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class SymbolSnapshot:
    """Identifier-to-type lookups for one analyzed file and its package.

    Attributes:
        package: Go package name
        definitions: Package-level defined types (``type T ...``), pre-resolved
        uses: Package-level aliases (``type A = B``), pre-resolved
        declarations: Type declarations of the analyzed file, as syntax
        universe: Predeclared types
        losses: Pre-resolved name -> (unresolved, skipped_fields) counted
            while resolving it; replayed on every lookup of that name
    """

    package: str = ""
    definitions: Mapping[str, ResolvedType] = field(default_factory=dict)
    uses: Mapping[str, ResolvedType] = field(default_factory=dict)
    declarations: Mapping[str, Node] = field(default_factory=dict)
    universe: Mapping[str, ResolvedType] = field(default_factory=lambda: UNIVERSE)
    losses: Mapping[str, tuple[int, int]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in ("definitions", "uses", "declarations", "universe", "losses"):
            object.__setattr__(self, name, _frozen(getattr(self, name)))

    def lookup_definition(self, name: str) -> Optional[ResolvedType]:
        return self.definitions.get(name)

    def lookup_use(self, name: str) -> Optional[ResolvedType]:
        return self.uses.get(name)

    def lookup_declaration(self, name: str) -> Optional[Node]:
        return self.declarations.get(name)

    def lookup_universe(self, name: str) -> Optional[ResolvedType]:
        return self.universe.get(name)

    def lookup_losses(self, name: str) -> tuple[int, int]:
        return self.losses.get(name, (0, 0))
