"""Type resolution and state-space estimation."""

from .loader import load_snapshot
from .models import (
    Aggregate,
    Bool,
    Field,
    IntegerLike,
    Reference,
    ResolvedType,
    Sequence,
    StringLike,
    Unknown,
    describe,
)
from .resolver import ResolutionDiagnostics, TypeResolver, resolve
from .snapshot import UNIVERSE, SymbolSnapshot
from .statespace import estimate_state_space, product_state_space

__all__ = [
    "Aggregate",
    "Bool",
    "Field",
    "IntegerLike",
    "Reference",
    "ResolvedType",
    "Sequence",
    "StringLike",
    "Unknown",
    "describe",
    "ResolutionDiagnostics",
    "TypeResolver",
    "resolve",
    "SymbolSnapshot",
    "UNIVERSE",
    "load_snapshot",
    "estimate_state_space",
    "product_state_space",
]
