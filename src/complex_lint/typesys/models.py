"""Resolved type model.

A ResolvedType is the analyzer's view of a Go type after name lookup:

    Bool            bool
    IntegerLike     every integer width and signedness (int, uint64, byte, rune, ...)
    StringLike      string
    Sequence        slices and arrays, wrapping the element type
    Reference       pointers, wrapping the base type
    Aggregate       structs, as an ordered tuple of named fields
    Unknown         resolution failed, or the kind has no estimation policy

All variants are frozen dataclasses compared by value. Resolution builds
fresh instances on every call; no identity is guaranteed.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedType:
    """Base class for all resolved type variants."""


@dataclass(frozen=True)
class Bool(ResolvedType):
    pass


@dataclass(frozen=True)
class IntegerLike(ResolvedType):
    pass


@dataclass(frozen=True)
class StringLike(ResolvedType):
    pass


@dataclass(frozen=True)
class Unknown(ResolvedType):
    pass


@dataclass(frozen=True)
class Sequence(ResolvedType):
    elem: ResolvedType


@dataclass(frozen=True)
class Reference(ResolvedType):
    base: ResolvedType


@dataclass(frozen=True)
class Field:
    """One named struct field."""

    name: str
    type: ResolvedType


@dataclass(frozen=True)
class Aggregate(ResolvedType):
    fields: tuple[Field, ...] = ()


def describe(t: ResolvedType) -> str:
    """Render a resolved type in Go-like spelling for diagnostics.

    >>> describe(Sequence(Reference(IntegerLike())))
    '[]*int'
    """
    if isinstance(t, Bool):
        return "bool"
    if isinstance(t, IntegerLike):
        return "int"
    if isinstance(t, StringLike):
        return "string"
    if isinstance(t, Sequence):
        return f"[]{describe(t.elem)}"
    if isinstance(t, Reference):
        return f"*{describe(t.base)}"
    if isinstance(t, Aggregate):
        inner = "; ".join(f"{f.name} {describe(f.type)}" for f in t.fields)
        return f"struct{{{inner}}}"
    return "?"
