"""State-space estimator.

Maps a ResolvedType to a heuristic count of the distinct values it can
hold. The numbers are for ranking functions against each other only:

    Bool            weights.bool_states
    IntegerLike     weights.integer_states
    StringLike      weights.string_states
    Sequence(e)     estimate(e) * weights.sequence_length
    Reference(b)    estimate(b)
    Aggregate(fs)   product of estimate(f.type), 1 when empty
    Unknown         1

Every weight is >= 1, so every estimate is >= 1.
"""

from __future__ import annotations

from typing import Iterable

from ..config import DEFAULT_WEIGHTS, StateSpaceWeights
from .models import (
    Aggregate,
    Bool,
    IntegerLike,
    Reference,
    ResolvedType,
    Sequence,
    StringLike,
)


def estimate_state_space(t: ResolvedType, weights: StateSpaceWeights = DEFAULT_WEIGHTS) -> int:
    """Estimate the state space of a resolved type."""
    if isinstance(t, Bool):
        return weights.bool_states
    if isinstance(t, IntegerLike):
        return weights.integer_states
    if isinstance(t, StringLike):
        return weights.string_states
    if isinstance(t, Sequence):
        return estimate_state_space(t.elem, weights) * weights.sequence_length
    if isinstance(t, Reference):
        return estimate_state_space(t.base, weights)
    if isinstance(t, Aggregate):
        return product_state_space((f.type for f in t.fields), weights)
    # Unknown: neutral multiplier
    return 1


def product_state_space(
    types: Iterable[ResolvedType], weights: StateSpaceWeights = DEFAULT_WEIGHTS
) -> int:
    """Multiply the estimates of several types; an empty input gives 1."""
    space = 1
    for t in types:
        space *= estimate_state_space(t, weights)
    return space
