"""Structural metrics over function bodies."""

from .structural import StructuralCounter, StructuralMetrics, count_structure

__all__ = ["StructuralCounter", "StructuralMetrics", "count_structure"]
