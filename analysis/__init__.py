"""
Analysis tools for combinatorial games.

Provides:
- Comparison of games through the outcome of their difference
- Pairwise comparison matrices
- Equivalence classes and reports over collections of games
"""

from .comparison import (
    Ordering,
    gt,
    lt,
    eq,
    incomp,
    ge,
    le,
    compare,
    comparison_matrix,
    ComparisonAnalyzer,
)

__all__ = [
    "Ordering",
    "gt",
    "lt",
    "eq",
    "incomp",
    "ge",
    "le",
    "compare",
    "comparison_matrix",
    "ComparisonAnalyzer",
]
