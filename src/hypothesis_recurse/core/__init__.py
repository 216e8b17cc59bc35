"""Core utilities shared by the registry and the strategies.

This package provides foundational pieces that both the registry and the
strategy layer depend on. By isolating them here, we maintain a clean
dependency graph:

    core <- registry <- strategies

Exports:
    branch_probabilities: Per-layer branch probabilities from size hints
    float_to_weight: Probability to (branch, leaf) integer weight pair
    saturating_mul: Multiplication that stalls at a limit
    RecurseError: Base exception class
    StrategySetInvariantError: Registry entry failed its checked retrieval
    UnboundedRecursionError: Strategy requested while still being built

Python 3.13+.
"""

from .errors import RecurseError, StrategySetInvariantError, UnboundedRecursionError
from .probability import branch_probabilities, float_to_weight, saturating_mul

__all__ = [
    "RecurseError",
    "StrategySetInvariantError",
    "UnboundedRecursionError",
    "branch_probabilities",
    "float_to_weight",
    "saturating_mul",
]
