"""Hypothesis strategies for bounded mutual recursion.

Exports:
    mutually_recursive: Bounded recursive strategy wired through a StrategySet
    MutuallyRecursiveStrategy: The strategy class behind mutually_recursive()
    weighted_one_of: Weighted choice between alternative strategies
    WeightedChoiceStrategy: The strategy class behind weighted_one_of()
    LayeredChoiceStrategy: Flat per-draw choice among recursive layers

Python 3.13+.
"""

from .recursive import (
    LayeredChoiceStrategy,
    MutuallyRecursiveStrategy,
    RecursionStep,
    mutually_recursive,
)
from .weighted import WeightedChoiceStrategy, weighted_one_of

__all__ = [
    "LayeredChoiceStrategy",
    "MutuallyRecursiveStrategy",
    "RecursionStep",
    "WeightedChoiceStrategy",
    "mutually_recursive",
    "weighted_one_of",
]
