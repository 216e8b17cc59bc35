"""hypothesis-recurse - Mutually recursive strategies for Hypothesis.

``st.recursive`` covers a single self-referencing type. hypothesis-recurse
covers two or more types that embed each other, declared in any order and
without pre-declaring the recursion group. Generated values have a hard
depth bound and a calibrated expected size.

Public API:
    StrategySet - Type-keyed, memoizing registry of interdependent strategies
    mutually_recursive - Bounded recursive strategy wired through a StrategySet
    weighted_one_of - Weighted choice between alternative strategies
    branch_probabilities - Per-layer branch probabilities from size hints
    float_to_weight - Probability to (branch, leaf) integer weight pair

Exceptions:
    RecurseError - Base exception class
    StrategySetInvariantError - Registry entry failed its checked retrieval
    UnboundedRecursionError - Strategy requested while still being built

Invalid arguments raise ``hypothesis.errors.InvalidArgument``.

Submodules:
    hypothesis_recurse.registry - StrategySet
    hypothesis_recurse.strategies - Strategy classes
    hypothesis_recurse.core - Probability helpers and errors
    hypothesis_recurse.constants - Calibration constants
"""

from .core import (
    RecurseError,
    StrategySetInvariantError,
    UnboundedRecursionError,
    branch_probabilities,
    float_to_weight,
)
from .registry import StrategySet
from .strategies import MutuallyRecursiveStrategy, mutually_recursive, weighted_one_of

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("hypothesis-recurse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    # Run: uv sync
    __version__ = "0.0.0+dev"

__all__ = [
    "MutuallyRecursiveStrategy",
    "RecurseError",
    "StrategySet",
    "StrategySetInvariantError",
    "UnboundedRecursionError",
    "__version__",
    "branch_probabilities",
    "float_to_weight",
    "mutually_recursive",
    "weighted_one_of",
]
