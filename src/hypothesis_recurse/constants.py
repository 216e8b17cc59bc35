"""Shared constants for hypothesis-recurse.

This module provides the fixed calibration values used by the probability
helpers and the bounded recursive strategy. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Probability limits: Branch probability clamp and weight resolution
- Arithmetic limits: Saturation point for branch-factor accumulation
- Depth limits: Advisory nesting limit for Hypothesis draws

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Probability limits
    "MAX_BRANCH_PROBABILITY",
    "WEIGHT_BASE",
    # Arithmetic limits
    "SATURATION_LIMIT",
    # Depth limits
    "MAX_RECOMMENDED_DEPTH",
]

# ============================================================================
# PROBABILITY LIMITS
# ============================================================================

# Upper bound for the chance of taking the recursive alternative at any layer.
# Keeps the non-recursive alternative reachable at every layer, so every
# layer can terminate regardless of desired_size.
MAX_BRANCH_PROBABILITY: float = 0.9

# Total weight of a (branch, leaf) pair produced by float_to_weight().
# 2**31 gives ~4.7e-10 resolution: the smallest nonzero probability still
# maps to a weight of 1 instead of collapsing to 0.
WEIGHT_BASE: int = 2**31

# ============================================================================
# ARITHMETIC LIMITS
# ============================================================================

# Saturation point for the branch-factor accumulator (unsigned 64-bit max).
# Python integers never overflow, so the accumulator is clamped here to keep
# later branch probabilities at S / 2**64 instead of growing without bound.
SATURATION_LIMIT: int = 2**64 - 1

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Depth above which mutually_recursive() logs a warning.
# Hypothesis marks a draw invalid once strategies nest more than 100 deep.
# Choosing among layers does not nest, but every recursive layer a value
# actually takes adds nested draws, so deep values are rejected by the engine.
MAX_RECOMMENDED_DEPTH: int = 32
