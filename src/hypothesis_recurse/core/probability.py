"""Branch probability calibration for bounded recursive strategies.

Turns the (depth, desired_size, expected_branch_size) hints into one branch
probability per recursion layer, and converts probabilities into integer
weight pairs for weighted choice.

Layer i (1-based, outermost first) gets:

    p_i = desired_size / (2 * expected_branch_size) ** i

clamped to MAX_BRANCH_PROBABILITY. The denominator is accumulated with
saturating multiplication, so huge depths or branch sizes drive p_i toward
zero instead of growing an unbounded integer, and huge sizes clamp without
ever being converted to float.

Python 3.13+.
"""

from __future__ import annotations

from hypothesis.errors import InvalidArgument

from hypothesis_recurse.constants import (
    MAX_BRANCH_PROBABILITY,
    SATURATION_LIMIT,
    WEIGHT_BASE,
)

__all__ = [
    "branch_probabilities",
    "float_to_weight",
    "saturating_mul",
]


def saturating_mul(a: int, b: int, limit: int = SATURATION_LIMIT) -> int:
    """Multiply two non-negative integers, stalling at ``limit``.

    Example:
        >>> saturating_mul(2**40, 2**40)
        18446744073709551615
        >>> saturating_mul(3, 4)
        12
    """
    return min(a * b, limit)


def branch_probabilities(
    depth: int, desired_size: int, expected_branch_size: int
) -> list[float]:
    """Compute clamped branch probabilities, outermost layer first.

    Args:
        depth: Number of recursion layers
        desired_size: Target expected size of generated values (hint)
        expected_branch_size: Expected number of children per recursive node (hint)

    Returns:
        ``depth`` floats in [0, MAX_BRANCH_PROBABILITY]. Index 0 is the
        outermost layer (largest probability).

    Degenerate inputs degrade instead of failing:
        - depth=0 returns an empty list
        - desired_size=0 returns all zeros
        - expected_branch_size=0 returns all zeros (the accumulator is 0)

    Example:
        >>> branch_probabilities(3, 32, 8)
        [0.9, 0.125, 0.0078125]
    """
    step = saturating_mul(expected_branch_size, 2)
    k = step
    probabilities: list[float] = []
    for _ in range(depth):
        if not k:
            probabilities.append(0.0)
        elif desired_size >= MAX_BRANCH_PROBABILITY * k:
            # int-float comparison is exact, so huge sizes never reach float().
            probabilities.append(MAX_BRANCH_PROBABILITY)
        else:
            probabilities.append(min(desired_size / k, MAX_BRANCH_PROBABILITY))
        k = saturating_mul(k, step)
    return probabilities


def float_to_weight(p: float) -> tuple[int, int]:
    """Convert a probability into a ``(branch, leaf)`` integer weight pair.

    The pair always sums to WEIGHT_BASE. The conversion is monotonic in p
    and exact at the endpoints: p=0 gives ``(0, WEIGHT_BASE)`` and p=1 gives
    ``(WEIGHT_BASE, 0)``. Any p strictly between 0 and 1 gives two nonzero
    weights, so a tiny probability never rounds to "never".

    Raises:
        InvalidArgument: If p is not a probability in [0, 1]

    Example:
        >>> float_to_weight(0.5)
        (1073741824, 1073741824)
        >>> float_to_weight(1e-12)
        (1, 2147483647)
    """
    if not 0.0 <= p <= 1.0:
        msg = f"p={p!r} must be a probability between 0 and 1"
        raise InvalidArgument(msg)
    if p == 0.0:
        return (0, WEIGHT_BASE)
    if p == 1.0:
        return (WEIGHT_BASE, 0)
    branch = max(1, min(WEIGHT_BASE - 1, round(p * WEIGHT_BASE)))
    return (branch, WEIGHT_BASE - branch)
