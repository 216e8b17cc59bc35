"""Weighted choice between alternative strategies.

``st.one_of`` picks its alternatives uniformly. This module provides a
weighted variant for choices that need calibrated probabilities, such as a
leaf-heavy choice between a terminal and a recursive case.

Each alternative is offered in turn with a ``draw_boolean`` "skip" choice.
Hypothesis shrinks booleans toward False, i.e. toward *not* skipping, so
failing examples shrink toward the earliest alternative. List the simplest
alternative first.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from hypothesis.errors import InvalidArgument
from hypothesis.strategies import SearchStrategy

if TYPE_CHECKING:
    from collections.abc import Callable

    from hypothesis.internal.conjecture.data import ConjectureData

__all__ = ["WeightedChoiceStrategy", "weighted_one_of"]


class WeightedChoiceStrategy[T](SearchStrategy[T]):
    """Draw from one of several strategies with integer weights.

    Alternative i is chosen with probability ``weight_i / total``.
    Zero-weight alternatives are dropped at construction and never drawn.

    Attributes:
        alternatives: (weight, strategy) pairs with positive weight, in order
        total: Sum of all weights
    """

    def __init__(self, alternatives: tuple[tuple[int, SearchStrategy[T]], ...]) -> None:
        super().__init__()
        self.alternatives = tuple((w, s) for w, s in alternatives if w > 0)
        self.total = sum(w for w, _ in self.alternatives)

    def do_validate(self) -> None:
        for _, strategy in self.alternatives:
            strategy.validate()

    def calc_is_empty(self, recur: Callable[[SearchStrategy[Any]], bool]) -> bool:
        return all(recur(strategy) for _, strategy in self.alternatives)

    def do_draw(self, data: ConjectureData) -> T:
        remaining = self.total
        for weight, strategy in self.alternatives:
            # P(skip) == 0 for the last alternative, so the loop always returns.
            if not data.draw_boolean((remaining - weight) / remaining):
                return data.draw(strategy)
            remaining -= weight
        msg = "weighted choice exhausted its alternatives"
        raise AssertionError(msg)  # pragma: no cover

    def __repr__(self) -> str:
        inner = ", ".join(f"({w}, {s!r})" for w, s in self.alternatives)
        return f"weighted_one_of({inner})"


def weighted_one_of[T](*alternatives: tuple[int, SearchStrategy[T]]) -> SearchStrategy[T]:
    """Choose between strategies with probability proportional to weight.

    Args:
        *alternatives: ``(weight, strategy)`` pairs. Weights are non-negative
            integers; at least one must be positive.

    Returns:
        Strategy drawing alternative i with probability weight_i / sum(weights).
        When only one alternative has positive weight, that strategy itself.

    Raises:
        InvalidArgument: On no alternatives, non-integer or negative weights,
            non-strategy alternatives, or an all-zero total

    Example:
        >>> leaf_or_node = weighted_one_of((9, st.just(0)), (1, st.just(1)))
    """
    if not alternatives:
        msg = "weighted_one_of() requires at least one alternative"
        raise InvalidArgument(msg)
    for pair in alternatives:
        if not isinstance(pair, tuple) or len(pair) != 2:
            msg = f"Expected a (weight, strategy) pair, got {pair!r}"
            raise InvalidArgument(msg)
        weight, strategy = pair
        if isinstance(weight, bool) or not isinstance(weight, int):
            msg = f"weight={weight!r} must be an integer"
            raise InvalidArgument(msg)
        if weight < 0:
            msg = f"weight={weight!r} must be non-negative"
            raise InvalidArgument(msg)
        if not isinstance(strategy, SearchStrategy):
            msg = f"Expected a SearchStrategy but got {strategy!r} (type={type(strategy).__name__})"
            raise InvalidArgument(msg)

    positive = tuple(pair for pair in alternatives if pair[0] > 0)
    if not positive:
        msg = "weighted_one_of() requires at least one positive weight"
        raise InvalidArgument(msg)
    if len(positive) == 1:
        return positive[0][1]
    return WeightedChoiceStrategy(positive)
