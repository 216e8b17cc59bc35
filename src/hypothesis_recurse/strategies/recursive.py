"""Bounded recursive strategies for mutually recursive types.

``st.recursive`` handles a single self-referencing strategy. When two or more
types embed each other, each recursion step needs to reach the *other*
strategies too. mutually_recursive() threads a StrategySet through every
recursion step so that:

    - a request for the strategy's own type resolves to the current,
      strictly shallower approximation
    - a request for any other type goes through ordinary registry
      memoization, running that type's own bounded layering

Example:
    def arb_first(registry: StrategySet) -> st.SearchStrategy[First]:
        return mutually_recursive(
            st.just(First()), 5, 32, 8, registry,
            lambda reg: st.lists(reg.get(Second, arb_second), max_size=7).map(First),
        )

    def arb_second(registry: StrategySet) -> st.SearchStrategy[Second]:
        return mutually_recursive(
            st.just(Second()), 3, 32, 1, registry,
            lambda reg: reg.get(First, arb_first).map(Second),
        )

    @given(StrategySet().get(First, arb_first))
    def test_first(value): ...

Algorithm (per draw):
    1. Compute one branch probability per layer (see core.probability)
    2. Start from ``base`` as the approximation at remaining depth 0
    3. From the innermost layer outward: expose the current approximation
       under the strategy's key, call the recursion step, and prepend
       (p, recursive alternative) to the layer list; the approximation at
       the next remaining depth is a LayeredChoiceStrategy over that list
    4. Draw from the outermost approximation: offer each layer's recursive
       alternative in turn, outermost first, and fall back to ``base``

Depth is enforced by the finite loop in step 3, never by call recursion.
A draw that picks the base nests a constant number of strategies whatever
the depth; only recursive alternatives that are actually taken add nesting.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from typing import TYPE_CHECKING

from hypothesis.errors import InvalidArgument
from hypothesis.strategies import SearchStrategy

from hypothesis_recurse.constants import MAX_RECOMMENDED_DEPTH, WEIGHT_BASE
from hypothesis_recurse.core.probability import branch_probabilities, float_to_weight
from hypothesis_recurse.registry import StrategySet

if TYPE_CHECKING:
    from typing import Any

    from hypothesis.internal.conjecture.data import ConjectureData

__all__ = [
    "LayeredChoiceStrategy",
    "MutuallyRecursiveStrategy",
    "RecursionStep",
    "mutually_recursive",
]

logger = logging.getLogger(__name__)

# Recursion step contract: receives a layer snapshot in which the strategy's
# own key is bound to the current approximation, returns the recursive case.
type RecursionStep[T] = Callable[[StrategySet], SearchStrategy[T]]


def _check_size_param(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name}={value!r} must be an integer"
        raise InvalidArgument(msg)
    if value < 0:
        msg = f"{name}={value!r} must be non-negative"
        raise InvalidArgument(msg)


class LayeredChoiceStrategy[T](SearchStrategy[T]):
    """Bounded approximation: a flat list of recursive layers over a base.

    Each layer is offered in order, outermost first, with one
    ``draw_boolean(p)``; the first accepted layer's recursive alternative is
    drawn, and ``base`` when every layer declines. Equivalent to nesting
    ``weighted_one_of((1 - p, inner), (p, recursed))`` per layer, but the
    draw nests one strategy deep instead of one per layer. Hypothesis
    shrinks booleans toward False, so failing examples shrink toward
    ``base``.

    Attributes:
        base: Terminal (non-recursive) strategy
        layers: (branch probability, recursive alternative) pairs, outermost
            first; every probability lies in (0, 0.9]
    """

    def __init__(
        self,
        base: SearchStrategy[T],
        layers: tuple[tuple[float, SearchStrategy[T]], ...],
    ) -> None:
        super().__init__()
        self.base = base
        self.layers = layers

    def do_validate(self) -> None:
        self.base.validate()
        for _, recursed in self.layers:
            recursed.validate()

    def calc_is_empty(self, recur: Callable[[SearchStrategy[Any]], bool]) -> bool:
        # The base path is always available.
        return recur(self.base)

    def do_draw(self, data: ConjectureData) -> T:
        for p, recursed in self.layers:
            if data.draw_boolean(p):
                return data.draw(recursed)
        return data.draw(self.base)

    def __repr__(self) -> str:
        return f"LayeredChoiceStrategy({self.base!r}, layers={len(self.layers)})"


class MutuallyRecursiveStrategy[T](SearchStrategy[T]):
    """Strategy whose values nest at most ``depth`` recursive layers.

    Holds the base strategy, the recursion step and a private registry
    snapshot. The layered chain is rebuilt from these on every draw; the
    recursion step must therefore be pure given its snapshot.

    Attributes:
        base: Terminal (non-recursive) strategy
        recurse: Recursion step
        key: Key the current approximation is exposed under
        depth: Maximum number of recursive layers
        desired_size: Target expected size (hint)
        expected_branch_size: Expected children per recursive node (hint)
    """

    def __init__(
        self,
        base: SearchStrategy[T],
        recurse: RecursionStep[T],
        registry: StrategySet,
        key: Hashable,
        depth: int,
        desired_size: int,
        expected_branch_size: int,
    ) -> None:
        super().__init__()
        self.base = base
        self.recurse = recurse
        self.key = key
        self.depth = depth
        self.desired_size = desired_size
        self.expected_branch_size = expected_branch_size
        self._registry = registry.detached()

    def branch_probabilities(self) -> list[float]:
        """Branch probability for each layer, outermost first."""
        return branch_probabilities(self.depth, self.desired_size, self.expected_branch_size)

    def build_chain(self) -> SearchStrategy[T]:
        """Build the outermost bounded approximation.

        Returns:
            A strategy whose values have at most ``depth`` recursive layers.
            ``base`` itself when no layer can recurse (depth=0, or every
            branch probability is zero); otherwise a LayeredChoiceStrategy.

        Raises:
            InvalidArgument: If the recursion step returns a non-strategy
        """
        probabilities = self.branch_probabilities()
        logger.debug(
            "Building %d-layer chain for %r: %s", self.depth, self.key, probabilities
        )

        strategy: SearchStrategy[T] = self.base
        layers: list[tuple[float, SearchStrategy[T]]] = []
        while probabilities:
            p = probabilities.pop()
            recursed = self.recurse(self._registry.bind(self.key, strategy))
            if not isinstance(recursed, SearchStrategy):
                msg = (
                    f"Recursion step for {self.key!r} returned {recursed!r} of type "
                    f"{type(recursed).__name__}, expected a SearchStrategy"
                )
                raise InvalidArgument(msg)
            weight_branch, _ = float_to_weight(p)
            if weight_branch:
                layers.insert(0, (weight_branch / WEIGHT_BASE, recursed))
                strategy = LayeredChoiceStrategy(self.base, tuple(layers))
        return strategy

    def do_validate(self) -> None:
        self.base.validate()

    def calc_is_empty(self, recur: Callable[[SearchStrategy[Any]], bool]) -> bool:
        # The leaf-only path always survives, so emptiness follows the base.
        return recur(self.base)

    def do_draw(self, data: ConjectureData) -> T:
        return data.draw(self.build_chain())

    def __repr__(self) -> str:
        recurse_name = getattr(self.recurse, "__qualname__", repr(self.recurse))
        return (
            f"mutually_recursive({self.base!r}, {self.depth}, {self.desired_size}, "
            f"{self.expected_branch_size}, key={self.key!r}, recurse={recurse_name})"
        )


def mutually_recursive[T](
    base: SearchStrategy[T],
    depth: int,
    desired_size: int,
    expected_branch_size: int,
    registry: StrategySet,
    recurse: RecursionStep[T],
    *,
    key: Hashable | None = None,
) -> SearchStrategy[T]:
    """A variant of ``st.recursive`` for mutually recursive strategies.

    Instead of receiving a single strategy, ``recurse`` receives a registry
    snapshot in which ``key`` is bound to the approximation built so far.
    ``depth``, ``desired_size`` and ``expected_branch_size`` apply only to
    values of this strategy.

    Args:
        base: Strategy for the non-recursive case
        depth: Maximum number of recursive layers (non-negative)
        desired_size: Target expected size (hint, non-negative)
        expected_branch_size: Expected children per recursive node (hint,
            non-negative)
        registry: Snapshot the recursion step's requests are resolved in;
            normally the one passed to the enclosing builder
        recurse: Recursion step, called once per layer on every draw
        key: Key the approximation is exposed under. Defaults to the key
            whose builder received ``registry``.

    Returns:
        Strategy generating values with at most ``depth`` recursive layers

    Raises:
        InvalidArgument: On non-integer or negative size parameters,
            a non-strategy ``base``, a non-callable ``recurse``, or when no
            key is given and ``registry`` is not a builder snapshot

    Degenerate inputs degrade to base-only generation instead of failing:
        depth=0, desired_size=0, expected_branch_size=0.
    """
    if not isinstance(base, SearchStrategy):
        msg = f"Expected a SearchStrategy but got base={base!r} (type={type(base).__name__})"
        raise InvalidArgument(msg)
    _check_size_param("depth", depth)
    _check_size_param("desired_size", desired_size)
    _check_size_param("expected_branch_size", expected_branch_size)
    if not isinstance(registry, StrategySet):
        msg = f"Expected a StrategySet but got registry={registry!r}"
        raise InvalidArgument(msg)
    if not callable(recurse):
        msg = f"recurse={recurse!r} must be callable"
        raise InvalidArgument(msg)

    if key is None:
        key = registry.building
        if key is None:
            msg = (
                "mutually_recursive() needs a key: pass key=... or call it from "
                "a builder passed to StrategySet.get()"
            )
            raise InvalidArgument(msg)

    if depth > 0 and (desired_size == 0 or expected_branch_size == 0):
        logger.warning(
            "mutually_recursive() for %r with desired_size=%d, expected_branch_size=%d "
            "never recurses; generating base values only.",
            key,
            desired_size,
            expected_branch_size,
        )
    if depth > MAX_RECOMMENDED_DEPTH:
        logger.warning(
            "mutually_recursive() for %r requested depth %d (recommended at most %d). "
            "Values whose recursive layers nest more than 100 strategies deep are "
            "rejected by Hypothesis.",
            key,
            depth,
            MAX_RECOMMENDED_DEPTH,
        )

    return MutuallyRecursiveStrategy(
        base, recurse, registry, key, depth, desired_size, expected_branch_size
    )
