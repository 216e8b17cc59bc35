"""Exception hierarchy for hypothesis-recurse.

Invalid user arguments are reported with Hypothesis's own
``hypothesis.errors.InvalidArgument``, the same way the engine reports bad
strategy arguments. The classes here cover conditions the engine has no
vocabulary for: broken registry invariants and unbounded construction.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Hashable, Sequence

__all__ = [
    "RecurseError",
    "StrategySetInvariantError",
    "UnboundedRecursionError",
]


def _key_name(key: Hashable) -> str:
    return getattr(key, "__qualname__", None) or repr(key)


class RecurseError(Exception):
    """Base exception for all hypothesis-recurse errors."""


class StrategySetInvariantError(RecurseError):
    """Stored registry entry does not match the type it was requested as.

    Entries are only ever inserted under the key they are built for, so this
    is unreachable through the public API. It signals internal corruption and
    must never be caught and recovered from.

    Attributes:
        key: The key that was requested
        found: Description of what was stored under that key
    """

    def __init__(self, key: Hashable, found: str) -> None:
        self.key = key
        self.found = found
        super().__init__(
            f"StrategySet entry for {_key_name(key)} holds {found}; "
            "registry invariant violated"
        )


class UnboundedRecursionError(RecurseError):
    """A strategy was requested while its own builder was still running.

    Example:
        def arb_tree(registry):
            # Plain self-reference: no bounded approximation exists yet
            return st.lists(registry.get(Tree, arb_tree)).map(Tree)

    Wrapping the self-reference in mutually_recursive() makes the nested
    request resolve to a strictly shallower approximation instead.

    Attributes:
        key: The key that was requested again
        chain: Keys under construction, outermost first, ending with key
    """

    def __init__(self, key: Hashable, chain: Sequence[Hashable]) -> None:
        self.key = key
        self.chain = tuple(chain)
        path = " -> ".join(_key_name(k) for k in self.chain)
        super().__init__(
            f"Strategy for {_key_name(key)} requested while it is still being "
            f"built ({path}). Build it with mutually_recursive() so nested "
            "requests resolve to a bounded approximation."
        )
