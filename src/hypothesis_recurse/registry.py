"""Type-keyed registry of memoized, mutually dependent strategies.

A StrategySet maps a key (normally the class of the generated values) to the
strategy built for it. Builders for one type may ask the registry for
strategies of other types, in any order, without declaring the recursion
group up front:

    def arb_first(registry: StrategySet) -> st.SearchStrategy[First]:
        return st.lists(registry.get(Second, arb_second)).map(First)

Architecture:
    - Entries live in a read-only mapping that is never mutated in place
    - copy() shares that mapping, so copies cost O(1)
    - get() installs a new mapping on the calling handle only, so copies
      handed out earlier (including the one given to the builder) never
      observe the insertion

Thread Safety:
    Handles are not locked. Give each thread its own copy(); copies share
    storage but never write to it.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from hypothesis.errors import InvalidArgument
from hypothesis.strategies import SearchStrategy

from hypothesis_recurse.core.errors import (
    StrategySetInvariantError,
    UnboundedRecursionError,
)

__all__ = ["StrategyBuilder", "StrategySet"]

logger = logging.getLogger(__name__)

# Builder contract: receives a registry snapshot, returns the strategy for its key.
type StrategyBuilder[T] = Callable[[StrategySet], SearchStrategy[T]]

_EMPTY: Mapping[Hashable, _StrategyEntry] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class _StrategyEntry:
    """Stored strategy together with the key it was built for.

    Attributes:
        key: Key the strategy was inserted under
        strategy: The memoized strategy
    """

    key: Hashable
    strategy: SearchStrategy[Any]


class StrategySet:
    """A collection of strategies that depend on each other.

    Cheap to copy: copies share storage and diverge on insertion.

    Supports dict-like introspection:
        - __iter__: Iterate over registered keys
        - __len__: Count registered strategies
        - __contains__: Check if a key has a strategy (supports 'in' operator)

    Memory Optimization:
        Uses __slots__ for memory efficiency (avoids per-instance __dict__).

    Example:
        >>> registry = StrategySet()
        >>> ints = registry.get(int, lambda _: st.integers())
        >>> int in registry
        True
        >>> registry.get(int, lambda _: st.none()) is ints
        True
    """

    __slots__ = ("_building", "_entries")

    def __init__(self) -> None:
        """Initialize empty strategy set."""
        self._entries: Mapping[Hashable, _StrategyEntry] = _EMPTY
        # Keys whose builders are running along this snapshot's lineage,
        # outermost first.
        self._building: tuple[Hashable, ...] = ()

    @classmethod
    def _derive(
        cls,
        entries: Mapping[Hashable, _StrategyEntry],
        building: tuple[Hashable, ...],
    ) -> StrategySet:
        snapshot = cls.__new__(cls)
        snapshot._entries = entries
        snapshot._building = building
        return snapshot

    def get[T](self, key: type[T] | Hashable, builder: StrategyBuilder[T]) -> SearchStrategy[T]:
        """Return the strategy for ``key``, building and storing it if missing.

        The builder runs at most once per handle and receives a copy of this
        registry taken before the insertion, so it cannot see its own entry.
        Later calls for the same key return the stored strategy and never
        invoke their builder.

        Args:
            key: Key of the generated values, normally their class
            builder: Called with a registry snapshot when no entry exists

        Returns:
            The memoized strategy for ``key``

        Raises:
            InvalidArgument: If the builder returns a non-strategy
            UnboundedRecursionError: If ``key`` is requested from inside its
                own builder without a bounded approximation in place
            StrategySetInvariantError: If the stored entry does not match
                ``key`` (internal corruption)
        """
        entry = self._entries.get(key)
        if entry is not None:
            return self._checked(key, entry)

        if key in self._building:
            raise UnboundedRecursionError(key, (*self._building, key))

        snapshot = StrategySet._derive(self._entries, (*self._building, key))
        logger.debug("Building strategy for %r", key)
        strategy = builder(snapshot)
        if not isinstance(strategy, SearchStrategy):
            msg = (
                f"Builder for {key!r} returned {strategy!r} of type "
                f"{type(strategy).__name__}, expected a SearchStrategy"
            )
            raise InvalidArgument(msg)

        self._entries = self._inserted(key, strategy)
        logger.debug("Registered strategy for %r (%d entries)", key, len(self._entries))
        return strategy

    def _inserted(
        self, key: Hashable, strategy: SearchStrategy[Any]
    ) -> Mapping[Hashable, _StrategyEntry]:
        """Return a new mapping with ``key`` added; self._entries is untouched."""
        entries = dict(self._entries)
        entries[key] = _StrategyEntry(key, strategy)
        return MappingProxyType(entries)

    def bind(self, key: Hashable, strategy: SearchStrategy[Any]) -> StrategySet:
        """Return a new snapshot with ``key`` bound to ``strategy``.

        This handle is unchanged. Used to expose the current bounded
        approximation to a recursion step; also useful to pre-seed a
        registry with a hand-written strategy.

        Raises:
            InvalidArgument: If ``strategy`` is not a SearchStrategy
        """
        if not isinstance(strategy, SearchStrategy):
            msg = f"Expected a SearchStrategy but got {strategy!r} (type={type(strategy).__name__})"
            raise InvalidArgument(msg)
        return StrategySet._derive(self._inserted(key, strategy), self._building)

    @staticmethod
    def _checked(key: Hashable, entry: object) -> SearchStrategy[Any]:
        if not isinstance(entry, _StrategyEntry):
            raise StrategySetInvariantError(key, f"a {type(entry).__name__}")
        if entry.key != key:
            raise StrategySetInvariantError(key, f"a strategy built for {entry.key!r}")
        if not isinstance(entry.strategy, SearchStrategy):
            raise StrategySetInvariantError(key, f"a {type(entry.strategy).__name__}")
        return entry.strategy

    @property
    def building(self) -> Hashable | None:
        """Key whose builder received this snapshot, or None.

        Example:
            >>> StrategySet().building is None
            True
        """
        return self._building[-1] if self._building else None

    def copy(self) -> StrategySet:
        """Create an independent copy sharing this registry's storage.

        Returns:
            New StrategySet with the same entries. Inserting into either
            handle afterwards does not affect the other.
        """
        return StrategySet._derive(self._entries, self._building)

    def detached(self) -> StrategySet:
        """Create a copy that is not building any key.

        Strategies keep a detached copy for use at draw time: by then every
        builder on this snapshot's lineage has returned, so a request for
        one of those keys builds a fresh strategy instead of raising
        UnboundedRecursionError.

        Example:
            >>> def builder(snapshot):
            ...     assert snapshot.detached().building is None
            ...     return st.integers()
            >>> _ = StrategySet().get(int, builder)
        """
        return StrategySet._derive(self._entries, ())

    def __copy__(self) -> StrategySet:
        return self.copy()

    def __iter__(self) -> Iterator[Hashable]:
        """Iterate over registered keys."""
        return iter(self._entries)

    def __len__(self) -> int:
        """Count of registered strategies."""
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        """Check if a key has a registered strategy using 'in' operator."""
        return key in self._entries

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> repr(StrategySet())
            'StrategySet(strategies=0)'
        """
        if self._building:
            return f"StrategySet(strategies={len(self._entries)}, building={self.building!r})"
        return f"StrategySet(strategies={len(self._entries)})"
