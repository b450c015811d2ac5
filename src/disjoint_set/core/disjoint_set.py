"""Persistent hash-backed disjoint set - the canonical representation."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Generic, TypeVar

from disjoint_set.core import forest
from disjoint_set.core.mutable import MutableDisjointSet

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


def _no_parents() -> Mapping[T, T]:
    return MappingProxyType({})


@dataclass(frozen=True, eq=False, repr=False)
class DisjointSet(Generic[T]):
    """
    An immutable partition of elements into disjoint classes.

    The structure is a parent-pointer forest stored as a read-only mapping
    from each element to its immediate parent; roots point at themselves.
    Every operation that changes membership returns a new DisjointSet and
    leaves the receiver untouched, so older snapshots stay valid.

    Root policy: ``union(a, b)`` always keeps the root of ``a`` (or ``a``
    itself when it is new). ``union(a, b)`` and ``union(b, a)`` can therefore
    produce different roots when both already belong to larger classes.
    There is no union by rank or size.

    Attributes:
        _parent: Read-only element -> parent mapping in insertion order
    """

    _parent: Mapping[T, T] = field(default_factory=_no_parents)

    @classmethod
    def _wrap(cls, parent: dict[T, T]) -> DisjointSet[T]:
        """Adopt ``parent`` without copying. The caller must not keep it."""
        return cls(_parent=MappingProxyType(parent))

    @classmethod
    def empty(cls) -> DisjointSet[T]:
        """Return a disjoint set with no elements."""
        return cls()

    @classmethod
    def from_list(cls, pairs: Iterable[tuple[T, T]]) -> DisjointSet[T]:
        """
        Build a disjoint set by unioning each pair in order.

        Order matters: the first element of the earliest pair touching a
        class decides that class's root.

        Args:
            pairs: ``(element, equivalent)`` pairs

        Returns:
            A new DisjointSet
        """
        builder: MutableDisjointSet[T] = MutableDisjointSet()
        count = 0
        for x, y in pairs:
            builder.union(x, y)
            count += 1
        logger.debug("Built disjoint set of %d elements from %d pairs", len(builder), count)
        return builder.freeze()

    @classmethod
    def from_dict(cls, mapping: Mapping[T, T]) -> DisjointSet[T]:
        """Build a disjoint set by unioning each ``key, value`` item in order."""
        return cls.from_list(mapping.items())

    @classmethod
    def from_parents(cls, parents: Mapping[T, T]) -> DisjointSet[T]:
        """
        Restore a disjoint set from a raw parent mapping such as ``to_dict()``.

        Unlike ``from_dict`` no unions are replayed: the mapping is taken as
        the forest itself, so every parent must be an element and every chain
        must end at a self-rooted element.

        Raises:
            ValueError: If the mapping is not a valid parent forest
        """
        forest.validate(parents)
        logger.debug("Restored disjoint set of %d elements", len(parents))
        return cls._wrap(dict(parents))

    def union(self, x: T, y: T) -> DisjointSet[T]:
        """
        Merge the classes containing ``x`` and ``y``.

        Elements not yet present are inserted. Every node on the chains of
        ``x`` and ``y`` is re-pointed directly at the root of ``x``; all other
        entries are carried over unchanged.

        Args:
            x: Element whose root survives
            y: Element whose class is merged into x's

        Returns:
            New DisjointSet with the merged class
        """
        parent = dict(self._parent)
        forest.link(parent, x, y)
        return DisjointSet._wrap(parent)

    def find(self, x: T) -> T | None:
        """Return the root of ``x``'s class, or None if ``x`` is unknown."""
        return forest.resolve(self._parent, x)

    def has(self, x: T) -> bool:
        """Check whether ``x`` has ever been inserted."""
        return x in self._parent

    def same(self, x: T, y: T) -> bool:
        """Check whether ``x`` and ``y`` are both present and equivalent."""
        return self.has(x) and self.has(y) and forest.same_node(self.find(x), self.find(y))

    def items(self) -> tuple[T, ...]:
        """All elements in insertion order."""
        return tuple(self._parent)

    def add(self, elements: Iterable[T]) -> DisjointSet[T]:
        """Insert each absent element as its own singleton class."""
        parent = dict(self._parent)
        for x in elements:
            if x not in parent:
                parent[x] = x
        return DisjointSet._wrap(parent)

    def roots(self) -> tuple[T, ...]:
        """Class representatives in insertion order."""
        return tuple(x for x, up in self._parent.items() if forest.same_node(x, up))

    def groups(self) -> dict[T, tuple[T, ...]]:
        """Return every class as root -> members, members in insertion order."""
        return forest.group(self._parent)

    def to_list(self) -> list[tuple[T, T]]:
        """Raw ``(element, parent)`` pairs.

        Parents are immediate parents, not necessarily roots; use ``find``
        for resolved representatives.
        """
        return list(self._parent.items())

    def to_dict(self) -> dict[T, T]:
        """Raw element -> immediate parent mapping."""
        return dict(self._parent)

    def thaw(self) -> MutableDisjointSet[T]:
        """Return a mutable copy for batches of in-place unions."""
        return MutableDisjointSet._from_parents(self._parent)

    def __contains__(self, x: object) -> bool:
        return x in self._parent

    def __iter__(self) -> Iterator[T]:
        return iter(self._parent)

    def __len__(self) -> int:
        return len(self._parent)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DisjointSet):
            return NotImplemented
        return self._parent == other._parent

    def __hash__(self) -> int:
        return hash(frozenset(self._parent.items()))

    def __repr__(self) -> str:
        return f"DisjointSet({dict(self._parent)!r})"
