"""In-place disjoint set sharing the persistent structure's root policy."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Generic, TypeVar

from disjoint_set.core import forest

if TYPE_CHECKING:
    from disjoint_set.core.disjoint_set import DisjointSet

T = TypeVar("T", bound=Hashable)


class MutableDisjointSet(Generic[T]):
    """Union-Find (disjoint set) updated in place.

    Runs the same algorithm as ``DisjointSet``: the first argument's root
    survives a union and both chains are fully compressed. ``find`` never
    compresses, so a frozen snapshot is identical to the persistent structure
    built from the same sequence of unions.

    Instances are not synchronised. Sharing one between threads that mutate
    it requires an external lock; share ``freeze()`` snapshots instead.
    """

    __slots__ = ("_parent",)

    def __init__(self, elements: Iterable[T] = ()) -> None:
        self._parent: dict[T, T] = {}
        self.add(elements)

    @classmethod
    def _from_parents(cls, parent: Mapping[T, T]) -> MutableDisjointSet[T]:
        """Start from a copy of an already valid parent mapping."""
        result: MutableDisjointSet[T] = cls()
        result._parent.update(parent)
        return result

    def find(self, x: T) -> T | None:
        """Return the root of ``x``, or None if it was never inserted."""
        return forest.resolve(self._parent, x)

    def union(self, x: T, y: T) -> T:
        """Merge the classes of ``x`` and ``y``. Returns the surviving root."""
        return forest.link(self._parent, x, y)

    def add(self, elements: Iterable[T]) -> None:
        """Insert each absent element as a singleton class."""
        for x in elements:
            if x not in self._parent:
                self._parent[x] = x

    def groups(self) -> dict[T, tuple[T, ...]]:
        """Return all classes as root -> members."""
        return forest.group(self._parent)

    def freeze(self) -> DisjointSet[T]:
        """Return an immutable snapshot of the current state."""
        from disjoint_set.core.disjoint_set import DisjointSet

        return DisjointSet._wrap(dict(self._parent))

    def __contains__(self, x: object) -> bool:
        return x in self._parent

    def __iter__(self) -> Iterator[T]:
        return iter(self._parent)

    def __len__(self) -> int:
        return len(self._parent)

    def __repr__(self) -> str:
        return f"MutableDisjointSet({self._parent!r})"
