"""Association-list disjoint set for elements that only support ``==``.

Lookups are linear in the number of elements. Use ``DisjointSet`` whenever
elements are hashable.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from disjoint_set.core.forest import same_node

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, eq=False, repr=False)
class AssocDisjointSet(Generic[T]):
    """
    Immutable disjoint set stored as a tuple of ``(element, parent)`` pairs.

    Same contract and root policy as ``DisjointSet``: ``union(a, b)`` keeps
    the root of ``a``, compresses both chains, and appends new elements in
    chain order, so both backends yield identical ``to_list()`` output for
    the same sequence of operations.

    Pairs passed to the constructor are checked: each element appears once,
    every parent is an element and every chain ends at a self-rooted element.

    Attributes:
        pairs: ``(element, parent)`` entries in insertion order
    """

    pairs: tuple[tuple[T, T], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "pairs", tuple(self.pairs))
        self._validate()

    @classmethod
    def _wrap(cls, pairs: tuple[tuple[T, T], ...]) -> AssocDisjointSet[T]:
        """Adopt pairs produced by a union without re-validating them."""
        result = object.__new__(cls)
        object.__setattr__(result, "pairs", pairs)
        return result

    @classmethod
    def empty(cls) -> AssocDisjointSet[T]:
        return cls()

    @classmethod
    def from_list(cls, pairs: Iterable[tuple[T, T]]) -> AssocDisjointSet[T]:
        """Build a disjoint set by unioning each pair in order."""
        result: AssocDisjointSet[T] = cls()
        for x, y in pairs:
            result = result.union(x, y)
        logger.debug("Built association-list disjoint set of %d elements", len(result))
        return result

    @classmethod
    def from_dict(cls, mapping: Mapping[T, T]) -> AssocDisjointSet[T]:
        return cls.from_list(mapping.items())

    def _validate(self) -> None:
        for i, (node, up) in enumerate(self.pairs):
            if self._index(node) != i:
                raise ValueError(f"element {node!r} appears more than once")
            if self._index(up) is None:
                raise ValueError(f"parent {up!r} of {node!r} is not an element of the set")

        for start, _ in self.pairs:
            node, up = start, self._parent_of(start)
            for _ in range(len(self.pairs)):
                if same_node(up, node):
                    break
                node, up = up, self._parent_of(up)
            else:
                raise ValueError(f"parent chain of {start!r} does not reach a root")

    def _index(self, x: Any) -> int | None:
        for i, (node, _) in enumerate(self.pairs):
            if same_node(node, x):
                return i
        return None

    def _parent_of(self, x: T) -> T:
        i = self._index(x)
        if i is None:
            raise ValueError(f"{x!r} is not an element of the set")
        return self.pairs[i][1]

    def _chain(self, x: T) -> list[T]:
        path = [x]
        if self._index(x) is None:
            return path
        node, up = x, self._parent_of(x)
        while not same_node(up, node):
            node = up
            path.append(node)
            up = self._parent_of(node)
        return path

    def union(self, x: T, y: T) -> AssocDisjointSet[T]:
        """Merge the classes of ``x`` and ``y``; the root of ``x`` survives."""
        path_x = self._chain(x)
        root = path_x[-1]
        touched: list[T] = []
        for node in path_x + self._chain(y):
            if node not in touched:
                touched.append(node)

        updated = [(node, root if node in touched else up) for node, up in self.pairs]
        updated.extend((node, root) for node in touched if self._index(node) is None)
        return AssocDisjointSet._wrap(tuple(updated))

    def find(self, x: T) -> T | None:
        """Return the root of ``x``, or None if ``x`` was never inserted."""
        if self._index(x) is None:
            return None
        return self._chain(x)[-1]

    def has(self, x: T) -> bool:
        return self._index(x) is not None

    def same(self, x: T, y: T) -> bool:
        """Check whether ``x`` and ``y`` are both present and equivalent."""
        return self.has(x) and self.has(y) and same_node(self.find(x), self.find(y))

    def items(self) -> tuple[T, ...]:
        return tuple(node for node, _ in self.pairs)

    def add(self, elements: Iterable[T]) -> AssocDisjointSet[T]:
        """Insert each absent element as its own singleton class."""
        updated = list(self.pairs)
        for x in elements:
            if not any(same_node(node, x) for node, _ in updated):
                updated.append((x, x))
        return AssocDisjointSet._wrap(tuple(updated))

    def roots(self) -> tuple[T, ...]:
        return tuple(node for node, up in self.pairs if same_node(node, up))

    def groups(self) -> list[tuple[T, tuple[T, ...]]]:
        """Return every class as ``(root, members)``, roots in first-seen order.

        A list rather than a dict because roots need not be hashable.
        """
        result: list[tuple[T, list[T]]] = []
        for node, _ in self.pairs:
            root = self._chain(node)[-1]
            for seen, members in result:
                if same_node(seen, root):
                    members.append(node)
                    break
            else:
                result.append((root, [node]))
        return [(root, tuple(members)) for root, members in result]

    def to_list(self) -> list[tuple[T, T]]:
        """Raw ``(element, immediate parent)`` pairs."""
        return list(self.pairs)

    def to_dict(self) -> dict[T, T]:
        """Raw element -> immediate parent mapping. Elements must be hashable."""
        return dict(self.pairs)

    def __contains__(self, x: object) -> bool:
        return self._index(x) is not None

    def __iter__(self) -> Iterator[T]:
        return iter(self.items())

    def __len__(self) -> int:
        return len(self.pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AssocDisjointSet):
            return NotImplemented
        if len(self.pairs) != len(other.pairs):
            return False
        return all(pair in other.pairs for pair in self.pairs)

    def __repr__(self) -> str:
        return f"AssocDisjointSet({list(self.pairs)!r})"
