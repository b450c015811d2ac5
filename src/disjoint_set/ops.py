"""Functional interface: each operation takes the structure as its last argument.

    >>> s = union("a", "b", empty())
    >>> to_dict(s)
    {'a': 'a', 'b': 'a'}
    >>> find("b", s)
    'a'

Structures are never modified; every update returns a new value.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from disjoint_set.config import Backend, backend_class
from disjoint_set.core.assoc import AssocDisjointSet
from disjoint_set.core.base import DisjointSetLike
from disjoint_set.core.disjoint_set import DisjointSet


def empty(backend: str | Backend = Backend.HASH) -> DisjointSetLike:
    """Return a structure with no elements."""
    result: DisjointSetLike = backend_class(backend).empty()
    return result


def union(x: Any, y: Any, dset: DisjointSetLike) -> DisjointSetLike:
    """Merge the classes of ``x`` and ``y``. The root of ``x`` survives."""
    return dset.union(x, y)


def find(x: Any, dset: DisjointSetLike) -> Any | None:
    """Root of ``x``, or None when ``x`` was never inserted."""
    return dset.find(x)


def has(x: Any, dset: DisjointSetLike) -> bool:
    return dset.has(x)


def items(dset: DisjointSetLike) -> tuple[Any, ...]:
    return dset.items()


def add(xs: Iterable[Any], dset: DisjointSetLike) -> DisjointSetLike:
    """Insert every absent element of ``xs`` as a singleton class."""
    return dset.add(xs)


def from_list(
    pairs: Iterable[tuple[Any, Any]], backend: str | Backend = Backend.HASH
) -> DisjointSetLike:
    """Fold ``union`` over ``pairs`` in order, starting from ``empty()``."""
    result: DisjointSetLike = backend_class(backend).from_list(pairs)
    return result


def from_dict(mapping: Mapping[Any, Any], backend: str | Backend = Backend.HASH) -> DisjointSetLike:
    """Fold ``union`` over ``mapping.items()`` in order."""
    return from_list(mapping.items(), backend)


def to_list(dset: DisjointSetLike) -> list[tuple[Any, Any]]:
    """Raw ``(element, immediate parent)`` pairs."""
    return dset.to_list()


def to_dict(dset: DisjointSetLike) -> dict[Any, Any]:
    """Raw element -> immediate parent mapping."""
    return dset.to_dict()


def groups(dset: DisjointSetLike) -> dict[Any, tuple[Any, ...]]:
    """Every class as root -> members.

    Roots of an association-list structure must be hashable here.
    """
    if isinstance(dset, DisjointSet):
        return dset.groups()
    if isinstance(dset, AssocDisjointSet):
        return dict(dset.groups())
    raise TypeError(f"cannot group {type(dset).__name__}")
